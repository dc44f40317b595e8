# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

from .errors import PatchError, ErrorKind

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


class ValueKind:
    "The tags of the JSON value model."
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


def value_kind(value):
    """Classify a host value as one of the JSON value kinds.

    Only the outermost level is inspected. Raises a PatchError of
    kind NOT_JSON for values outside the JSON model.
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    raise PatchError(
        "Value of type %r is not JSON representable." % (type(value).__name__,),
        ErrorKind.NOT_JSON)


def clone_value(value):
    """Deep copy a JSON value, validating it on the way.

    Cycles, non-string keys and non-JSON leaves raise a
    PatchError of kind NOT_JSON.
    """
    return _clone(value, set())


def _clone(value, active):
    kind = value_kind(value)
    if kind not in (ValueKind.OBJECT, ValueKind.ARRAY):
        return value

    if id(value) in active:
        raise PatchError("Cyclic value is not JSON representable.", ErrorKind.NOT_JSON)
    active.add(id(value))
    try:
        if kind == ValueKind.OBJECT:
            copied = {}
            for k, v in value.items():
                if not isinstance(k, str):
                    raise PatchError(
                        "Object key %r is not a string." % (k,), ErrorKind.NOT_JSON)
                copied[k] = _clone(v, active)
        else:
            copied = [_clone(v, active) for v in value]
    finally:
        active.discard(id(value))
    return copied


def deep_equal(a, b):
    """Compare two JSON values structurally.

    Objects are equal when they have the same keys with equal values,
    arrays when they have equal items pairwise. Booleans never equal
    numbers, even though Python considers True == 1.
    """
    kind = value_kind(a)
    if kind != value_kind(b):
        return False
    if kind == ValueKind.OBJECT:
        if len(a) != len(b):
            return False
        for k, v in a.items():
            if k not in b or not deep_equal(v, b[k]):
                return False
        return True
    elif kind == ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    else:
        return a == b


def read_json(f, on_null='null'):
    """Read and return a json document from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "null": return None
            "empty": return empty dict
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'null':
            return None
        elif on_null == 'empty':
            return {}
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "null" or "empty"' % (on_null,))
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    return json.load(f)


def write_json(obj, filename):
    with io.open(filename, 'w', encoding='utf-8') as f:
        json.dump(obj, f, indent=2, separators=(",", ": "))
        f.write('\n')


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
