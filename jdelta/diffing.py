# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .errors import DiffError
from .log import debug
from .patch_format import op_add, op_remove, op_replace
from .pointer import JsonPointer
from .utils import ValueKind, value_kind, clone_value

__all__ = ["diff"]


def diff(a, b):
    """Compute a JSON Patch transforming a into b.

    Applying the returned operations to a in strict mode yields
    a value structurally equal to b. The patch is not guaranteed
    to be minimal: arrays of different lengths are replaced as
    a whole.

    Raises DiffError if either value is not JSON representable,
    or on any other failure while diffing.
    """
    try:
        # Validates both values and decouples the patch from the inputs
        a = clone_value(a)
        b = clone_value(b)
        d = diff_values(a, b, JsonPointer())
    except Exception as e:
        raise DiffError("Could not diff values: %s" % (e,)) from e
    debug("Computed patch with %d operations", len(d))
    return d


def diff_values(a, b, path):
    "Diff two validated values with operations rooted at path."
    ka = value_kind(a)
    kb = value_kind(b)

    if ka == ValueKind.NULL and kb == ValueKind.NULL:
        return []
    # Null is swapped wholesale, never diffed structurally
    if ka == ValueKind.NULL or kb == ValueKind.NULL:
        return [op_replace(path, b)]

    if ka == ValueKind.OBJECT and kb == ValueKind.OBJECT:
        return diff_dicts(a, b, path)
    if ka == ValueKind.ARRAY and kb == ValueKind.ARRAY:
        return diff_lists(a, b, path)

    if ka != kb or a != b:
        return [op_replace(path, b)]
    return []


def diff_dicts(a, b, path):
    """Diff two dicts key by key.

    Keys are visited in sorted order so that the result is deterministic.
    """
    d = []
    for key in sorted(set(a) | set(b)):
        subpath = path.child(key)
        if key in a and key in b:
            d.extend(diff_values(a[key], b[key], subpath))
        elif key in a:
            d.append(op_remove(subpath))
        else:
            d.append(op_add(subpath, b[key]))
    return d


def diff_lists(a, b, path):
    """Diff two lists item by item.

    Lists of different lengths are replaced as a whole, no
    insert/delete alignment is attempted.
    """
    if len(a) != len(b):
        return [op_replace(path, b)]
    d = []
    for i, (x, y) in enumerate(zip(a, b)):
        d.extend(diff_values(x, y, path.child(i)))
    return d
