# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from .errors import PatchError, ErrorKind
from .pointer import JsonPointer


class PatchOperation(dict):
    """A single JSON Patch operation.

    Minimal class providing attribute access to operation keys,
    while remaining a plain dict for json serialization.
    Attribute assignment is refused, but item assignment works as
    on any dict. jdelta itself never modifies an operation after
    construction.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        raise AttributeError("PatchOperation is immutable")

    @property
    def from_(self):
        return self["from"]


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Operation kinds that carry a value
VALUE_OPS = (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST)

# Operation kinds that address a source and a target
TRANSFER_OPS = (PatchOp.MOVE, PatchOp.COPY)

ALL_OPS = VALUE_OPS + (PatchOp.REMOVE,) + TRANSFER_OPS


def _pointer_text(path):
    if isinstance(path, JsonPointer):
        return path.to_string()
    return path


def op_add(path, value):
    "Create an operation adding value at path."
    return PatchOperation(op=PatchOp.ADD, path=_pointer_text(path), value=value)

def op_remove(path):
    "Create an operation removing the value at path."
    return PatchOperation(op=PatchOp.REMOVE, path=_pointer_text(path))

def op_replace(path, value):
    "Create an operation replacing the value at path with given value."
    return PatchOperation(op=PatchOp.REPLACE, path=_pointer_text(path), value=value)

def op_move(from_, to):
    "Create an operation moving the value at from_ to to."
    return PatchOperation({"op": PatchOp.MOVE, "from": _pointer_text(from_), "to": _pointer_text(to)})

def op_copy(from_, to):
    "Create an operation copying the value at from_ to to."
    return PatchOperation({"op": PatchOp.COPY, "from": _pointer_text(from_), "to": _pointer_text(to)})

def op_test(path, value):
    "Create an operation asserting that the value at path equals value."
    return PatchOperation(op=PatchOp.TEST, path=_pointer_text(path), value=value)


def target_field(e):
    """Name of the field holding the target pointer of an operation.

    Move and copy target `to`, falling back to the RFC 6902
    spelling `path` when `to` is absent.
    """
    if e.get("op") in TRANSFER_OPS and "to" not in e and "path" in e:
        return "path"
    return "to" if e.get("op") in TRANSFER_OPS else "path"


def get_pointer(e, name):
    """Extract and parse a pointer field of an operation.

    Raises PatchError if the field is missing or not valid pointer text.
    """
    if name not in e:
        raise PatchError(
            'Patch field "%s" is missing in %r operation.' % (name, e.get("op")),
            ErrorKind.MALFORMED_OPERATION)
    text = e[name]
    if not isinstance(text, str):
        raise PatchError(
            'Invalid path %r in field "%s": expected a string.' % (text, name),
            ErrorKind.MALFORMED_OPERATION)
    return JsonPointer.from_string(text)


def get_value(e, name="value"):
    if name not in e:
        raise PatchError(
            'Patch field "%s" is missing in %r operation.' % (name, e.get("op")),
            ErrorKind.MALFORMED_OPERATION)
    return e[name]


def validate_operation(e):
    """Check that e is a well formed patch operation.

    Raises a PatchError if not well formed.
    """
    if not isinstance(e, Mapping):
        raise PatchError(
            "Patch operation %r is not an object." % (e,),
            ErrorKind.MALFORMED_OPERATION)
    if "op" not in e:
        raise PatchError(
            'Patch field "op" is missing.', ErrorKind.MALFORMED_OPERATION)
    op = e["op"]
    if op not in ALL_OPS:
        raise PatchError(
            "Invalid JSON Patch operation: %r." % (op,),
            ErrorKind.UNKNOWN_OPERATION)

    if op in TRANSFER_OPS:
        get_pointer(e, "from")
        get_pointer(e, target_field(e))
    else:
        get_pointer(e, "path")
    if op in VALUE_OPS:
        get_value(e)


def validate_patch(patch):
    """Check that a patch (list of operations) is well formed.

    Raises a PatchError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchError("Patch must be a list.", ErrorKind.MALFORMED_OPERATION)
    for e in patch:
        validate_operation(e)


def is_valid_patch(patch):
    """Checks whether a patch is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchError:
        return False
    return True


def to_operations(patch):
    "Convert parsed json (a list of dicts) into validated PatchOperations."
    validate_patch(patch)
    return [PatchOperation(e) for e in patch]

