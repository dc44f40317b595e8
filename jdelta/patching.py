# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .errors import PatchError, TestFailedError, ErrorKind
from .log import debug
from .patch_format import (
    PatchOp, validate_operation, get_pointer, get_value, target_field
)
from .pointer import JsonPointer, APPEND_TOKEN, parse_index
from .utils import ValueKind, value_kind, clone_value, deep_equal


__all__ = ["apply_patch", "apply_operation"]


# Key of the document in the synthetic root object. Wrapping the
# document lets operations on the root share the code path of
# operations on any other child.
ROOT_KEY = "root"

_root_pointer = JsonPointer([ROOT_KEY])


def apply_patch(obj, patch, strict=True):
    """Produce a patched copy of obj by applying each operation in order.

    obj is never modified. Any failure aborts the whole patch.

    The document root counts as an existing value, so a strict add,
    move or copy targeting "" fails. Use replace to swap the document.

    If strict is False, adding a value that already exists replaces
    it, replacing a value that does not exist adds it, and removing
    a missing object key or array index does nothing.

    Raises TestFailedError if a test operation does not hold, and
    PatchError for any other invalid patch or input.
    """
    try:
        doc = clone_value(obj)
        count = 0
        for index, e in enumerate(patch):
            doc = apply_operation(doc, e, strict=strict, index=index)
            count += 1
        debug("Applied %d operations (strict=%s)", count, strict)
    except PatchError as e:
        debug("Patch aborted: %s", e)
        raise
    except Exception as e:
        raise PatchError(
            "An unknown error occurred while patching: %s" % (e,),
            ErrorKind.INTERNAL) from e
    return doc


def apply_operation(doc, e, strict=True, index=None):
    """Apply a single operation to doc in place.

    Returns the new document, which differs from doc when the
    operation targets the root.
    """
    validate_operation(e)
    op = e["op"]
    wrapper = {ROOT_KEY: doc}

    if op == PatchOp.ADD:
        path = get_pointer(e, "path")
        debug("Applying add at %r", str(path))
        _add_child(wrapper, _wrap(path), clone_value(get_value(e)), strict)
    elif op == PatchOp.REMOVE:
        path = get_pointer(e, "path")
        debug("Applying remove at %r", str(path))
        _remove_child(wrapper, _wrap(path), strict)
    elif op == PatchOp.REPLACE:
        path = get_pointer(e, "path")
        value = clone_value(get_value(e))
        debug("Applying replace at %r", str(path))
        _remove_child(wrapper, _wrap(path), strict)
        _add_child(wrapper, _wrap(path), value, strict)
    elif op == PatchOp.MOVE:
        from_ = get_pointer(e, "from")
        to = get_pointer(e, target_field(e))
        debug("Applying move from %r to %r", str(from_), str(to))
        value = _wrap(from_).traverse(wrapper)
        _remove_child(wrapper, _wrap(from_), strict)
        _add_child(wrapper, _wrap(to), value, strict)
    elif op == PatchOp.COPY:
        from_ = get_pointer(e, "from")
        to = get_pointer(e, target_field(e))
        debug("Applying copy from %r to %r", str(from_), str(to))
        value = clone_value(_wrap(from_).traverse(wrapper))
        _add_child(wrapper, _wrap(to), value, strict)
    elif op == PatchOp.TEST:
        path = get_pointer(e, "path")
        expected = get_value(e)
        actual = _wrap(path).traverse(wrapper)
        if not deep_equal(actual, expected):
            debug("Test failed at %r: %r != %r", str(path), actual, expected)
            raise TestFailedError(e, index)
    else:
        raise PatchError(
            "Invalid JSON Patch operation: %r." % (op,),
            ErrorKind.UNKNOWN_OPERATION)

    return wrapper.get(ROOT_KEY)


def _wrap(pointer):
    return JsonPointer.join(_root_pointer, pointer)


def _add_child(wrapper, pointer, value, strict):
    parent = pointer.parent.traverse(wrapper)
    child = pointer.last
    kind = value_kind(parent)
    if kind == ValueKind.OBJECT:
        if strict and child in parent:
            raise PatchError(
                "Tried to add value at existing key %r. "
                "Set strict to False to allow this." % (child,),
                ErrorKind.DUPLICATE_KEY)
        parent[child] = value
    elif kind == ValueKind.ARRAY:
        if child == APPEND_TOKEN:
            parent.append(value)
        else:
            index = parse_index(child)
            if index > len(parent):
                raise PatchError(
                    "Array index %d out of bounds for insertion into "
                    "array of length %d." % (index, len(parent)),
                    ErrorKind.INDEX_OUT_OF_BOUNDS)
            parent.insert(index, value)
    else:
        raise PatchError(
            "Can only add child to object or array, not %s." % (kind,),
            ErrorKind.INVALID_TARGET)


def _remove_child(wrapper, pointer, strict):
    parent = pointer.parent.traverse(wrapper)
    child = pointer.last
    kind = value_kind(parent)
    if kind == ValueKind.OBJECT:
        if child not in parent:
            if strict:
                raise PatchError(
                    "Tried to remove missing key %r. "
                    "Set strict to False to allow this." % (child,),
                    ErrorKind.MISSING_KEY)
            debug("Ignoring removal of missing key %r", child)
            return
        del parent[child]
    elif kind == ValueKind.ARRAY:
        index = parse_index(child)
        if index >= len(parent):
            if strict:
                raise PatchError(
                    "Tried to remove array index %d out of bounds for "
                    "array of length %d. Set strict to False to allow "
                    "this." % (index, len(parent)),
                    ErrorKind.INDEX_OUT_OF_BOUNDS)
            debug("Ignoring removal of missing index %d", index)
            return
        del parent[index]
    else:
        raise PatchError(
            "Can only remove child from object or array, not %s." % (kind,),
            ErrorKind.INVALID_TARGET)
