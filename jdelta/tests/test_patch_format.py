# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import pytest
from jsonschema import Draft4Validator as Validator
from jsonschema.exceptions import ValidationError

from jdelta import diff, PatchError
from jdelta.errors import ErrorKind
from jdelta.patch_format import (
    PatchOperation, PatchOp, op_add, op_remove, op_replace, op_move, op_copy,
    op_test, validate_patch, is_valid_patch, to_operations,
)
from jdelta.pointer import JsonPointer


def test_check_schema(json_schema_patch):
    Validator.check_schema(json_schema_patch)


def test_validate_obj_patch(patch_validator):
    a = {"foo": [1, 2, 3], "bar": {"ting": 7, "tang": 123}, "x/y": None}
    b = {"foo": [1, 3, 4], "bar": {"tang": 126, "hello": "world"}, "x/y": 1}
    patch_validator.validate(diff(a, b))


def test_validate_array_patch(patch_validator):
    patch_validator.validate(diff([2, 3, 4], [1, 2, 4, 6]))


def test_validate_constructed_patch(patch_validator):
    patch = [
        op_add("/a", 1), op_remove("/b"), op_replace("", None),
        op_move("/c", "/d"), op_copy("/e~1f", "/g~0"), op_test("/h/0", [1]),
    ]
    patch_validator.validate(json.loads(json.dumps(patch)))


def test_schema_rejects_malformed(patch_validator):
    with pytest.raises(ValidationError):
        patch_validator.validate([{"op": "add", "path": "/a"}])
    with pytest.raises(ValidationError):
        patch_validator.validate([{"op": "remove", "path": "a"}])
    with pytest.raises(ValidationError):
        patch_validator.validate([{"op": "add", "path": "/~2", "value": 1}])
    with pytest.raises(ValidationError):
        patch_validator.validate([{"op": "move", "from": "/a"}])


def test_schema_accepts_rfc_transfer_target(patch_validator):
    patch = [{"op": "copy", "from": "/a", "path": "/b"},
             {"op": "move", "from": "/b", "path": "/c"}]
    patch_validator.validate(patch)
    assert is_valid_patch(patch)


def test_operation_constructors():
    e = op_add(JsonPointer(["a", "b/c"]), 1)
    assert e == {"op": "add", "path": "/a/b~1c", "value": 1}
    assert e.op == PatchOp.ADD
    assert e.path == "/a/b~1c"
    assert e.value == 1

    e = op_move("/a", "/b")
    assert e == {"op": "move", "from": "/a", "to": "/b"}
    assert e.from_ == "/a"
    assert e.to == "/b"

    assert op_remove("/a") == {"op": "remove", "path": "/a"}
    assert op_copy("", "/x")["from"] == ""


def test_operation_is_read_only():
    e = op_add("/a", 1)
    with pytest.raises(AttributeError):
        e.path = "/b"
    with pytest.raises(AttributeError):
        e.missing


def test_operation_serializes_as_dict():
    e = op_test("/a", {"b": [1, None]})
    assert json.loads(json.dumps(e)) == {"op": "test", "path": "/a", "value": {"b": [1, None]}}


def test_validate_patch():
    validate_patch([])
    validate_patch([op_add("/a", None), {"op": "copy", "from": "/a", "path": "/b"}])
    assert is_valid_patch([op_remove("")])
    assert not is_valid_patch({"op": "remove", "path": ""})
    assert not is_valid_patch([{"op": "test", "path": "/a"}])
    assert not is_valid_patch([{"op": "copy", "from": "/a"}])

    with pytest.raises(PatchError) as e:
        validate_patch([{"op": "frobnicate", "path": ""}])
    assert e.value.kind == ErrorKind.UNKNOWN_OPERATION


def test_to_operations():
    ops = to_operations(json.loads('[{"op": "remove", "path": "/a"}]'))
    assert len(ops) == 1
    assert isinstance(ops[0], PatchOperation)
    assert ops[0].path == "/a"

    with pytest.raises(PatchError):
        to_operations([{"op": "remove"}])

