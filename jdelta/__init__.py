# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff
from .errors import PatchError, TestFailedError, DiffError
from .patching import apply_patch
from .pointer import JsonPointer


__all__ = [
    "__version__",
    "diff", "apply_patch",
    "JsonPointer",
    "PatchError", "TestFailedError", "DiffError",
    ]
