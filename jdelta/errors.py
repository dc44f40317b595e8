# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class ErrorKind:
    "Collection of valid values for the kind field of a PatchError."
    MALFORMED_POINTER = "malformed-pointer"
    INVALID_OPERATION = "invalid-operation"
    PATH_NOT_FOUND = "path-not-found"
    INVALID_INDEX = "invalid-index"
    INDEX_OUT_OF_BOUNDS = "index-out-of-bounds"
    DUPLICATE_KEY = "duplicate-key"
    MISSING_KEY = "missing-key"
    INVALID_TARGET = "invalid-target"
    UNKNOWN_OPERATION = "unknown-operation"
    MALFORMED_OPERATION = "malformed-operation"
    NOT_JSON = "not-json"
    TEST_FAILED = "test-failed"
    INTERNAL = "internal"


class PatchError(ValueError):
    """The patch, pointer or input value was invalid.

    Callers are expected to treat all kinds alike; `kind` is
    informational and mostly useful for tests and logging.
    """

    def __init__(self, message, kind=ErrorKind.INTERNAL):
        super(PatchError, self).__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return "%s [%s]" % (self.message, self.kind)


class TestFailedError(PatchError):
    """A `test` operation did not hold.

    Carries the failing operation so callers can e.g. refetch the
    document and retry.
    """

    # Keep pytest from collecting this class
    __test__ = False

    def __init__(self, operation, index=None):
        message = "Test operation failed at %r" % (operation.get("path"),)
        if index is not None:
            message += " (operation #%d)" % index
        super(TestFailedError, self).__init__(message, ErrorKind.TEST_FAILED)
        self.operation = operation
        self.index = index


class DiffError(PatchError):
    "Diffing failed, typically because an input is not JSON representable."

    def __init__(self, message="An unknown error occurred while diffing."):
        super(DiffError, self).__init__(message, ErrorKind.INTERNAL)
