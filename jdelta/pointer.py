# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) parsing, formatting and traversal."""

import re

from .errors import PatchError, ErrorKind
from .utils import ValueKind, value_kind


__all__ = ["JsonPointer", "escape_segment", "unescape_segment", "parse_index"]


# Token addressing the position one past the end of an array
APPEND_TOKEN = "-"

# RFC 6901 array indices: no sign, no leading zeros
r_index = re.compile(r"0|[1-9][0-9]*")


def escape_segment(segment):
    "Escape a single reference token. '~' must be escaped before '/'."
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_segment(segment):
    "Unescape a single reference token. '~1' must be decoded before '~0'."
    return segment.replace("~1", "/").replace("~0", "~")


def parse_index(segment):
    """Parse an array index segment.

    Raises a PatchError of kind INVALID_INDEX if segment is not a
    base-10 non-negative integer.
    """
    if not r_index.fullmatch(segment):
        raise PatchError(
            "Could not parse array index %r." % (segment,),
            ErrorKind.INVALID_INDEX)
    return int(segment)


class JsonPointer(object):
    """An immutable sequence of unescaped reference tokens.

    The empty pointer addresses the whole document.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments=()):
        object.__setattr__(self, "_segments", tuple(str(s) for s in segments))

    def __setattr__(self, name, value):
        raise AttributeError("JsonPointer is immutable")

    def __reduce__(self):
        return (JsonPointer, (self._segments,))

    @classmethod
    def from_string(cls, text):
        "Parse RFC 6901 pointer text."
        if not isinstance(text, str):
            raise PatchError(
                "Invalid pointer %r: expected a string." % (text,),
                ErrorKind.MALFORMED_POINTER)
        if text == "":
            return cls()
        if not text.startswith("/"):
            raise PatchError(
                "Invalid pointer %r: must be empty or start with '/'." % (text,),
                ErrorKind.MALFORMED_POINTER)
        return cls(unescape_segment(s) for s in text.split("/")[1:])

    @classmethod
    def from_segments(cls, segments):
        return cls(segments)

    @classmethod
    def join(cls, *pointers):
        "Concatenate the segments of several pointers."
        segments = []
        for p in pointers:
            if not isinstance(p, JsonPointer):
                p = cls.from_string(p)
            segments.extend(p.segments)
        return cls(segments)

    @property
    def segments(self):
        return self._segments

    @property
    def last(self):
        if not self._segments:
            raise PatchError(
                "The root pointer has no last segment.",
                ErrorKind.INVALID_OPERATION)
        return self._segments[-1]

    @property
    def parent(self):
        "Pointer to the container of the addressed value."
        if not self._segments:
            raise PatchError(
                "The root pointer has no parent.",
                ErrorKind.INVALID_OPERATION)
        return JsonPointer(self._segments[:-1])

    def is_root(self):
        return not self._segments

    def child(self, segment):
        return JsonPointer(self._segments + (str(segment),))

    def traverse(self, value):
        """Return the value addressed by this pointer.

        The '-' token is never readable, it only addresses the
        insertion point of an add.
        """
        current = value
        for depth, segment in enumerate(self._segments):
            kind = value_kind(current)
            if kind == ValueKind.OBJECT:
                if segment not in current:
                    raise PatchError(
                        "Key %r not found at %r." % (segment, self._prefix_text(depth)),
                        ErrorKind.PATH_NOT_FOUND)
                current = current[segment]
            elif kind == ValueKind.ARRAY:
                if segment == APPEND_TOKEN:
                    raise PatchError(
                        "Cannot read the '-' element of the array at %r." % (
                            self._prefix_text(depth),),
                        ErrorKind.PATH_NOT_FOUND)
                index = parse_index(segment)
                if index >= len(current):
                    raise PatchError(
                        "Index %d not found in array of length %d at %r." % (
                            index, len(current), self._prefix_text(depth)),
                        ErrorKind.PATH_NOT_FOUND)
                current = current[index]
            else:
                raise PatchError(
                    "Cannot traverse into %s value at %r." % (
                        kind, self._prefix_text(depth)),
                    ErrorKind.PATH_NOT_FOUND)
        return current

    def to_string(self):
        return "".join("/" + escape_segment(s) for s in self._segments)

    def _prefix_text(self, depth):
        return JsonPointer(self._segments[:depth]).to_string()

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "JsonPointer(%r)" % (self.to_string(),)

    def __eq__(self, other):
        if not isinstance(other, JsonPointer):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self):
        return hash(self._segments)

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)
