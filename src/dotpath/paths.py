"""Path tokenizing and tree traversal for JSON-like documents."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = (
    JSONScalar | list["JSONValue"] | tuple["JSONValue", ...] | dict[str, "JSONValue"]
)

SEPARATOR = "."
ESCAPE = "\\"


class LookupFailure(enum.Enum):
    KEY_NOT_FOUND = "key_not_found"
    INDEX_INVALID = "index_invalid"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_PATH_ENTRY = "invalid_path_entry"


@dataclass(frozen=True)
class Resolution:
    """Outcome of walking a segment sequence.

    ``failure``, ``segment`` and ``depth`` are only set when ``found`` is false.
    ``depth`` is the index of the segment that could not be followed.
    """

    found: bool
    value: JSONValue = None
    failure: LookupFailure | None = None
    segment: str | None = None
    depth: int | None = None

    def describe(self) -> str:
        if self.found:
            return "found"
        assert self.failure is not None
        return _FAILURE_MESSAGES[self.failure].format(
            segment=self.segment, depth=self.depth
        )


_FAILURE_MESSAGES = {
    LookupFailure.KEY_NOT_FOUND: "object has no key {segment!r} (segment {depth})",
    LookupFailure.INDEX_INVALID: (
        "array expected an integer index, got {segment!r} (segment {depth})"
    ),
    LookupFailure.INDEX_OUT_OF_RANGE: (
        "array index {segment!r} is out of range (segment {depth})"
    ),
    LookupFailure.TYPE_MISMATCH: (
        "cannot descend into a scalar with {segment!r} (segment {depth})"
    ),
}


def split_path(path: str) -> tuple[str, ...]:
    """Split ``path`` on unescaped dots.

    ``\\.`` is a literal dot and ``\\\\`` a literal backslash; any other escaped
    character is kept as-is. Always returns at least one segment, so ``""``
    yields ``("",)``. A trailing unescaped backslash is kept as a literal
    backslash at the end of the last segment.
    """

    segments: list[str] = []
    buffer: list[str] = []
    escaping = False

    for char in path:
        if escaping:
            buffer.append(char)
            escaping = False
        elif char == ESCAPE:
            escaping = True
        elif char == SEPARATOR:
            segments.append("".join(buffer))
            buffer = []
        else:
            buffer.append(char)

    if escaping:
        buffer.append(ESCAPE)
    segments.append("".join(buffer))
    return tuple(segments)


def escape_segment(segment: str) -> str:
    """Escape ``segment`` so it survives ``split_path`` as a single segment."""

    return segment.replace(ESCAPE, ESCAPE * 2).replace(SEPARATOR, ESCAPE + SEPARATOR)


def join_path(segments: Sequence[str]) -> str:
    return SEPARATOR.join(escape_segment(segment) for segment in segments)


def parse_index(segment: str) -> int | None:
    """Parse a base-10 array index with an optional sign, or return None."""

    digits = segment[1:] if segment[:1] in ("-", "+") else segment
    # str.isdigit accepts non-ASCII digits such as superscripts
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    return int(segment)


def resolve(root: JSONValue, segments: Sequence[str]) -> Resolution:
    """Walk ``segments`` from ``root`` without mutating it.

    Dicts are addressed by key, lists and tuples by integer index (negative
    indices count from the end). A stored ``None`` is a found value.
    """

    current: JSONValue = root
    for depth, segment in enumerate(segments):
        match current:
            case dict():
                if segment not in current:
                    return _missing(LookupFailure.KEY_NOT_FOUND, segment, depth)
                current = current[segment]
            case list() | tuple():
                index = parse_index(segment)
                if index is None:
                    return _missing(LookupFailure.INDEX_INVALID, segment, depth)
                if index < 0:
                    index += len(current)
                if not 0 <= index < len(current):
                    return _missing(LookupFailure.INDEX_OUT_OF_RANGE, segment, depth)
                current = current[index]
            case _:
                # scalars, plus leaves such as Decimal from json parse_float hooks
                return _missing(LookupFailure.TYPE_MISMATCH, segment, depth)

    return Resolution(found=True, value=current)


def _missing(failure: LookupFailure, segment: str, depth: int) -> Resolution:
    return Resolution(found=False, failure=failure, segment=segment, depth=depth)


__all__ = [
    "ESCAPE",
    "JSONScalar",
    "JSONValue",
    "LookupFailure",
    "Resolution",
    "SEPARATOR",
    "escape_segment",
    "join_path",
    "parse_index",
    "resolve",
    "split_path",
]
