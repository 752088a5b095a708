"""Request option enums for offset diffs.

``format`` and ``direction`` are closed sets. Strings are accepted at the
boundary but anything outside the two legal values is rejected eagerly.
"""

from __future__ import annotations

from enum import StrEnum

from tzchain.domain.errors import MalformedRequestError

SECONDS_PER_HOUR = 3600


class DiffFormat(StrEnum):
    """Unit of a diff result."""

    SECONDS = "seconds"
    HOURS = "hours"


class Direction(StrEnum):
    """Traversal direction of a zone chain."""

    LEFT = "left"
    RIGHT = "right"


def parse_format(value: DiffFormat | str) -> DiffFormat:
    """Coerce *value* to a :class:`DiffFormat` or raise MalformedRequestError."""
    if isinstance(value, DiffFormat):
        return value
    if isinstance(value, str):
        try:
            return DiffFormat(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(f.value for f in DiffFormat)
    raise MalformedRequestError(f"Unsupported format {value!r} (expected one of: {choices})")


def parse_direction(value: Direction | str) -> Direction:
    """Coerce *value* to a :class:`Direction` or raise MalformedRequestError."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(d.value for d in Direction)
    raise MalformedRequestError(f"Unsupported direction {value!r} (expected one of: {choices})")


def to_format(seconds: int, fmt: DiffFormat) -> int:
    """Express *seconds* in *fmt*, truncating partial hours toward zero.

    Examples:
        >>> to_format(-12600, DiffFormat.HOURS)
        -3
        >>> to_format(19800, DiffFormat.HOURS)
        5
    """
    if fmt is DiffFormat.SECONDS:
        return seconds
    hours = abs(seconds) // SECONDS_PER_HOUR
    return -hours if seconds < 0 else hours
