"""Tests for diff option enums and unit conversion."""

import pytest

from tzchain.domain.errors import MalformedRequestError
from tzchain.domain.types import (
    DiffFormat,
    Direction,
    parse_direction,
    parse_format,
    to_format,
)


class TestParseFormat:
    def test_enum_passthrough(self) -> None:
        assert parse_format(DiffFormat.HOURS) is DiffFormat.HOURS

    @pytest.mark.parametrize("raw", ["hours", "HOURS", "  Hours "])
    def test_string_values(self, raw: str) -> None:
        assert parse_format(raw) is DiffFormat.HOURS

    @pytest.mark.parametrize("raw", ["minutes", "", "h", 3600, None])
    def test_rejects_unknown(self, raw: object) -> None:
        with pytest.raises(MalformedRequestError, match="Unsupported format"):
            parse_format(raw)  # type: ignore[arg-type]


class TestParseDirection:
    def test_default_members(self) -> None:
        assert parse_direction("left") is Direction.LEFT
        assert parse_direction("RIGHT") is Direction.RIGHT

    @pytest.mark.parametrize("raw", ["up", "l", "", None])
    def test_rejects_unknown(self, raw: object) -> None:
        with pytest.raises(MalformedRequestError, match="Unsupported direction"):
            parse_direction(raw)  # type: ignore[arg-type]


class TestToFormat:
    def test_seconds_is_identity(self) -> None:
        assert to_format(-21600, DiffFormat.SECONDS) == -21600

    def test_whole_hours(self) -> None:
        assert to_format(-10800, DiffFormat.HOURS) == -3
        assert to_format(46800, DiffFormat.HOURS) == 13

    def test_partial_hours_truncate_toward_zero(self) -> None:
        assert to_format(19800, DiffFormat.HOURS) == 5  # +5:30
        assert to_format(-12600, DiffFormat.HOURS) == -3  # -3:30, not -4
        assert to_format(-1800, DiffFormat.HOURS) == 0

    def test_zero(self) -> None:
        assert to_format(0, DiffFormat.HOURS) == 0
