"""Pairwise and chained UTC-offset differences.

Sign convention: ``diff(a, b, t) < 0`` means zone *a*'s clock is behind
zone *b*'s at instant *t*.

A chain folds the pairwise diff over consecutive zones::

    diff(z0, z1) + diff(z1, z2) + ... + diff(zn-1, zn)

``direction=left`` walks the same list from the other end, which yields
exactly the negated ``right`` result.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from itertools import pairwise
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from tzchain.domain.civil import to_instant
from tzchain.domain.errors import MalformedRequestError
from tzchain.domain.types import (
    DiffFormat,
    Direction,
    parse_direction,
    parse_format,
    to_format,
)
from tzchain.domain.zones import resolve_offset

MIN_CHAIN_LENGTH = 2


def offset(
    zone: str,
    at: datetime | str | float | None = None,
    fmt: DiffFormat | str = DiffFormat.SECONDS,
) -> int:
    """UTC offset of a single *zone* at *at*, in *fmt* units."""
    return to_format(resolve_offset(zone, to_instant(at)), parse_format(fmt))


def diff(zone_a: str, zone_b: str, at: datetime | str | float | None = None) -> int:
    """Signed seconds by which *zone_a* is ahead of *zone_b* at *at*."""
    instant = to_instant(at)
    return resolve_offset(zone_a, instant) - resolve_offset(zone_b, instant)


class DiffRequest(BaseModel):
    """Validated input for :func:`diff_multi`.

    Attributes:
        zones: Ordered zone identifiers, at least two.
        at: Reference instant (aware, UTC).
        format: Unit of the result.
        direction: ``right`` folds left-to-right; ``left`` folds from the end.
    """

    model_config = {"frozen": True}

    zones: tuple[str, ...] = Field(min_length=MIN_CHAIN_LENGTH)
    at: datetime
    format: DiffFormat = DiffFormat.SECONDS
    direction: Direction = Direction.RIGHT

    @field_validator("at", mode="before")
    @classmethod
    def _normalise_at(cls, value: Any) -> datetime:
        return to_instant(value)

    @field_validator("format", mode="before")
    @classmethod
    def _check_format(cls, value: Any) -> DiffFormat:
        return parse_format(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _check_direction(cls, value: Any) -> Direction:
        return parse_direction(value)

    @classmethod
    def build(
        cls,
        zones: Iterable[str],
        at: datetime | str | float | None = None,
        format: DiffFormat | str = DiffFormat.SECONDS,
        direction: Direction | str = Direction.RIGHT,
    ) -> DiffRequest:
        """Construct a request, raising domain errors instead of ValidationError."""
        if isinstance(zones, str):
            raise MalformedRequestError("zones must be a sequence of zone identifiers")
        zone_list = tuple(zones)
        if len(zone_list) < MIN_CHAIN_LENGTH:
            raise MalformedRequestError(
                f"A diff needs at least {MIN_CHAIN_LENGTH} zones, got {len(zone_list)}"
            )
        instant = to_instant(at)
        fmt = parse_format(format)
        way = parse_direction(direction)
        try:
            return cls(zones=zone_list, at=instant, format=fmt, direction=way)
        except ValidationError as exc:
            raise MalformedRequestError(str(exc)) from exc

    @classmethod
    def from_mapping(cls, args: Mapping[str, Any]) -> DiffRequest:
        """Build from an option mapping with keys zones/at/format/direction."""
        unknown = set(args) - {"zones", "at", "format", "direction"}
        if unknown:
            raise MalformedRequestError(f"Unknown request options: {', '.join(sorted(unknown))}")
        if "zones" not in args:
            raise MalformedRequestError("zones is required")
        return cls.build(**args)

    def ordered_zones(self) -> tuple[str, ...]:
        """Zones in traversal order for this request's direction."""
        if self.direction is Direction.LEFT:
            return tuple(reversed(self.zones))
        return self.zones


def diff_multi(request: DiffRequest | Mapping[str, Any]) -> int:
    """Fold a zone chain into one net offset.

    Every zone is resolved before folding, so an unknown identifier fails
    the whole request regardless of its position.
    """
    if not isinstance(request, DiffRequest):
        request = DiffRequest.from_mapping(request)

    offsets = [resolve_offset(zone, request.at) for zone in request.ordered_zones()]
    total = sum(a - b for a, b in pairwise(offsets))
    return to_format(total, request.format)
