"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tzchain.toml only contains
overrides. An empty file means floating time and seconds/right diffs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from tzchain.domain.errors import UnknownZoneError
from tzchain.domain.types import DiffFormat, Direction, parse_direction, parse_format
from tzchain.domain.zones import is_known_zone


class ZonesConfig(BaseModel):
    """[zones] section.

    ``default`` is the installation's default zone. Unset or empty means
    floating time: no zone context is implied.
    """

    model_config = {"frozen": True}

    default: str | None = None

    @field_validator("default", mode="before")
    @classmethod
    def _known_zone(cls, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        if not is_known_zone(value):
            raise UnknownZoneError(value)
        return value


class DiffConfig(BaseModel):
    """[diff] section — defaults for chain diffs."""

    model_config = {"frozen": True}

    format: DiffFormat = DiffFormat.SECONDS
    direction: Direction = Direction.RIGHT

    @field_validator("format", mode="before")
    @classmethod
    def _check_format(cls, value: Any) -> DiffFormat:
        return parse_format(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _check_direction(cls, value: Any) -> Direction:
        return parse_direction(value)


class TzChainConfig(BaseModel):
    """Root config model mirroring tzchain.toml."""

    model_config = {"frozen": True}

    zones: ZonesConfig = Field(default_factory=ZonesConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
