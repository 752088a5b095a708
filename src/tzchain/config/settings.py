"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TZCHAIN_*`` prefix (``TZCHAIN_ZONES__DEFAULT=UTC``)
  3. TOML file    — ``tzchain.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The ``[zones] default`` value is the installation-wide default zone. It is
read through :func:`get_default_zone` and passed explicitly to whatever
needs a fallback; nothing in the domain layer reads it ambiently.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tzchain.config.models import DiffConfig, ZonesConfig

CONFIG_FILENAME = "tzchain.toml"
CONFIG_ENV_VAR = "TZCHAIN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate tzchain.toml: ``$TZCHAIN_CONFIG`` first, then walk up from *start*."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``tzchain.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TzSettings(BaseSettings):
    """Settings for the tzchain CLI and services, frozen after construction.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        zones: ``[zones]`` section (default zone).
        diff: ``[diff]`` section (chain diff defaults).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TZCHAIN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    zones: ZonesConfig = Field(default_factory=ZonesConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TzSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``tzchain.toml`` by walking up from *start*. Invalid configuration
        (for example an unknown default zone) is reported as a
        :class:`click.ClickException`.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration ({source}): {exc}") from exc
        finally:
            _tls.toml_path = None


def get_default_zone(settings: TzSettings) -> str | None:
    """The configured default zone, or None for floating time."""
    return settings.zones.default
