"""Shared pytest fixtures for tzchain tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from tzchain.config.settings import TzSettings
from tzchain.services.zones import ZoneService


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no TZCHAIN_* env vars."""
    for key in list(os.environ):
        if key.startswith("TZCHAIN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler/level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tz_logger = logging.getLogger("tzchain")
    tz_level = tz_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tz_logger.setLevel(tz_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., TzSettings]:
    """Factory for settings rooted at the test's temp directory."""

    def _make(**flags: Any) -> TzSettings:
        return TzSettings.from_cli(start=tmp_path, **flags)

    return _make


@pytest.fixture
def service(make_settings: Callable[..., TzSettings]) -> ZoneService:
    """ZoneService with floating time (no default zone)."""
    return ZoneService(make_settings())


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a tzchain.toml into the temp directory and return its path."""

    def _write(body: str) -> Path:
        path = tmp_path / "tzchain.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
