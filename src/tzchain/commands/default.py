"""Command: show the configured default zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.commands._base import TzCommand

if TYPE_CHECKING:
    from tzchain.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzchain default
  TZCHAIN_ZONES__DEFAULT=Europe/Oslo tzchain default
  tzchain -q default""",
)
@click.pass_obj
def default(app: AppContext) -> None:
    """Show the default zone ("floating" when none is configured)."""
    app.emit(app.service.default_zone())
