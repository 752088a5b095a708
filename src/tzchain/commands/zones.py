"""Command: list zone identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.commands._base import TzCommand

if TYPE_CHECKING:
    from tzchain.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzchain zones
  tzchain zones --region Pacific
  tzchain -q zones --region America | wc -l""",
)
@click.option("--region", default=None, help="Only zones under this region (e.g. Europe).")
@click.pass_obj
def zones(app: AppContext, region: str | None) -> None:
    """List zone identifiers from the rule database."""
    app.emit(app.service.list_zones(region))
