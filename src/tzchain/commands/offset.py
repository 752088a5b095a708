"""Command: UTC offset of one zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.commands._base import TzCommand

if TYPE_CHECKING:
    from tzchain.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzchain offset America/Chicago
  tzchain offset Pacific/Auckland --at "2020-11-23 00:00:00" --format hours
  tzchain offset              # uses [zones] default""",
)
@click.argument("zone", required=False)
@click.option("--at", "at", default=None, help="Reference moment (UTC unless an offset is given).")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["seconds", "hours"]),
    default="seconds",
    help="Result unit.",
)
@click.pass_obj
def offset(app: AppContext, zone: str | None, at: str | None, fmt: str) -> None:
    """Show the UTC offset of ZONE at a moment."""
    app.emit(app.service.offset(zone, at=at, fmt=fmt))
