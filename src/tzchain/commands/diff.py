"""Command: signed offset difference between two zones."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.commands._base import TzCommand

if TYPE_CHECKING:
    from tzchain.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzchain diff America/Chicago UTC
  tzchain diff America/New_York America/Chicago --at "2020-11-23 00:00:00"
  tzchain diff Africa/Cairo Europe/Moscow --format hours""",
)
@click.argument("zone_a")
@click.argument("zone_b")
@click.option("--at", "at", default=None, help="Reference moment (UTC unless an offset is given).")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["seconds", "hours"]),
    default="seconds",
    help="Result unit.",
)
@click.pass_obj
def diff(app: AppContext, zone_a: str, zone_b: str, at: str | None, fmt: str) -> None:
    """Show how far ZONE_A is ahead of (+) or behind (-) ZONE_B."""
    app.emit(app.service.diff(zone_a, zone_b, at=at, fmt=fmt))
