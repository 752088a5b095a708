"""Command: net offset across an ordered chain of zones."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.commands._base import TzCommand

if TYPE_CHECKING:
    from tzchain.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzchain chain America/Chicago America/New_York Atlantic/South_Georgia
  tzchain chain America/Los_Angeles America/New_York --format hours --direction left
  tzchain --json chain Europe/Oslo UTC Asia/Tokyo --at 2024-06-01T12:00:00""",
)
@click.argument("zones", nargs=-1, required=True)
@click.option("--at", "at", default=None, help="Reference moment (UTC unless an offset is given).")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["seconds", "hours"]),
    default=None,
    help="Result unit (default from [diff] format).",
)
@click.option(
    "--direction",
    type=click.Choice(["left", "right"]),
    default=None,
    help="Fold direction (default from [diff] direction).",
)
@click.pass_obj
def chain(
    app: AppContext,
    zones: tuple[str, ...],
    at: str | None,
    fmt: str | None,
    direction: str | None,
) -> None:
    """Fold the pairwise diffs of ZONES into one net offset."""
    app.emit(app.service.diff_multi(list(zones), at=at, fmt=fmt, direction=direction))
