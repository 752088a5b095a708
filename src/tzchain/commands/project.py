"""Command: project civil time in a zone onto an absolute instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.commands._base import TzCommand

if TYPE_CHECKING:
    from tzchain.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzchain project "2020-12-11 09:20:00" --zone America/Los_Angeles
  tzchain project "2020-12-11 09:20:00" --zone America/Chicago --view America/New_York
  tzchain -q project 2020-12-11T09:20      # uses [zones] default""",
)
@click.argument("text")
@click.option("--zone", default=None, help="Zone whose wall clock TEXT is read in.")
@click.option("--view", "viewing_zone", default=None, help="Express the instant in this zone.")
@click.pass_obj
def project(app: AppContext, text: str, zone: str | None, viewing_zone: str | None) -> None:
    """Read TEXT as wall-clock time in a zone and print the instant."""
    app.emit(app.service.project(text, zone=zone, viewing_zone=viewing_zone))
