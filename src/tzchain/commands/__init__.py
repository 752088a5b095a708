"""Subcommand modules for tzchain.

register_commands() imports each module only when the root group is built,
so ``tzchain --help`` stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every tzchain subcommand to the root group."""
    from tzchain.commands.chain import chain
    from tzchain.commands.default import default
    from tzchain.commands.diff import diff
    from tzchain.commands.offset import offset
    from tzchain.commands.project import project
    from tzchain.commands.zones import zones

    for command in (default, offset, diff, chain, project, zones):
        cli.add_command(command)
