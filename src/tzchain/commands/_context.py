"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, the ZoneService, and result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzchain.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tzchain.config.settings import TzSettings
    from tzchain.services.result import ServiceResult
    from tzchain.services.zones import ZoneService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TzSettings) -> None:
        self.settings = settings
        self._service: ZoneService | None = None

        from tzchain.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ZoneService:
        """The zone service (created on first use)."""
        if self._service is None:
            from tzchain.services.zones import ZoneService

            self._service = ZoneService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
