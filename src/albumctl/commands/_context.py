"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the ValidationService and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from albumctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from albumctl.config.settings import AlbumSettings
    from albumctl.services.result import ServiceResult
    from albumctl.services.validation import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AlbumSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from albumctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from albumctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> ValidationService:
        """The validation service, built from the configured limits on first use."""
        if self._service is None:
            from albumctl.services.validation import ValidationService

            self._service = ValidationService(self.settings.limits)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Valid (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Invalid: writes to stderr, exits with code 1.
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
