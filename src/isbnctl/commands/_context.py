"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from isbnctl.config.logging import configure_logging
from isbnctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from isbnctl.config.settings import IsbnSettings
    from isbnctl.services.isbn import IsbnService
    from isbnctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service (and with it the range table) is created on first use so
    ``--help`` and ``--version`` never read range data.
    """

    def __init__(self, settings: IsbnSettings) -> None:
        self.settings = settings
        self._service: IsbnService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> IsbnService:
        """The ISBN service (created lazily on first access)."""
        if self._service is None:
            from isbnctl.services.isbn import IsbnService

            try:
                self._service = IsbnService.from_settings(self.settings)
            except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
                msg = f"Cannot load range table {self.settings.ranges.path}: {exc}"
                raise click.ClickException(msg) from exc
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
