"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wikinote.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from wikinote.config.settings import WikinoteSettings
    from wikinote.services.notes import NoteService
    from wikinote.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The note service is created on first use so ``--help`` and
    ``--version`` never build a markdown parser.
    """

    def __init__(self, settings: WikinoteSettings) -> None:
        self.settings = settings
        self._notes: NoteService | None = None

        from wikinote.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def notes(self) -> NoteService:
        """The note service (created lazily on first access)."""
        if self._notes is None:
            from wikinote.services.notes import NoteService

            self._notes = NoteService(self.settings)
        return self._notes

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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
