"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Workspace initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adrctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from adrctl.config.settings import AdrSettings
    from adrctl.domain.errors import AdrError
    from adrctl.infrastructure.workspace import Workspace
    from adrctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The workspace is
    lazily initialized on first use so ``--help`` and ``--version`` never
    read ``.adr.json``.
    """

    def __init__(self, settings: AdrSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        # Configure structured logging
        from adrctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Service timing when verbose
        if settings.verbose:
            from adrctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def workspace(self) -> Workspace:
        """The workspace instance (created lazily on first access)."""
        if self._workspace is None:
            from adrctl.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.color and click.get_text_stream("stdout").isatty(),
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings()
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def fail(self, op: str, exc: AdrError) -> None:
        """Emit *exc* as a failed result for *op* (exits 1)."""
        from adrctl.services.base import BaseService

        self.emit(BaseService._failure(op, exc))
