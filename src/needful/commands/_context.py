"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides target loading, a lazily created
ContractService and centralized result emission (stdout/stderr routing +
exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from needful.output.formatters import OutputSettings, format_result
from needful.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from needful.config.settings import NeedfulSettings
    from needful.services.contract import ContractService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: NeedfulSettings) -> None:
        self.settings = settings
        self._service: ContractService | None = None

        from needful.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def service(self) -> ContractService:
        """The contract service (created lazily on first access)."""
        if self._service is None:
            from needful.services.contract import ContractService

            self._service = ContractService(self.settings)
        return self._service

    def load(self, target: str, *, op: str) -> type:
        """Import *target*, emitting a failed *op* result if that fails."""
        from needful.infrastructure.loader import TargetLoadError, load_target

        try:
            return load_target(target, self.settings.search_paths)
        except TargetLoadError as exc:
            self.emit(
                ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code=TargetLoadError.code,
                        message=str(exc),
                        detail={"target": target},
                    ),
                )
            )
            raise  # emit() exits on failure; not reached

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.use_json,
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
