"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, lazy plugin discovery, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from citectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from citectl.config.settings import CiteSettings
    from citectl.domain.clock import Clock
    from citectl.plugins.manager import PluginManager
    from citectl.services.citation import CitationService
    from citectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered on first use so ``--help`` and ``--version``
    never import third-party code.
    """

    def __init__(self, settings: CiteSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from citectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager with entry-point plugins loaded."""
        if self._plugins is None:
            from citectl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    def citation_service(self, clock: Clock | None = None) -> CitationService:
        from citectl.services.citation import CitationService

        return CitationService(self.settings, clock=clock, plugins=self.plugins)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so piped
          output stays clean.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
