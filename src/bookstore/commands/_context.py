"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to commands via
``@click.pass_obj``. Owns the Registry for the lifetime of one
invocation, creating it lazily so ``--help`` and ``--version`` never
load plugins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bookstore.output.formatters import format_result

if TYPE_CHECKING:
    from bookstore.config.settings import BookstoreSettings
    from bookstore.services.facade import BookstoreFacade
    from bookstore.services.registry import Registry
    from bookstore.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BookstoreSettings) -> None:
        self.settings = settings
        self._registry: Registry | None = None

        from bookstore.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> Registry:
        """The registry instance (created lazily on first access)."""
        if self._registry is None:
            from bookstore.services.registry import Registry

            self._registry = Registry()
            if self.settings.plugins.enabled:
                self._registry.init_event_bus(local_dir=self.settings.plugin_dir)
        return self._registry

    @property
    def facade(self) -> BookstoreFacade:
        from bookstore.services.facade import BookstoreFacade

        return BookstoreFacade(self.registry)

    def emit(self, result: ServiceResult) -> None:
        """Write one command's result.

        Output lines and diagnostics both go to stdout; a failed command is
        never fatal. ``--quiet`` drops diagnostics. Warnings go to stderr
        unless JSON mode already carries them in the payload.
        """
        if self.settings.quiet and not result.ok and not self.settings.json_output:
            return
        output = format_result(result, json_output=self.settings.json_output)
        if output:
            click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
