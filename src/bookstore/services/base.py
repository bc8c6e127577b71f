"""Foundation for services that act on a Registry.

Every service receives a :class:`Registry` at construction time and owns
no state of its own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bookstore.services.registry import Registry
    from bookstore.services.result import ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BookstoreFacade(BaseService):
            def create_book(self, title: str, ...) -> ServiceResult:
                return self._registry.add_book(...)
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a lifecycle event. No-op if event bus not initialized.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        bus = self._registry.event_bus
        if bus is None:
            return
        if not bus.dispatch(hook_name, payload):
            warnings.append(f"Event dispatch failed for {hook_name}")

    def _finish(
        self,
        result: ServiceResult,
        hook_name: str,
        payload: dict[str, Any],
    ) -> ServiceResult:
        """Fire *hook_name* for a successful result and fold in any warnings."""
        if not result.ok:
            return result
        warnings = list(result.warnings)
        self._dispatch_event(hook_name, payload, warnings)
        if warnings == result.warnings:
            return result
        return result.model_copy(update={"warnings": warnings})
