"""Synchronous lifecycle event dispatch via pluggy.

Commands are processed one at a time, so hooks run inline on the
calling thread before the next command is read.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bookstore.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


@dataclass
class FailedEvent:
    """A hook call that raised."""

    hook_name: str
    payload: dict[str, Any]
    error: str


@dataclass
class EventBus:
    """Dispatch lifecycle events to registered plugins.

    Parameters:
        plugin_manager: Loaded PluginManager for hook dispatch.
    """

    plugin_manager: PluginManager
    dispatched: int = 0
    failures: list[FailedEvent] = field(default_factory=list)

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Call *hook_name* with *payload*. Returns False if a plugin raised.

        Unknown hook names are ignored and count as success.
        """
        hook_fn = getattr(self.plugin_manager.hook, hook_name, None)
        if hook_fn is None:
            logger.debug("No hook named %s", hook_name)
            return True

        self.dispatched += 1
        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.debug("Hook %s failed: %s", hook_name, exc, exc_info=True)
            self.failures.append(FailedEvent(hook_name, dict(payload), str(exc)))
            return False
        return True
