"""Shared pytest fixtures and test helpers for bookstore tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from bookstore.plugins.event_bus import EventBus
from bookstore.plugins.hookspecs import hookimpl
from bookstore.plugins.manager import PluginManager
from bookstore.services.facade import BookstoreFacade
from bookstore.services.registry import Registry


class RecordingPlugin:
    """Plugin that records every lifecycle hook call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @hookimpl
    def post_create_book(self, title: str, author: str, price: str) -> None:
        self.calls.append(("post_create_book", {"title": title, "author": author, "price": price}))

    @hookimpl
    def post_create_user(self, user_name: str, tier: str) -> None:
        self.calls.append(("post_create_user", {"user_name": user_name, "tier": tier}))

    @hookimpl
    def post_subscribe(self, user_name: str) -> None:
        self.calls.append(("post_subscribe", {"user_name": user_name}))

    @hookimpl
    def post_unsubscribe(self, user_name: str) -> None:
        self.calls.append(("post_unsubscribe", {"user_name": user_name}))

    @hookimpl
    def post_price_update(self, title: str, price: str, notified: list[str]) -> None:
        self.calls.append(
            ("post_price_update", {"title": title, "price": price, "notified": notified})
        )

    @hookimpl
    def post_read(self, user_name: str, title: str) -> None:
        self.calls.append(("post_read", {"user_name": user_name, "title": title}))

    @hookimpl
    def post_listen(self, user_name: str, title: str, granted: bool) -> None:
        self.calls.append(
            ("post_listen", {"user_name": user_name, "title": title, "granted": granted})
        )

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by configure_logging during a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("bookstore")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> Registry:
    """Empty registry with no event bus."""
    return Registry()


@pytest.fixture
def facade(registry: Registry) -> BookstoreFacade:
    return BookstoreFacade(registry)


@pytest.fixture
def recorder(registry: Registry) -> RecordingPlugin:
    """Recording plugin wired into ``registry`` through an event bus."""
    pm = PluginManager()
    plugin = RecordingPlugin()
    pm.register_plugin(plugin, name="recorder")
    registry.attach_event_bus(EventBus(pm))
    return plugin


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config in scope.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.
    """
    for var in ("BOOKSTORE_CONFIG", "BOOKSTORE_SESSION__SENTINEL", "BOOKSTORE_QUIET"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def seeded(facade: BookstoreFacade) -> BookstoreFacade:
    """Facade over a registry holding Dune by Herbert at 20, standard alice, premium bob."""
    assert facade.create_book("Dune", "Herbert", "20").ok
    assert facade.create_user("alice", "standard").ok
    assert facade.create_user("bob", "premium").ok
    return facade
