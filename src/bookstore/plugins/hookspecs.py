"""Pluggy hook specifications for bookstore lifecycle events.

Each hook fires after the matching command has succeeded. Failed
commands (duplicates, unknown users or books, subscription no-ops)
fire nothing.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("bookstore")
hookimpl = pluggy.HookimplMarker("bookstore")


class BookstoreHookSpec:
    """Hook specifications for the bookstore plugin system."""

    @hookspec
    def post_create_book(self, title: str, author: str, price: str) -> None:
        """Called after a book is added."""

    @hookspec
    def post_create_user(self, user_name: str, tier: str) -> None:
        """Called after a user is added."""

    @hookspec
    def post_subscribe(self, user_name: str) -> None:
        """Called after a user subscribes to price updates."""

    @hookspec
    def post_unsubscribe(self, user_name: str) -> None:
        """Called after a user unsubscribes."""

    @hookspec
    def post_price_update(self, title: str, price: str, notified: list[str]) -> None:
        """Called after a price change has been broadcast.

        *notified* lists subscriber names in notification order.
        """

    @hookspec
    def post_read(self, user_name: str, title: str) -> None:
        """Called after a read action."""

    @hookspec
    def post_listen(self, user_name: str, title: str, granted: bool) -> None:
        """Called after a listen action, whether or not access was granted."""
