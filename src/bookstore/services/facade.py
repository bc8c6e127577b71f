"""BookstoreFacade — one method per command, translating names into registry calls.

The facade owns no state. Each method performs the entity construction
or lookups its command needs and then exactly one registry call.

A missing user or book is never forwarded to the registry: the method
returns a ``USER_NOT_FOUND`` / ``BOOK_NOT_FOUND`` result and leaves state
untouched. For commands naming both, the user is checked first.
"""

from __future__ import annotations

import logging

from bookstore.domain.models import Book, User, create_book, create_user
from bookstore.domain.types import Tier
from bookstore.services.base import BaseService
from bookstore.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
BOOK_NOT_FOUND = "Book not found"


class BookstoreFacade(BaseService):
    """Command-level entry points over a :class:`Registry`."""

    def create_book(self, title: str, author: str, price: str) -> ServiceResult:
        book = create_book(title, author, price)
        result = self._registry.add_book(book)
        logger.debug("create_book %s ok=%s", title, result.ok)
        return self._finish(
            result,
            "post_create_book",
            {"title": book.title, "author": book.author, "price": book.price},
        )

    def create_user(self, user_name: str, user_type: str) -> ServiceResult:
        user = create_user(user_name, Tier.from_user_type(user_type))
        result = self._registry.add_user(user)
        logger.debug("create_user %s tier=%s ok=%s", user_name, user.tier, result.ok)
        return self._finish(
            result,
            "post_create_user",
            {"user_name": user.user_name, "tier": str(user.tier)},
        )

    def subscribe(self, user_name: str) -> ServiceResult:
        user = self._registry.get_user(user_name)
        if user is None:
            return self._user_not_found("subscribe", user_name)
        result = self._registry.register_subscriber(user)
        return self._finish(result, "post_subscribe", {"user_name": user_name})

    def unsubscribe(self, user_name: str) -> ServiceResult:
        user = self._registry.get_user(user_name)
        if user is None:
            return self._user_not_found("unsubscribe", user_name)
        result = self._registry.remove_subscriber(user)
        return self._finish(result, "post_unsubscribe", {"user_name": user_name})

    def update_price(self, title: str, price: str) -> ServiceResult:
        book = self._registry.get_book(title)
        if book is None:
            return self._book_not_found("update_price", title)
        result = self._registry.notify_subscribers(book, price)
        logger.debug("update_price %s -> %s notified=%d", title, price, len(result.lines))
        return self._finish(
            result,
            "post_price_update",
            {"title": title, "price": price, "notified": result.data["notified"]},
        )

    def read_book(self, user_name: str, title: str) -> ServiceResult:
        found = self._resolve("read_book", user_name, title)
        if isinstance(found, ServiceResult):
            return found
        book, user = found
        result = self._registry.read_book(book, user)
        return self._finish(result, "post_read", {"user_name": user_name, "title": title})

    def listen_book(self, user_name: str, title: str) -> ServiceResult:
        found = self._resolve("listen_book", user_name, title)
        if isinstance(found, ServiceResult):
            return found
        book, user = found
        result = self._registry.listen_book(book, user)
        return self._finish(
            result,
            "post_listen",
            {"user_name": user_name, "title": title, "granted": result.data["granted"]},
        )

    def inventory(self) -> ServiceResult:
        """Snapshot of all books, users, and subscribers."""
        return ServiceResult(ok=True, op="inventory", data=self._registry.snapshot())

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _resolve(self, op: str, user_name: str, title: str) -> tuple[Book, User] | ServiceResult:
        user = self._registry.get_user(user_name)
        if user is None:
            return self._user_not_found(op, user_name)
        book = self._registry.get_book(title)
        if book is None:
            return self._book_not_found(op, title)
        return book, user

    @staticmethod
    def _user_not_found(op: str, user_name: str) -> ServiceResult:
        logger.debug("%s: user not found: %s", op, user_name)
        return failure(op, "USER_NOT_FOUND", USER_NOT_FOUND, user_name=user_name)

    @staticmethod
    def _book_not_found(op: str, title: str) -> ServiceResult:
        logger.debug("%s: book not found: %s", op, title)
        return failure(op, "BOOK_NOT_FOUND", BOOK_NOT_FOUND, title=title)
