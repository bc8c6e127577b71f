"""The single authoritative store of books, users, and subscribers.

A Registry is constructed explicitly and handed to whoever needs it; there
is no process-wide instance. Lookups return ``None`` for a missing key and
never raise. Every other operation returns a :class:`ServiceResult`.
Duplicate and subscription diagnostics are failed results, never exceptions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bookstore.domain.capabilities import CannotListen
from bookstore.services.result import ServiceResult, failure, success

if TYPE_CHECKING:
    from pathlib import Path

    from bookstore.domain.models import Book, User
    from bookstore.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)

BOOK_EXISTS = "Book already exists"
USER_EXISTS = "User already exists"
ALREADY_SUBSCRIBED = "User already subscribed"
NOT_SUBSCRIBED = "User is not subscribed"


class Registry:
    """In-memory store with the subscribe/notify protocol.

    Books and users are keyed by title and user name; both dicts keep
    insertion order. Subscribers are kept in subscription order and always
    reference users already present in the user collection.
    """

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}
        self._users: dict[str, User] = {}
        self._subscribers: dict[str, User] = {}
        self._event_bus: EventBus | None = None

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def books(self) -> list[Book]:
        return list(self._books.values())

    @property
    def users(self) -> list[User]:
        return list(self._users.values())

    @property
    def subscribers(self) -> list[User]:
        """Current subscribers in subscription order."""
        return list(self._subscribers.values())

    @property
    def event_bus(self) -> EventBus | None:
        """Lifecycle event bus, or None when hooks are not wired."""
        return self._event_bus

    def init_event_bus(self, *, local_dir: Path | None = None) -> None:
        """Discover plugins and attach a lifecycle event bus."""
        from bookstore.plugins.event_bus import EventBus
        from bookstore.plugins.manager import PluginManager

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=local_dir)
        logger.debug("Loaded plugins: %s", names)
        self._event_bus = EventBus(pm)

    def attach_event_bus(self, bus: EventBus) -> None:
        """Attach an already-built event bus."""
        self._event_bus = bus

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def add_book(self, book: Book) -> ServiceResult:
        op = "add_book"
        if book.title in self._books:
            logger.debug("Duplicate book rejected: %s", book.title)
            return failure(op, "DUPLICATE_BOOK", BOOK_EXISTS, title=book.title)
        self._books[book.title] = book
        return success(op, lines=[], title=book.title, author=book.author, price=book.price)

    def add_user(self, user: User) -> ServiceResult:
        op = "add_user"
        if user.user_name in self._users:
            logger.debug("Duplicate user rejected: %s", user.user_name)
            return failure(op, "DUPLICATE_USER", USER_EXISTS, user_name=user.user_name)
        self._users[user.user_name] = user
        return success(op, lines=[], user_name=user.user_name, tier=str(user.tier))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_user(self, name: str) -> User | None:
        return self._users.get(name)

    def get_book(self, title: str) -> Book | None:
        return self._books.get(title)

    # ------------------------------------------------------------------
    # Subscription protocol
    # ------------------------------------------------------------------

    def is_subscribed(self, user: User) -> bool:
        return self._subscribers.get(user.user_name) is user

    def register_subscriber(self, user: User) -> ServiceResult:
        op = "register_subscriber"
        if self.is_subscribed(user):
            return failure(op, "ALREADY_SUBSCRIBED", ALREADY_SUBSCRIBED, user_name=user.user_name)
        self._subscribers[user.user_name] = user
        return success(op, lines=[], user_name=user.user_name)

    def remove_subscriber(self, user: User) -> ServiceResult:
        op = "remove_subscriber"
        if not self.is_subscribed(user):
            return failure(op, "NOT_SUBSCRIBED", NOT_SUBSCRIBED, user_name=user.user_name)
        del self._subscribers[user.user_name]
        return success(op, lines=[], user_name=user.user_name)

    def notify_subscribers(self, book: Book, new_price: str) -> ServiceResult:
        """Set the new price, then notify every subscriber in order.

        The price is written before any notification so every subscriber
        observes the new value. With no subscribers the price still changes.
        """
        book.price = new_price
        lines = [user.update(book) for user in self._subscribers.values()]
        return success(
            "notify_subscribers",
            lines=lines,
            title=book.title,
            price=book.price,
            notified=[user.user_name for user in self._subscribers.values()],
        )

    # ------------------------------------------------------------------
    # Capability dispatch
    # ------------------------------------------------------------------

    def read_book(self, book: Book, user: User) -> ServiceResult:
        line = user.reading_behavior.read(book, user.user_name)
        return success("read_book", lines=[line], user_name=user.user_name, title=book.title)

    def listen_book(self, book: Book, user: User) -> ServiceResult:
        line = user.listen_behavior.listen(book, user.user_name)
        return success(
            "listen_book",
            lines=[line],
            user_name=user.user_name,
            title=book.title,
            granted=not isinstance(user.listen_behavior, CannotListen),
        )

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of every collection."""
        return {
            "books": [book.model_dump() for book in self._books.values()],
            "users": [
                {"user_name": user.user_name, "tier": str(user.tier)}
                for user in self._users.values()
            ],
            "subscribers": list(self._subscribers),
        }
