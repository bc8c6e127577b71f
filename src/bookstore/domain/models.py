"""Book and User entities.

``Book.title`` and ``Book.author`` are frozen once constructed; ``price``
stays assignable because a price update mutates the stored book in place.
``User`` is fully frozen; its capabilities are resolved from the tier at
construction time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from bookstore.domain.capabilities import (
    Capabilities,
    ListenCapability,
    ReadingCapability,
    resolve_capabilities,
)
from bookstore.domain.types import Tier


class Book(BaseModel):
    """A book for sale. ``price`` is opaque text and is never parsed."""

    model_config = {"validate_assignment": True}

    title: str = Field(frozen=True)
    author: str = Field(frozen=True)
    price: str


class User(BaseModel):
    """A registered bookstore user."""

    model_config = {"frozen": True}

    user_name: str
    tier: Tier

    _capabilities: Capabilities = PrivateAttr()

    def model_post_init(self, context: Any, /) -> None:
        self._capabilities = resolve_capabilities(self.tier)

    @property
    def reading_behavior(self) -> ReadingCapability:
        return self._capabilities.reading

    @property
    def listen_behavior(self) -> ListenCapability:
        return self._capabilities.listening

    def do_read(self, book: Book) -> str:
        """Apply this user's reading capability to *book*."""
        return self.reading_behavior.read(book, self.user_name)

    def do_listen(self, book: Book) -> str:
        """Apply this user's listening capability to *book*."""
        return self.listen_behavior.listen(book, self.user_name)

    def update(self, book: Book) -> str:
        """Price-update notification line for *book* in its current state."""
        return f"{self.user_name} notified about price update for {book.title} to {book.price}"


def create_book(title: str, author: str, price: str) -> Book:
    """Construct a book. No validation of the price text is performed."""
    return Book(title=title, author=author, price=price)


def create_user(user_name: str, tier: Tier) -> User:
    """Construct a user whose capabilities follow *tier*."""
    return User(user_name=user_name, tier=tier)
