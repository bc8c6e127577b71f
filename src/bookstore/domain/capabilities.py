"""Read/listen capability strategies and the tier-to-capability table.

Each capability is a small stateless strategy object. A user's pair of
capabilities is looked up once, from :data:`TIER_CAPABILITIES`, when the
user is constructed and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from bookstore.domain.types import Tier

if TYPE_CHECKING:
    from bookstore.domain.models import Book

NO_ACCESS = "No access"


class ReadingCapability(Protocol):
    """Outcome of a user asking to read a book."""

    def read(self, book: Book, user_name: str) -> str: ...


class ListenCapability(Protocol):
    """Outcome of a user asking to listen to a book."""

    def listen(self, book: Book, user_name: str) -> str: ...


class CanRead:
    """Reading is always permitted."""

    def read(self, book: Book, user_name: str) -> str:
        return f"{user_name} reading {book.title} by {book.author}"

    def __repr__(self) -> str:
        return "CanRead()"


class CanListen:
    """Listening is permitted."""

    def listen(self, book: Book, user_name: str) -> str:
        return f"{user_name} listening {book.title} by {book.author}"

    def __repr__(self) -> str:
        return "CanListen()"


class CannotListen:
    """Listening is denied regardless of book or user."""

    def listen(self, book: Book, user_name: str) -> str:
        return NO_ACCESS

    def __repr__(self) -> str:
        return "CannotListen()"


@dataclass(frozen=True)
class Capabilities:
    """The resolved capability pair for one tier."""

    reading: ReadingCapability
    listening: ListenCapability


_CAN_READ = CanRead()

TIER_CAPABILITIES: dict[Tier, Capabilities] = {
    Tier.STANDARD: Capabilities(reading=_CAN_READ, listening=CannotListen()),
    Tier.PREMIUM: Capabilities(reading=_CAN_READ, listening=CanListen()),
}


def resolve_capabilities(tier: Tier) -> Capabilities:
    """Return the capability pair for *tier*."""
    return TIER_CAPABILITIES[tier]
