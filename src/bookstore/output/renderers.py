"""Rich renderer for the end-of-session inventory summary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bookstore.output.console import create_console, get_output, style_for_tier

if TYPE_CHECKING:
    from bookstore.services.result import ServiceResult


def render_inventory(result: ServiceResult, *, no_color: bool = False) -> str:
    """Render books, users, and subscribers as two Rich tables."""
    console = create_console(no_color=no_color)
    data = result.data
    console.print(_books_table(data.get("books", [])))
    console.print(_users_table(data.get("users", []), set(data.get("subscribers", []))))
    return get_output(console).rstrip("\n")


def _books_table(books: list[dict[str, Any]]) -> Table:
    table = Table(title=f"Books ({len(books)})", title_justify="left")
    table.add_column("Title", style="store.title")
    table.add_column("Author", style="store.author")
    table.add_column("Price", style="store.price", justify="right")
    for book in books:
        table.add_row(book["title"], book["author"], book["price"])
    return table


def _users_table(users: list[dict[str, Any]], subscribed: set[str]) -> Table:
    table = Table(title=f"Users ({len(users)})", title_justify="left")
    table.add_column("User", style="store.user")
    table.add_column("Tier")
    table.add_column("Subscribed", justify="center")
    for user in users:
        name = user["user_name"]
        table.add_row(
            name,
            Text(user["tier"], style=style_for_tier(user["tier"])),
            Text("yes", style="store.subscribed") if name in subscribed else Text("no"),
        )
    return table
