"""Rich Console factory for bookstore output.

Consoles render to a StringIO buffer so renderers return plain strings.
Non-TTY environments (tests, pipes) get no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BOOKSTORE_THEME = Theme(
    {
        "store.title": "bold",
        "store.author": "dim",
        "store.price": "magenta",
        "store.user": "bold blue",
        "store.tier.standard": "green",
        "store.tier.premium": "yellow",
        "store.subscribed": "bold green",
    }
)

_TIER_STYLES: dict[str, str] = {
    "standard": "store.tier.standard",
    "premium": "store.tier.premium",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BOOKSTORE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str) -> str:
    return _TIER_STYLES.get(tier, "")
