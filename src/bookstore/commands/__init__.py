"""Subcommand modules for bookstore.

Provides register_commands() which uses deferred imports to keep
``bookstore --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from bookstore.commands.commands_cmd import commands_cmd
    from bookstore.commands.run import run

    cli.add_command(run)
    cli.add_command(commands_cmd)
