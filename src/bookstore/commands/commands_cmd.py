"""Command: list the commands a session script understands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from bookstore.commands._base import BookstoreCommand

if TYPE_CHECKING:
    from bookstore.commands._context import AppContext


@click.command(
    "commands",
    cls=BookstoreCommand,
    examples="""\
  bookstore commands
  bookstore --json commands""",
)
@click.pass_obj
def commands_cmd(app: AppContext) -> None:
    """List session commands with their arguments."""
    from bookstore.services.session import COMMANDS

    if app.settings.json_output:
        payload = [
            {"name": spec.name, "params": list(spec.params), "help": spec.help}
            for spec in COMMANDS.values()
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    sentinel = app.settings.session.sentinel
    width = max(len(sentinel), *(len(spec.usage) for spec in COMMANDS.values()))
    for spec in COMMANDS.values():
        click.echo(f"{spec.usage.ljust(width)}  {spec.help}")
    click.echo(f"{sentinel.ljust(width)}  End the session.")
