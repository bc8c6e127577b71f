"""Command: run a bookstore command script."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click
import structlog

from bookstore.commands._base import BookstoreCommand

if TYPE_CHECKING:
    from bookstore.commands._context import AppContext

log = structlog.get_logger(__name__)


@click.command(
    cls=BookstoreCommand,
    examples="""\
  printf 'createBook Dune Herbert 20\\ncreateUser standard alice\\nend\\n' | bookstore run
  bookstore run session.txt
  bookstore run --summary session.txt
  bookstore --json run session.txt
  bookstore run --sentinel quit session.txt""",
)
@click.argument("script", type=click.File("r"), default="-")
@click.option(
    "--summary/--no-summary",
    default=None,
    help="Print books, users and subscribers when the session ends.",
)
@click.option("--sentinel", default=None, help="Token that ends the session (default: end).")
@click.pass_obj
def run(app: AppContext, script: TextIO, summary: bool | None, sentinel: str | None) -> None:
    """Read commands from SCRIPT (or stdin) until the sentinel.

    \b
    Commands:
      createBook TITLE AUTHOR PRICE
      createUser TYPE USERNAME
      subscribe USERNAME
      unsubscribe USERNAME
      updatePrice TITLE PRICE
      readBook USERNAME TITLE
      listenBook USERNAME TITLE
      end
    """
    from bookstore.services.session import CommandSession, tokenize

    session_cfg = app.settings.session
    stop = sentinel if sentinel is not None else session_cfg.sentinel
    session = CommandSession(app.facade, app.emit, sentinel=stop)
    stats = session.run(tokenize(script))
    log.debug(
        "session.complete",
        commands=stats.commands,
        failed=stats.failed,
        unknown=len(stats.unknown),
        sentinel=stats.stopped_by_sentinel,
    )

    show_summary = summary if summary is not None else session_cfg.summary
    if show_summary:
        _emit_summary(app)


def _emit_summary(app: AppContext) -> None:
    inventory = app.facade.inventory()
    if app.settings.json_output:
        click.echo(inventory.model_dump_json())
        return
    from bookstore.output.renderers import render_inventory

    click.echo(render_inventory(inventory))
