"""Root CLI group for bookstore with global flags and command registration."""

from __future__ import annotations

import click
from click.core import ParameterSource

from bookstore import __version__
from bookstore.commands import register_commands
from bookstore.commands._context import AppContext
from bookstore.config.settings import BookstoreSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bookstore")
@click.option("--json", "json_output", is_flag=True, help="One JSON result per command.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress diagnostics for failed commands.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """bookstore — in-memory bookstore command simulator."""
    ctx.ensure_object(dict)
    flags = {"json_output": json_output, "quiet": quiet, "verbose": verbose, "log_json": log_json}
    # Unset flags fall through to BOOKSTORE_* env vars and bookstore.toml.
    passed = {
        name: value
        for name, value in flags.items()
        if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE
    }
    settings = BookstoreSettings.from_cli(config_path=config_path, **passed)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
