"""CommandSession — the token-driven command loop over a BookstoreFacade.

The input is a stream of whitespace-separated tokens; commands may span
lines. Double or single quotes let a title contain spaces. A line whose
unquoted text cannot be balanced is split on whitespace as literal text, so
``Ender's`` stays one token. A line starting with ``#`` is a comment; a
``#`` inside a token such as ``C#`` is ordinary text.

Each command name is followed by a fixed number of argument tokens. The
loop runs until the sentinel token or end of input.

No single command stops the loop. An unknown command name is reported
and skipped; input that ends mid-command is reported and ends the session.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from bookstore.services.facade import BookstoreFacade
from bookstore.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = "end"

Handler = Callable[..., ServiceResult]


@dataclass(frozen=True)
class CommandSpec:
    """One command: its argument names and the facade call it maps to."""

    name: str
    params: tuple[str, ...]
    handler: Handler
    help: str = ""

    @property
    def usage(self) -> str:
        return " ".join([self.name, *self.params])


def _create_user(facade: BookstoreFacade, user_type: str, user_name: str) -> ServiceResult:
    return facade.create_user(user_name, user_type)


def _build_commands() -> dict[str, CommandSpec]:
    specs = [
        CommandSpec(
            "createBook", ("title", "author", "price"), BookstoreFacade.create_book, "Add a book."
        ),
        CommandSpec(
            "createUser",
            ("user_type", "user_name"),
            _create_user,
            "Add a user; type 'standard' or anything else for premium.",
        ),
        CommandSpec(
            "subscribe", ("user_name",), BookstoreFacade.subscribe, "Subscribe to price updates."
        ),
        CommandSpec(
            "unsubscribe", ("user_name",), BookstoreFacade.unsubscribe, "Stop price updates."
        ),
        CommandSpec(
            "updatePrice",
            ("title", "price"),
            BookstoreFacade.update_price,
            "Change a price and notify subscribers.",
        ),
        CommandSpec(
            "readBook", ("user_name", "title"), BookstoreFacade.read_book, "Read a book."
        ),
        CommandSpec(
            "listenBook", ("user_name", "title"), BookstoreFacade.listen_book, "Listen to a book."
        ),
    ]
    return {spec.name: spec for spec in specs}


COMMANDS: dict[str, CommandSpec] = _build_commands()


def split_line(line: str) -> list[str]:
    """Split one input line into tokens.

    Quotes group words; backslashes and ``#`` carry no special meaning.
    An unbalanced quote makes the whole line fall back to a plain
    whitespace split.
    """
    if line.lstrip().startswith("#"):
        return []
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    lexer.escape = ""
    try:
        return list(lexer)
    except ValueError:
        logger.debug("Unbalanced quote, splitting literally: %r", line)
        return line.split()


def tokenize(stream: TextIO) -> Iterator[str]:
    """Yield tokens from *stream* lazily, one line read at a time."""
    for line in stream:
        yield from split_line(line)


@dataclass
class SessionStats:
    """Counters for one session."""

    commands: int = 0
    failed: int = 0
    unknown: list[str] = field(default_factory=list)
    stopped_by_sentinel: bool = False


class CommandSession:
    """Read commands from a token stream and hand each result to *emit*."""

    def __init__(
        self,
        facade: BookstoreFacade,
        emit: Callable[[ServiceResult], None],
        *,
        sentinel: str = DEFAULT_SENTINEL,
        commands: dict[str, CommandSpec] | None = None,
    ) -> None:
        self._facade = facade
        self._emit = emit
        self._sentinel = sentinel
        self._commands = commands if commands is not None else COMMANDS

    def run(self, tokens: Iterator[str]) -> SessionStats:
        stats = SessionStats()
        self._loop(iter(tokens), stats)
        return stats

    def execute(self, name: str, args: list[str]) -> ServiceResult:
        """Run one command by name with already-split arguments."""
        spec = self._commands.get(name)
        if spec is None:
            return failure("dispatch", "UNKNOWN_COMMAND", f"Unknown command: {name}", name=name)
        if len(args) != len(spec.params):
            return failure(
                "dispatch",
                "MISSING_ARGUMENTS",
                f"Missing arguments for {name}",
                usage=spec.usage,
            )
        return spec.handler(self._facade, *args)

    def _loop(self, tokens: Iterator[str], stats: SessionStats) -> None:
        for name in tokens:
            if name == self._sentinel:
                stats.stopped_by_sentinel = True
                return

            spec = self._commands.get(name)
            if spec is None:
                logger.debug("Skipping unknown command %r", name)
                stats.unknown.append(name)
                stats.failed += 1
                self._emit(self.execute(name, []))
                continue

            args = [arg for _, arg in zip(spec.params, tokens, strict=False)]
            result = self.execute(name, args)
            stats.commands += 1
            if not result.ok:
                stats.failed += 1
            self._emit(result)
            if len(args) < len(spec.params):
                return
