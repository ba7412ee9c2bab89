"""Command dispatch and the interactive prompt loop.

:func:`execute` turns one input line into output text and never touches the
terminal, so every command is testable directly. :func:`run_repl` wraps it
in a prompt_toolkit session with history and completion.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory

from . import dice
from .errors import DiceError, InvalidPattern
from .records import CollectionKind, Library, render
from .theme import DEFAULT_THEME, CardTheme

logger = logging.getLogger(__name__)

PROMPT = ">> "
TOP_LEVEL_COMMANDS = ("help", "info", "quit", "item", "monster", "move", "tag", "list", "roll")
QUIT_COMMANDS = frozenset({"quit", "exit"})
COMMAND_KINDS: dict[str, CollectionKind] = {kind.singular: kind for kind in CollectionKind}

HELP_LINES: tuple[str, ...] = (
    "monster PATTERN   show the best matching monster",
    "move PATTERN      show the best matching move",
    "item PATTERN      show the best matching item",
    "tag PATTERN       show the best matching tag",
    "list [KIND] [PATTERN]  list names, KIND is monsters/moves/items/tags",
    "roll EXPR         roll dice, e.g. 2d6+1",
    "info              show how many records are loaded",
    "help              show this help",
    "quit              leave",
)


@dataclass(frozen=True)
class Session:
    """What a command needs: the loaded records and display preferences."""

    library: Library
    theme: CardTheme = DEFAULT_THEME
    width: int | None = None


@dataclass(frozen=True)
class CommandResult:
    output: str = ""
    quit: bool = False


def _help(session: Session) -> str:
    heading = session.theme.paint(session.theme.heading, "Commands")
    return "\n".join([f"{PROMPT}{heading}", *(f"   {line}" for line in HELP_LINES)])


def _info(session: Session) -> str:
    return "\n".join(
        f"   {collection.kind.title}: {len(collection)}" for collection in session.library
    )


def _show(session: Session, kind: CollectionKind, pattern: str) -> str:
    if not pattern:
        return f"Usage: {kind.singular} PATTERN"
    record = session.library.collection(kind).find(pattern)
    if record is None:
        return "No match"
    return f"\n{render(record, session.theme, session.width)}\n"


def _list(session: Session, args: str) -> str:
    word, _, pattern = args.partition(" ")
    pattern = pattern.strip()
    if not word:
        kinds: Iterable[CollectionKind] = CollectionKind
    else:
        kind = CollectionKind.from_word(word)
        if kind is None:
            # A lone argument that is not a kind filters every collection.
            kinds = CollectionKind
            pattern = args.strip()
        else:
            kinds = (kind,)

    out: list[str] = []
    for kind in kinds:
        names = session.library.collection(kind).names(pattern)
        out.append(f"{PROMPT}{session.theme.paint(session.theme.heading, kind.title)}")
        out.extend(f"   {name}" for name in names)
    return "\n".join(out)


def _roll(session: Session, expression: str) -> str:
    result = dice.roll(expression)
    total = session.theme.paint(session.theme.heading, str(result.total))
    return f"\n {PROMPT}{total}\n"


def execute(session: Session, line: str) -> CommandResult:
    """Run one command line against ``session``.

    Bad search patterns and dice expressions become messages; the session
    always continues unless the user asked to quit.
    """
    stripped = line.strip()
    if not stripped:
        return CommandResult()
    command, _, args = stripped.partition(" ")
    command = command.lower()
    args = args.strip()
    logger.debug("dispatching %r with %r", command, args)

    try:
        if command in QUIT_COMMANDS:
            return CommandResult(quit=True)
        if command == "help":
            return CommandResult(_help(session))
        if command == "info":
            return CommandResult(_info(session))
        if command in COMMAND_KINDS:
            return CommandResult(_show(session, COMMAND_KINDS[command], args))
        if command == "list":
            return CommandResult(_list(session, args))
        if command == "roll":
            return CommandResult(_roll(session, args))
    except InvalidPattern as exc:
        return CommandResult(session.theme.paint(session.theme.error, f"Invalid pattern: {exc}"))
    except DiceError as exc:
        return CommandResult(session.theme.paint(session.theme.error, f"Error: {exc}"))
    return CommandResult(f"Unknown command {command!r}, try 'help'")


def complete_line(library: Library, line: str) -> tuple[int, list[str]]:
    """Return ``(start, candidates)`` for the text typed so far.

    ``start`` is the offset in ``line`` where the candidates replace text.
    """
    matches = [command for command in TOP_LEVEL_COMMANDS if command.startswith(line)]
    if matches:
        return 0, matches
    command, sep, rest = line.partition(" ")
    if sep and command in COMMAND_KINDS:
        return len(command) + 1, library.collection(COMMAND_KINDS[command]).complete(rest)
    if sep and command == "list":
        return len(command) + 1, [kind.value for kind in CollectionKind if kind.value.startswith(rest)]
    return len(line), []


class CommandCompleter(Completer):
    """prompt_toolkit adapter over :func:`complete_line`."""

    def __init__(self, library: Library) -> None:
        self.library = library

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        start, candidates = complete_line(self.library, text)
        for candidate in candidates:
            yield Completion(candidate, start_position=start - len(text))


def run_repl(session: Session, prompt_session: PromptSession | None = None) -> None:
    """Read commands until ``quit``, EOF, or Ctrl-C."""
    if prompt_session is None:
        prompt_session = PromptSession(
            history=InMemoryHistory(),
            completer=CommandCompleter(session.library),
        )
    while True:
        try:
            line = prompt_session.prompt(PROMPT)
        except (EOFError, KeyboardInterrupt):
            break
        result = execute(session, line)
        if result.output:
            sys.stdout.write(result.output + "\n")
            sys.stdout.flush()
        if result.quit:
            break
