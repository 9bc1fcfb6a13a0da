# src/taskling/cli/parser.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import (
    DateCountError,
    EmptyNumberListError,
    TaskIndexError,
    UnknownCommandError,
    ValidationError,
)
from ..tasks.task_models import Deadline, Event, Todo
from .commands import (
    AddTaskCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    MarkCommand,
)

KeywordParser = Callable[[str, str], Command]

BY_DELIM = "/by"
FROM_DELIM = "/from"
TO_DELIM = "/to"

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Keyword -> argument parser table (todo, deadline, done, ...)."""

    def __init__(self) -> None:
        self._parsers: dict[str, KeywordParser] = {}
        self._help: dict[str, str] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        parser: KeywordParser,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._parsers[key] = parser
        self._help[key] = help_text
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._parsers[alias.lower()] = parser

    def parse(self, line: str) -> Command:
        """
        Turn one input line into a Command.
        Raises a TaskError subclass when the line is not valid.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            raise UnknownCommandError("Please enter a command. Type 'help' to see what I understand.")

        keyword = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        parser = self._parsers.get(keyword)
        if parser is None:
            raise UnknownCommandError(
                f"Sorry, I don't know what '{parts[0]}' means. Type 'help' to see what I understand."
            )
        logger.debug("Parsing keyword=%s rest=%r", keyword, rest)
        return parser(keyword, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            aliases = self._aliases.get(name) or []
            alias_str = f" (also: {', '.join(aliases)})" if aliases else ""
            lines.append(f"  {name}{alias_str} - {help_text}")
        return "\n".join(lines)


# ---- argument helpers ----


def _require_content(keyword: str, rest: str) -> str:
    content = rest.strip()
    if not content:
        raise ValidationError(f"The description of a {keyword} cannot be empty.")
    return content


def _split_dates(keyword: str, content: str, delim: str) -> tuple[str, str]:
    """
    Split "<text> <delim> <date>" into exactly two segments.
    Trailing blank segments do not count as dates.
    """
    segments = content.split(delim)
    while len(segments) > 1 and not segments[-1].strip():
        segments.pop()
    if len(segments) < 2:
        raise DateCountError(f"Please enter at least one date for your {keyword}.")
    if len(segments) > 2:
        raise DateCountError("You have entered more than one date, please try again.")
    return segments[0], segments[1]


def _parse_numbers(keyword: str, rest: str) -> tuple[int, ...]:
    tokens = rest.split()
    if not tokens:
        raise EmptyNumberListError(f"Please give at least one task number to {keyword} a task.")
    numbers: list[int] = []
    for tok in tokens:
        if not (tok.isascii() and tok.isdigit()) or int(tok) < 1:
            raise TaskIndexError("You have entered invalid task numbers, please try again.")
        numbers.append(int(tok))
    return tuple(numbers)


def _require_no_args(keyword: str, rest: str) -> None:
    if rest.strip():
        raise ValidationError(f"'{keyword}' does not take any arguments.")


# ---- keyword parsers ----


def parse_todo(keyword: str, rest: str) -> Command:
    return AddTaskCommand(Todo(_require_content(keyword, rest)))


def parse_deadline(keyword: str, rest: str) -> Command:
    description, by = _split_dates(keyword, _require_content(keyword, rest), BY_DELIM)
    return AddTaskCommand(Deadline.create(description, by))


def parse_event(keyword: str, rest: str) -> Command:
    description, span = _split_dates(keyword, _require_content(keyword, rest), FROM_DELIM)
    start, end = _split_dates(keyword, span, TO_DELIM)
    return AddTaskCommand(Event.create(description, start, end))


def parse_list(keyword: str, rest: str) -> Command:
    _require_no_args(keyword, rest)
    return ListCommand()


def parse_done(keyword: str, rest: str) -> Command:
    return MarkCommand(_parse_numbers(keyword, rest), done=True)


def parse_unmark(keyword: str, rest: str) -> Command:
    return MarkCommand(_parse_numbers(keyword, rest), done=False)


def parse_delete(keyword: str, rest: str) -> Command:
    return DeleteCommand(_parse_numbers(keyword, rest))


def parse_help(keyword: str, rest: str) -> Command:
    _require_no_args(keyword, rest)
    return HelpCommand(registry.build_help())


def parse_bye(keyword: str, rest: str) -> Command:
    _require_no_args(keyword, rest)
    return ExitCommand()


registry = CommandRegistry()

registry.register("todo", parse_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", parse_deadline, help_text="Add a deadline: deadline <description> /by <date>."
)
registry.register(
    "event",
    parse_event,
    help_text="Add an event: event <description> /from <date> /to <date>.",
)
registry.register("list", parse_list, help_text="Show all tasks.")
registry.register(
    "done", parse_done, help_text="Mark tasks as done: done <n> [<n> ...].", aliases=["finish"]
)
registry.register(
    "unmark", parse_unmark, help_text="Mark tasks as not done: unmark <n> [<n> ...].", aliases=["undone"]
)
registry.register("delete", parse_delete, help_text="Remove tasks: delete <n> [<n> ...].")
registry.register("help", parse_help, help_text="Show available commands.")
registry.register("bye", parse_bye, help_text="Save and exit.")


def parse_command(line: str) -> Command:
    return registry.parse(line)
