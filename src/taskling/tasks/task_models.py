# src/taskling/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import assert_never

from ..errors import DateFormatError, ValidationError

# Input accepts an optional time part; records always carry one.
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}( \d{2}:\d{2})?")
RECORD_DATE_FORMAT = "%Y-%m-%d %H:%M"
DISPLAY_DATE_FORMAT = "%a %d %b %Y %I:%M%p"

FIELD_SEP = ","
EVENT_RANGE_SEP = "/"

DATE_FORMAT_MESSAGE = "please enter a valid date time format [YYYY-MM-DD HH:MM]"


class TaskKind(StrEnum):
    """Kind tag used both in the record line and in the display glyph."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_datetime(text: str) -> datetime:
    """
    Parse "YYYY-MM-DD" or "YYYY-MM-DD HH:MM" (24-hour).

    Missing time defaults to midnight.
    """
    raw = text.strip()
    m = _DATE_RE.fullmatch(raw)
    if not m:
        raise DateFormatError(DATE_FORMAT_MESSAGE)
    fmt = RECORD_DATE_FORMAT if m.group(1) else "%Y-%m-%d"
    try:
        return datetime.strptime(raw, fmt)
    except ValueError:
        # Right shape, impossible value (e.g. 2024-02-30 or 25:00).
        raise DateFormatError(DATE_FORMAT_MESSAGE) from None


def format_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_record_datetime(value: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value:%m-%d %H:%M}"


@dataclass(slots=True)
class _TaskBase:
    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        self.description = self.description.strip()
        if not self.description:
            raise ValidationError("the description of a task cannot be empty")
        # One record per line in the task file.
        if "\n" in self.description:
            raise ValidationError("the description of a task must fit on one line")

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    @property
    def status_glyph(self) -> str:
        return "X" if self.done else " "

    def to_display_string(self) -> str:
        return to_display_string(self)  # type: ignore[arg-type]

    def to_record_line(self) -> str:
        return to_record_line(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass(slots=True)
class Todo(_TaskBase):
    pass


@dataclass(slots=True)
class Deadline(_TaskBase):
    due_at: datetime

    @classmethod
    def create(cls, description: str, by: str, *, done: bool = False) -> Deadline:
        return cls(description, parse_datetime(by), done=done)


@dataclass(slots=True)
class Event(_TaskBase):
    start: datetime
    end: datetime

    @classmethod
    def create(
        cls, description: str, start: str, end: str, *, done: bool = False
    ) -> Event:
        return cls(description, parse_datetime(start), parse_datetime(end), done=done)


Task = Todo | Deadline | Event


def kind_of(task: Task) -> TaskKind:
    match task:
        case Todo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
        case _:
            assert_never(task)


def to_display_string(task: Task) -> str:
    """One-line human rendering, e.g. "[D][X] submit report (by: Fri 01 Mar 2024 06:00PM)"."""
    head = f"[{kind_of(task)}][{task.status_glyph}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(due_at=due_at):
            return f"{head} (by: {format_datetime(due_at)})"
        case Event(start=start, end=end):
            return f"{head} (from: {format_datetime(start)} to: {format_datetime(end)})"
        case _:
            assert_never(task)


def to_record_line(task: Task) -> str:
    done = "true" if task.done else "false"
    fields = [str(kind_of(task)), done, task.description]
    match task:
        case Todo():
            pass
        case Deadline(due_at=due_at):
            fields.append(format_record_datetime(due_at))
        case Event(start=start, end=end):
            fields.append(
                format_record_datetime(start)
                + EVENT_RANGE_SEP
                + format_record_datetime(end)
            )
        case _:
            assert_never(task)
    return FIELD_SEP.join(fields)


def parse_record(line: str) -> Task | None:
    """
    Parse one record line back into a task.

    Returns None for an unknown kind tag. Raises TaskError subclasses
    (ValidationError/DateFormatError) when a known kind has bad fields.
    The description is everything between the done flag and the trailing
    date field, so commas inside a description survive.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEP)
    tag = parts[0].strip()
    try:
        kind = TaskKind(tag)
    except ValueError:
        return None

    if len(parts) < 3:
        raise ValidationError(f"record has too few fields: {line!r}")
    done = parts[1].strip().lower() == "true"

    match kind:
        case TaskKind.TODO:
            return Todo(FIELD_SEP.join(parts[2:]), done=done)
        case TaskKind.DEADLINE:
            if len(parts) < 4:
                raise ValidationError(f"deadline record has no date: {line!r}")
            return Deadline.create(FIELD_SEP.join(parts[2:-1]), parts[-1], done=done)
        case TaskKind.EVENT:
            if len(parts) < 4:
                raise ValidationError(f"event record has no dates: {line!r}")
            span = parts[-1].split(EVENT_RANGE_SEP)
            if len(span) != 2:
                raise DateFormatError(DATE_FORMAT_MESSAGE)
            return Event.create(FIELD_SEP.join(parts[2:-1]), span[0], span[1], done=done)
        case _:
            assert_never(kind)
