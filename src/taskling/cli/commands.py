# src/taskling/cli/commands.py

"""
Command values and their execution.

The parser produces one of the Command variants; execute_command() runs it
against the task list and store and returns a CommandResponse for whatever
front end is attached.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import assert_never

from ..core.ports import TaskRepo
from ..errors import EmptyListError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResponse:
    message: str
    should_exit: bool = False


@dataclass(frozen=True, slots=True)
class AddTaskCommand:
    task: Task


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class MarkCommand:
    indices: tuple[int, ...]
    done: bool = True


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    indices: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class HelpCommand:
    text: str


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


Command = AddTaskCommand | ListCommand | MarkCommand | DeleteCommand | HelpCommand | ExitCommand


def _plural(n: int) -> str:
    return "task" if n == 1 else "tasks"


def _bullets(tasks: Sequence[Task]) -> list[str]:
    return [f"  {t.to_display_string()}" for t in tasks]


def render_listing(task_list: TaskList) -> str:
    if task_list.size() == 0:
        raise EmptyListError(
            "You have no tasks in your list right now, try adding some and try again."
        )
    lines = ["Here are the tasks in your list:"]
    for i, task in enumerate(task_list, start=1):
        lines.append(f"{i}. {task.to_display_string()}")
    return "\n".join(lines)


def execute_command(command: Command, task_list: TaskList, store: TaskRepo) -> CommandResponse:
    """
    Run a parsed command.

    Every branch that mutates task_list saves the full list before returning.
    TaskError subclasses propagate to the caller (see cli.dispatch).
    """
    match command:
        case AddTaskCommand(task=task):
            size = task_list.add(task)
            store.save(task_list)
            logger.debug("Added task #%d: %s", size, task.to_record_line())
            return CommandResponse(
                "\n".join(
                    [
                        "Got it. I've added this task:",
                        *_bullets([task]),
                        f"Now you have {size} {_plural(size)} in the list.",
                    ]
                )
            )

        case ListCommand():
            return CommandResponse(render_listing(task_list))

        case MarkCommand(indices=indices, done=True):
            changed = task_list.mark_done_many(indices)
            store.save(task_list)
            return CommandResponse(
                "\n".join(["Great job! I've marked these tasks as done:", *_bullets(changed)])
            )

        case MarkCommand(indices=indices, done=False):
            changed = task_list.mark_undone_many(indices)
            store.save(task_list)
            return CommandResponse(
                "\n".join(["OK, I've marked these tasks as not done yet:", *_bullets(changed)])
            )

        case DeleteCommand(indices=indices):
            removed = task_list.remove_many(indices)
            store.save(task_list)
            size = task_list.size()
            return CommandResponse(
                "\n".join(
                    [
                        "Noted. I've removed these tasks:",
                        *_bullets(removed),
                        f"Now you have {size} {_plural(size)} in the list.",
                    ]
                )
            )

        case HelpCommand(text=text):
            return CommandResponse(text)

        case ExitCommand():
            return CommandResponse("Bye. Hope to see you again soon!", should_exit=True)

        case _:
            assert_never(command)
