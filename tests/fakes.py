# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from taskling.errors import SaveError
from taskling.tasks.task_models import Task


class RecordingTaskRepo:
    """
    In-memory TaskRepo for unit tests.

    - Keeps every saved snapshot as record lines for assertions
    - load() replays the last snapshot
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.initial = list(tasks or [])
        self.saves: list[list[str]] = []

    def load(self) -> list[Task]:
        return list(self.initial)

    def save(self, tasks: Iterable[Task]) -> None:
        self.saves.append([t.to_record_line() for t in tasks])

    @property
    def last_saved(self) -> list[str] | None:
        return self.saves[-1] if self.saves else None


class FailingTaskRepo(RecordingTaskRepo):
    def save(self, tasks: Iterable[Task]) -> None:
        raise SaveError("failed to save tasks to <fake>")
