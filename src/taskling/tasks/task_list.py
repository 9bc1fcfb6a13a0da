# src/taskling/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered, mutable task collection.

    Public indices are 1-based (as typed by the user); storage is a plain list.
    Batch operations validate every index before touching anything, so a
    single bad number leaves the list unchanged.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        """Snapshot copy in list order."""
        return list(self._tasks)

    # ---- single-index operations ----

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise TaskIndexError(f"invalid task number: {index}")
        return index - 1

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._offset(index))

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def mark_undone(self, index: int) -> Task:
        task = self.get(index)
        task.mark_undone()
        return task

    # ---- batch operations (all-or-nothing) ----

    def _validate(self, indices: Iterable[int]) -> list[int]:
        checked = list(indices)
        for index in checked:
            self._offset(index)
        return checked

    def mark_done_many(self, indices: Iterable[int]) -> list[Task]:
        checked = self._validate(indices)
        return [self.mark_done(i) for i in checked]

    def mark_undone_many(self, indices: Iterable[int]) -> list[Task]:
        checked = self._validate(indices)
        return [self.mark_undone(i) for i in checked]

    def remove_many(self, indices: Iterable[int]) -> list[Task]:
        """
        Remove several tasks at once.

        Indices refer to the list as it was before the call, so "1 2" removes
        the first two tasks. A repeated index is removed once. Returned tasks
        follow the order given.
        """
        checked = self._validate(indices)
        offsets = list(dict.fromkeys(self._offset(i) for i in checked))
        removed = [self._tasks[o] for o in offsets]
        drop = set(offsets)
        self._tasks = [t for pos, t in enumerate(self._tasks) if pos not in drop]
        return removed
