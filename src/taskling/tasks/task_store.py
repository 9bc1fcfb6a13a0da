# src/taskling/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import LoadError, SaveError, TaskError
from .task_models import Task, parse_record

logger = logging.getLogger(__name__)

RECORD_SEP = "\n"


class TaskStore:
    """
    Flat-file task store: one record line per task, UTF-8, no header.

    - load() replays the whole file
    - save() rewrites the whole file (no append log)

    The store never creates the file on load; ensure_file() is the
    bootstrap-time prerequisite.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_file(self) -> None:
        """Create parent directory and an empty file if missing."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._path.touch()
            logger.info("Created empty task file %s", self._path)

    def load(self) -> list[Task]:
        try:
            # newline="" keeps \r and other separators inside descriptions intact.
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"failed to read task file {self._path}: {e}") from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, line in enumerate(text.split(RECORD_SEP), start=1):
            if not line.strip():
                continue
            try:
                task = parse_record(line)
            except TaskError as e:
                logger.warning("Skipping malformed record %s:%d (%s)", self._path, lineno, e)
                skipped += 1
                continue
            if task is None:
                logger.debug("Skipping unknown record kind %s:%d", self._path, lineno)
                skipped += 1
                continue
            tasks.append(task)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [t.to_record_line() + RECORD_SEP for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write("".join(lines))
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            logger.exception("Failed to save tasks to %s", self._path)
            raise SaveError(f"failed to save tasks to {self._path}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
