# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskling.core.state import AppState
from taskling.tasks.task_list import TaskList
from taskling.tasks.task_store import TaskStore

from .fakes import RecordingTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskling-test",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_file=tmp_path / "logs" / "taskling.log",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    s = TaskStore(settings.tasks_path)
    s.ensure_file()
    return s


@pytest.fixture()
def repo() -> RecordingTaskRepo:
    return RecordingTaskRepo()


@pytest.fixture()
def state(settings: SimpleNamespace, repo: RecordingTaskRepo) -> AppState:
    """
    AppState wired with an in-memory repo.

    The real file store has its own tests; here we only need to see
    which snapshots were saved.
    """
    return AppState(settings=settings, task_list=TaskList(), task_store=repo)
