# src/taskling/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data file exists,
- replays saved tasks into AppState (empty list if the file is unreadable).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import LoadError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

LOAD_FAILED_NOTICE = "Failed to load your saved tasks. Starting fresh with an empty list."


def _ensure_local_files(settings, store: TaskStore) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    try:
        store.ensure_file()
    except OSError:
        # load() reports the same problem as a LoadError below.
        logger.warning("Could not create task file %s", store.path, exc_info=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    _ensure_local_files(settings, store)

    notice: str | None = None
    tasks: list[Task]
    try:
        tasks = store.load()
    except LoadError as e:
        logger.warning("Starting with an empty task list: %s", e)
        tasks = []
        notice = LOAD_FAILED_NOTICE

    return AppState(
        settings=settings,
        task_list=TaskList(tasks),
        task_store=store,
        startup_notice=notice,
    )
