# src/taskling/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_list: TaskList
    task_store: TaskRepo

    # One boundary around parse -> mutate -> save, so the file always
    # mirrors a complete in-memory snapshot.
    lock: threading.Lock = field(default_factory=threading.Lock)

    # Set by bootstrap when the saved file could not be read.
    startup_notice: str | None = None
