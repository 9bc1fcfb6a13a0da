# src/taskling/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands depend on this Protocol instead of the concrete file store,
which keeps persistence swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: replay everything, rewrite everything."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
