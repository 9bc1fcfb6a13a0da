# src/taskling/errors.py

"""
User-facing error taxonomy.

Every error here is recoverable: the dispatcher turns it into response text.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for errors reported back to the user as a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(TaskError):
    pass


class DateFormatError(TaskError):
    pass


class DateCountError(TaskError):
    pass


class UnknownCommandError(TaskError):
    pass


class TaskIndexError(TaskError, IndexError):
    """Task number out of range or not a positive integer."""


class EmptyNumberListError(TaskError):
    pass


class EmptyListError(TaskError):
    pass


class LoadError(TaskError):
    pass


class SaveError(TaskError):
    pass
