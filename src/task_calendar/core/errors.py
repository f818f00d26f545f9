# src/task_calendar/core/errors.py

"""
Error taxonomy shared by the store, the service and the HTTP boundary.

The core raises these; only the boundary decides how they map to status codes.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every error the task core raises on purpose."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskError):
    """A required field is missing/empty or a value cannot be parsed."""


class NotFoundError(TaskError):
    """No live task has the requested id."""


class ConflictError(TaskError):
    """A task with the same id already exists in the store."""


class InternalError(TaskError):
    """Unexpected failure. The message is generic and safe to show to clients."""
