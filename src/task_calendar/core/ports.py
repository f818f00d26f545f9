# src/task_calendar/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service depends on Protocols instead of concrete implementations,
so the in-memory store can be swapped and tests can inject a fake clock.
"""

from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Any, Protocol

Clock = Callable[[], datetime]
# Returns the current time as an aware UTC datetime.


class TaskRepo(Protocol):
    def locked(self) -> AbstractContextManager[None]: ...
    def count(self) -> int: ...
    def list(self) -> list[Any]: ...
    def insert(self, task: Any) -> Any: ...
    def find_by_id(self, task_id: str) -> Any | None: ...
    def replace(self, task_id: str, updated: Any) -> Any: ...
    def remove(self, task_id: str) -> Any: ...
