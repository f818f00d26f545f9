# src/task_calendar/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ..core.errors import ConflictError, NotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Holds the one authoritative collection for the process. Nothing is
    persisted: a restart starts from an empty store.

    Thread-safety:
    - every public method runs under one re-entrant lock
    - locked() lets a caller run several calls as a single serialized step
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._lock = threading.RLock()
        logger.info("TaskStore ready (in-memory)")

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return -1

    # ---- public API ----

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list(self) -> list[Task]:
        """All tasks in insertion order (a copy; the store keeps its own list)."""
        with self._lock:
            return list(self._tasks)

    def insert(self, task: Task) -> Task:
        with self._lock:
            if self._index_of(task.id) != -1:
                raise ConflictError(f"Task id already exists: {task.id}")
            self._tasks.append(task)
            logger.debug("Task inserted id=%s total=%s", task.id, len(self._tasks))
            return task

    def find_by_id(self, task_id: str) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            return self._tasks[idx] if idx != -1 else None

    def replace(self, task_id: str, updated: Task) -> Task:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                raise NotFoundError("Task not found")
            if updated.id != task_id:
                raise ConflictError(f"Task id is immutable: {task_id} -> {updated.id}")
            self._tasks[idx] = updated
            logger.debug("Task replaced id=%s", task_id)
            return updated

    def remove(self, task_id: str) -> Task:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                raise NotFoundError("Task not found")
            removed = self._tasks.pop(idx)
            logger.debug("Task removed id=%s total=%s", task_id, len(self._tasks))
            return removed
