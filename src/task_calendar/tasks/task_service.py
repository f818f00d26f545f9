# src/task_calendar/tasks/task_service.py

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from ..core.errors import NotFoundError, ValidationError
from ..core.ports import Clock, TaskRepo
from .task_models import DueDateChange, Task, parse_timestamp

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name and description are required"
INVALID_DUE_DATE_MESSAGE = "dueDate must be a valid ISO-8601 timestamp"

# UTC offsets stay under one day, so due dates inside these bounds can be
# converted into any calendar timezone without overflowing.
_EARLIEST_DUE = datetime.min.replace(tzinfo=UTC) + timedelta(days=1)
_LATEST_DUE = datetime.max.replace(tzinfo=UTC) - timedelta(days=1)


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_task_id() -> str:
    return str(uuid.uuid4())


def _require_text(name: str | None, description: str | None) -> tuple[str, str]:
    if not name or not name.strip() or not description or not description.strip():
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    return name, description


def _checked_due_date(raw: str) -> str:
    try:
        due = parse_timestamp(raw)
    except (ValueError, OverflowError) as e:
        raise ValidationError(INVALID_DUE_DATE_MESSAGE) from e
    if not _EARLIEST_DUE <= due <= _LATEST_DUE:
        raise ValidationError(INVALID_DUE_DATE_MESSAGE)
    return raw


class TaskService:
    """
    Business rules on top of a TaskRepo.

    - create: validates, assigns a UUID4 id, stamps createdAt == updatedAt
    - update: full replace of name/description, selective merge of
      completed/dueDate, always refreshes updatedAt
    - delete: removes and returns the record
    """

    def __init__(self, store: TaskRepo, *, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    def _now(self, *, not_before: datetime | None = None) -> datetime:
        now = self._clock()
        if not_before is not None and now < not_before:
            # Wall clock stepped back; keep updatedAt monotonic per task.
            return not_before
        return now

    def list_tasks(self) -> list[Task]:
        return self._store.list()

    def get_task(self, task_id: str) -> Task:
        task = self._store.find_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    def create_task(
        self,
        name: str | None,
        description: str | None,
        due_date: str | None = None,
    ) -> Task:
        name, description = _require_text(name, description)

        due = _checked_due_date(due_date) if due_date and due_date.strip() else None

        now = self._now()
        task = Task(
            id=new_task_id(),
            name=name,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now,
            due_date=due,
        )
        self._store.insert(task)
        logger.info("Task created id=%s due=%s", task.id, task.due_date)
        return task

    def update_task(
        self,
        task_id: str,
        name: str | None,
        description: str | None,
        completed: bool | None = None,
        due_date: DueDateChange | None = None,
    ) -> Task:
        with self._store.locked():
            current = self._store.find_by_id(task_id)
            if current is None:
                raise NotFoundError("Task not found")

            name, description = _require_text(name, description)

            new_due = current.due_date
            if due_date is not None:
                new_due = None if due_date.clears else _checked_due_date(due_date.value or "")

            updated = replace(
                current,
                name=name,
                description=description,
                completed=current.completed if completed is None else completed,
                due_date=new_due,
                updated_at=self._now(not_before=current.updated_at),
            )
            self._store.replace(task_id, updated)

        logger.info(
            "Task updated id=%s status=%s due=%s", task_id, updated.status.value, updated.due_date
        )
        return updated

    def delete_task(self, task_id: str) -> Task:
        removed = self._store.remove(task_id)
        logger.info("Task deleted id=%s", task_id)
        return removed
