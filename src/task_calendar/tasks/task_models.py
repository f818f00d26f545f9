# src/task_calendar/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status as seen by clients.

    Notes:
    - derived from Task.completed, never stored separately
    - "deleted" is terminal and has no value here: the record is simply gone
    """

    PENDING = "pending"
    COMPLETED = "completed"


def format_timestamp(ts: datetime) -> str:
    """UTC, millisecond precision, 'Z' suffix: 2025-01-01T00:00:00.000Z"""
    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    """
    Parse an ISO-8601 timestamp (or plain date) into an aware UTC datetime.

    Naive values are taken as UTC. Raises ValueError when unparseable.
    """
    text = raw.strip()
    if not text:
        raise ValueError("empty timestamp")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    name: str
    description: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    # Kept verbatim as supplied by the client; None means "no due date".
    due_date: str | None = None

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self.completed else TaskStatus.PENDING

    @property
    def due_at(self) -> datetime | None:
        if self.due_date is None:
            return None
        return parse_timestamp(self.due_date)

    def is_overdue(self, now: datetime) -> bool:
        due = self.due_at
        return due is not None and not self.completed and due < now

    def to_wire(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "completed": self.completed,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }
        if self.due_date is not None:
            out["dueDate"] = self.due_date
        return out


@dataclass(frozen=True, slots=True)
class DueDateChange:
    """
    Explicit due-date edit carried by an update.

    An update without a DueDateChange leaves the due date alone.
    DueDateChange(None) or DueDateChange("") removes it.
    """

    value: str | None

    @property
    def clears(self) -> bool:
        return self.value is None or not self.value.strip()


@dataclass(frozen=True, slots=True)
class TaskSummary:
    total: int
    completed: int
    pending: int
    overdue: int
    due_today: int

    def to_wire(self) -> dict[str, int]:
        return {
            "total": self.total,
            "completed": self.completed,
            "pending": self.pending,
            "overdue": self.overdue,
            "dueToday": self.due_today,
        }
