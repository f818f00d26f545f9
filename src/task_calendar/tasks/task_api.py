# src/task_calendar/tasks/task_api.py

from __future__ import annotations

import calendar
import logging
from collections.abc import Iterable
from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.errors import ValidationError
from .task_models import Task, TaskSummary

logger = logging.getLogger(__name__)


def resolve_timezone(name: str) -> tzinfo:
    """
    Look up an IANA zone name for calendar grouping.
    Unknown names fall back to UTC with a warning.
    """
    if name.strip().upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown calendar timezone %r, using UTC.", name)
        return UTC


def summarize(tasks: Iterable[Task], now: datetime, tz: tzinfo | None = None) -> TaskSummary:
    """
    Counters shown in the UI header.

    due_today compares calendar days in `tz` (UTC when omitted) and includes
    completed tasks, like the calendar does.
    """
    tz = tz or UTC
    today = now.astimezone(tz).date()

    total = completed = overdue = due_today = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
        if task.is_overdue(now):
            overdue += 1
        due = task.due_at
        if due is not None and due.astimezone(tz).date() == today:
            due_today += 1

    return TaskSummary(
        total=total,
        completed=completed,
        pending=total - completed,
        overdue=overdue,
        due_today=due_today,
    )


def group_by_due_day(
    tasks: Iterable[Task], *, year: int, month: int, tz: tzinfo
) -> dict[str, list[Task]]:
    """
    Tasks due within one calendar month, keyed by ISO day ("2025-01-31").

    Days are ascending; within a day tasks keep their store order.
    Tasks without a due date never appear.
    """
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    if not date.min.year <= year <= date.max.year:
        raise ValidationError("year is out of range")

    days: dict[date, list[Task]] = {}
    for task in tasks:
        due = task.due_at
        if due is None:
            continue
        day = due.astimezone(tz).date()
        if day.year == year and day.month == month:
            days.setdefault(day, []).append(task)

    logger.debug(
        "Calendar %04d-%02d: %d days with tasks (of %d)",
        year,
        month,
        len(days),
        calendar.monthrange(year, month)[1],
    )
    return {d.isoformat(): days[d] for d in sorted(days)}
