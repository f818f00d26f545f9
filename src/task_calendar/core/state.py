# src/task_calendar/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore
from .ports import Clock


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    # The single store instance shared by every request handler.
    task_store: TaskStore
    task_service: TaskService

    calendar_tz: tzinfo
    clock: Clock
