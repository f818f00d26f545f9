# src/task_calendar/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the one TaskStore and its TaskService into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.task_api import resolve_timezone
from ..tasks.task_service import TaskService, utc_now
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    clock = clock or utc_now
    store = TaskStore()

    state = AppState(
        settings=settings,
        task_store=store,
        task_service=TaskService(store, clock=clock),
        calendar_tz=resolve_timezone(getattr(settings, "calendar_tz", "UTC")),
        clock=clock,
    )
    logger.debug("AppState ready data_dir=%s tz=%s", settings.data_dir, state.calendar_tz)
    return state
