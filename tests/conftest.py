# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from task_calendar.api.app import create_app
from task_calendar.cli.bootstrap import create_initial_state
from task_calendar.core.state import AppState
from task_calendar.tasks.task_service import TaskService
from task_calendar.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the API.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-calendar-test",
        log_level="DEBUG",
        host="127.0.0.1",
        port=0,
        cors_origins=[],
        calendar_tz="UTC",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def service(store: TaskStore, clock: FakeClock) -> TaskService:
    return TaskService(store, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    """AppState wired exactly like the CLI does, but with a fake clock."""
    return create_initial_state(settings=settings, clock=clock)


@pytest.fixture()
def client(state: AppState) -> Iterator[TestClient]:
    with TestClient(create_app(state)) as c:
        yield c
