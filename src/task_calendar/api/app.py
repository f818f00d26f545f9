# src/task_calendar/api/app.py

"""
HTTP boundary.

Endpoints:
    GET    /api/tasks               -> all tasks
    POST   /api/tasks               -> create (201)
    PUT    /api/tasks/{task_id}     -> update
    DELETE /api/tasks/{task_id}     -> delete
    GET    /api/tasks/summary       -> header counters
    GET    /api/calendar            -> tasks grouped by due day for one month
    GET    /api/health              -> liveness + task count

Every response is an envelope: {"success": true, "data": ...} or
{"success": false, "error": "..."}. Internal details are logged, never returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import ConflictError, InternalError, NotFoundError, ValidationError
from ..core.state import AppState
from ..tasks.task_api import group_by_due_day, summarize
from .schemas import CreateTaskRequest, UpdateTaskRequest

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def _ok(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": True, "data": data})


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _run(action: str, call: Callable[[], Any], *, status_code: int = 200) -> JSONResponse:
    """
    Invoke one service call and map the outcome onto the envelope.

    `action` completes the generic 500 message: "Failed to <action>".
    """
    try:
        data = call()
    except ValidationError as e:
        return _fail(400, e.message)
    except NotFoundError as e:
        return _fail(404, e.message)
    except ConflictError:
        logger.exception("Task id conflict, failed to %s", action)
        return _fail(500, InternalError(f"Failed to {action}").message)
    except Exception:
        logger.exception("Unexpected error, failed to %s", action)
        return _fail(500, InternalError(f"Failed to {action}").message)
    return _ok(data, status_code)


def create_app(state: AppState) -> FastAPI:
    settings = state.settings
    service = state.task_service

    app = FastAPI(title=str(getattr(settings, "app_name", "task-calendar")), version="1.0.0")
    app.state.app_state = state

    origins = list(getattr(settings, "cors_origins", []) or [])
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return _fail(400, INVALID_BODY_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _fail(exc.status_code, str(exc.detail))

    # ---- tasks ----

    @app.get("/api/tasks")
    def list_tasks() -> JSONResponse:
        return _run("fetch tasks", lambda: [t.to_wire() for t in service.list_tasks()])

    @app.post("/api/tasks")
    def create_task(body: CreateTaskRequest) -> JSONResponse:
        return _run(
            "create task",
            lambda: service.create_task(body.name, body.description, body.due_date).to_wire(),
            status_code=201,
        )

    @app.get("/api/tasks/summary")
    def task_summary() -> JSONResponse:
        return _run(
            "summarize tasks",
            lambda: summarize(service.list_tasks(), state.clock(), state.calendar_tz).to_wire(),
        )

    @app.put("/api/tasks/{task_id}")
    def update_task(task_id: str, body: UpdateTaskRequest) -> JSONResponse:
        return _run(
            "update task",
            lambda: service.update_task(
                task_id,
                body.name,
                body.description,
                completed=body.completed,
                due_date=body.due_date_change(),
            ).to_wire(),
        )

    @app.delete("/api/tasks/{task_id}")
    def delete_task(task_id: str) -> JSONResponse:
        return _run("delete task", lambda: service.delete_task(task_id).to_wire())

    # ---- calendar ----

    @app.get("/api/calendar")
    def calendar_month(year: int | None = None, month: int | None = None) -> JSONResponse:
        today = state.clock().astimezone(state.calendar_tz).date()

        def _grouped() -> dict[str, list[dict[str, Any]]]:
            days = group_by_due_day(
                service.list_tasks(),
                year=today.year if year is None else year,
                month=today.month if month is None else month,
                tz=state.calendar_tz,
            )
            return {day: [t.to_wire() for t in tasks] for day, tasks in days.items()}

        return _run("fetch calendar", _grouped)

    @app.get("/api/health")
    def health() -> JSONResponse:
        return _ok({"status": "ok", "tasks": state.task_store.count()})

    return app
