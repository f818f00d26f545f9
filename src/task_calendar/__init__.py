"""
task_calendar: single-user task tracker served over a small JSON API.

Subpackages:
- tasks/: models, in-memory store, service rules, calendar/summary queries
- api/: FastAPI boundary (request schemas, envelope mapping)
- core/: error taxonomy, ports, AppState
- cli/: composition root and the `task-calendar` entry point
"""
