"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, DueDateChange, TaskSummary)
- task_store.py: in-memory storage guarded by a re-entrant lock
- task_service.py: create/list/update/delete rules on top of the store
- task_api.py: read-only helpers used by the UI (summary, calendar grouping)
"""
