# src/task_calendar/api/schemas.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from ..tasks.task_models import DueDateChange


class CreateTaskRequest(BaseModel):
    """Body of POST /api/tasks. Missing name/description is a service-level 400."""

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr | None = None
    description: StrictStr | None = None
    due_date: StrictStr | None = Field(default=None, alias="dueDate")


class UpdateTaskRequest(BaseModel):
    """
    Body of PUT /api/tasks/{id}.

    `dueDate` has three states: omitted (keep), a string (set), null or "" (clear).
    model_fields_set is what tells "omitted" apart from an explicit null.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr | None = None
    description: StrictStr | None = None
    completed: StrictBool | None = None
    due_date: StrictStr | None = Field(default=None, alias="dueDate")

    def due_date_change(self) -> DueDateChange | None:
        if "due_date" not in self.model_fields_set:
            return None
        return DueDateChange(self.due_date)
