# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

NULL_TASK_ID = -1


@dataclass(slots=True)
class Task:
    """
    A single to-do record.

    Notes:
    - `edit` is UI state: it marks a task whose edit form is currently open, so a full
      page render (no-JS clients) shows the form instead of the read-only row.
    - id == NULL_TASK_ID marks the "not found" sentinel (see null_task()).
    """

    id: int
    title: str
    description: str = ""
    priority: str = ""
    completed: bool = False
    edit: bool = False

    @property
    def is_null(self) -> bool:
        return self.id == NULL_TASK_ID


def null_task() -> Task:
    """Fresh "no such task" value. Never stored, persisted or rendered."""
    return Task(id=NULL_TASK_ID, title="")
