# src/taskboard/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskValidationError(ValueError):
    """Submitted task fields were rejected before reaching the store."""


@dataclass(slots=True, frozen=True)
class TaskForm:
    title: str
    description: str
    priority: str

    @classmethod
    def from_fields(
        cls,
        title: str | None,
        description: str | None = None,
        priority: str | None = None,
    ) -> TaskForm:
        """Build from submitted form values; missing fields become "", values are trimmed."""
        return cls(
            title=(title or "").strip(),
            description=(description or "").strip(),
            priority=(priority or "").strip(),
        )


def validate_title(title: str) -> str:
    if not title or not title.strip():
        raise TaskValidationError("Title is required. Please enter at least one character.")
    return title.strip()


def create_task(repo: TaskRepo, form: TaskForm) -> Task:
    """Validate and add. The store itself accepts any title, so this is the only gate."""
    title = validate_title(form.title)
    task = repo.add(title, form.description, form.priority)
    logger.info("Task created id=%s", task.id)
    return task


def edit_task(repo: TaskRepo, task_id: int, form: TaskForm) -> Task:
    """Validate and apply an edit; returns the null task when the id is unknown."""
    title = validate_title(form.title)
    task = repo.update(task_id, title, form.description, form.priority)
    if task.is_null:
        logger.info("Edit for unknown task id=%s ignored", task_id)
    return task


def parse_task_id(raw: str | None) -> int | None:
    """Path segment -> id, or None when it is not an integer."""
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None
