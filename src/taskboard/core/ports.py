# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the web layer.

Handlers depend on this Protocol instead of the concrete TaskStore,
which keeps storage swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Reads (no persist)
    def all(self) -> list[Task]: ...
    def get(self, task_id: int) -> Task: ...
    def size(self) -> int: ...

    # Writes (each one persists the full collection)
    def add(self, title: str, description: str = "", priority: str = "") -> Task: ...
    def delete(self, task_id: int) -> bool: ...

    # Id-scoped writes return the null task when the id is unknown
    def toggle_completed(self, task_id: int) -> Task: ...
    def start_edit(self, task_id: int) -> Task: ...
    def cancel_edit(self, task_id: int) -> Task: ...
    def update(
            self,
            task_id: int,
            title: str,
            description: str = "",
            priority: str = "",
    ) -> Task: ...
