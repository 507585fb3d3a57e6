# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings in production, a SimpleNamespace in tests).
    settings: object

    task_store: TaskRepo
