# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from taskboard.core.state import AppState
from taskboard.tasks.task_store import TaskStore
from taskboard.web.app import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the web layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        timing_log=True,
        data_dir=tmp_path,
        tasks_path=tmp_path / "data" / "tasks.csv",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real TaskStore on a tmp file.

    The file store is cheap and its behaviour is part of what we test.
    """
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def client(state: AppState) -> TestClient:
    return TestClient(create_app(state))


@pytest.fixture()
def htmx() -> dict[str, str]:
    return {"HX-Request": "true"}
