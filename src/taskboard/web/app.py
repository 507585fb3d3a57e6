# src/taskboard/web/app.py

"""
HTTP handlers.

Each handler makes one store call and one render call. htmx requests
(`HX-Request: true`) get HTML fragments; plain form posts get a 303 redirect
back to the page (POST-Redirect-GET), so the app works without JavaScript.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ..core.state import AppState
from ..tasks.task_api import TaskForm, TaskValidationError, create_task, edit_task, parse_task_id
from ..tasks.task_models import Task, null_task
from .render import (
    render_count,
    render_edit,
    render_empty_message,
    render_input_form,
    render_page,
    render_status,
    render_task,
)
from .timing import js_mode, timed

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "An error occurred: could not find task."


def is_htmx(request: Request) -> bool:
    return request.headers.get("HX-Request", "").strip().lower() == "true"


def _html(body: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(body, status_code=status_code)


def _redirect(location: str) -> RedirectResponse:
    return RedirectResponse(location, status_code=303)


def _not_found(htmx: bool) -> Response:
    if htmx:
        return _html(render_status(NOT_FOUND_MESSAGE, alert=True), 404)
    return _redirect("/tasks")


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI app around an already constructed AppState."""
    settings = state.settings
    store = state.task_store
    app_name = str(getattr(settings, "app_name", "taskboard"))
    timing = bool(getattr(settings, "timing_log", True))

    app = FastAPI(title=app_name, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.app_state = state

    def _by_id(raw_id: str, op: Callable[[int], Task]) -> Task:
        task_id = parse_task_id(raw_id)
        if task_id is None:
            return null_task()
        return op(task_id)

    @app.get("/")
    def index() -> Response:
        return _redirect("/tasks")

    @app.get("/tasks")
    def list_tasks(request: Request) -> Response:
        with timed("T0_list", js_mode(is_htmx(request)), enabled=timing):
            return _html(render_page(store.all(), app_name=app_name))

    @app.post("/tasks")
    def add_task(
        request: Request,
        title: str = Form(""),
        description: str = Form(""),
        priority: str = Form(""),
    ) -> Response:
        htmx = is_htmx(request)
        with timed("T1_add", js_mode(htmx), enabled=timing):
            form = TaskForm.from_fields(title, description, priority)
            try:
                task = create_task(store, form)
            except TaskValidationError as e:
                logger.info("Rejected new task: %s", e)
                if htmx:
                    return _html(render_status(str(e), alert=True), 400)
                return _redirect("/tasks")

            if not htmx:
                return _redirect("/tasks")

            size = store.size()
            body = (
                render_task(task)
                + render_status(f'Task "{task.title}" added successfully.')
                + render_count(size)
                + render_empty_message(size)
                + render_input_form()
            )
            return _html(body, 201)

    @app.post("/tasks/{task_id}/delete")
    def delete_task(request: Request, task_id: str) -> Response:
        htmx = is_htmx(request)
        with timed("T2_delete", js_mode(htmx), enabled=timing):
            parsed = parse_task_id(task_id)
            removed = store.delete(parsed) if parsed is not None else False

            if not htmx:
                return _redirect("/tasks")

            size = store.size()
            message = "Task deleted." if removed else "Could not delete task."
            return _html(render_status(message) + render_count(size) + render_empty_message(size))

    @app.post("/tasks/{task_id}/complete")
    def complete_task(request: Request, task_id: str) -> Response:
        htmx = is_htmx(request)
        with timed("T3_complete", js_mode(htmx), enabled=timing):
            task = _by_id(task_id, store.toggle_completed)
            if task.is_null:
                return _not_found(htmx)

            if not htmx:
                return _redirect(f"/tasks#task-{task.id}")

            done = "" if task.completed else "not "
            return _html(
                render_task(task, oob=True)
                + render_status(f"Task has been set to {done}completed.")
            )

    @app.get("/tasks/{task_id}/edit")
    def open_edit(request: Request, task_id: str) -> Response:
        htmx = is_htmx(request)
        with timed("T4_edit_view", js_mode(htmx), enabled=timing):
            task = _by_id(task_id, store.start_edit)
            if task.is_null:
                return _not_found(htmx)

            if not htmx:
                return _redirect(f"/tasks#task-{task.id}")
            return _html(render_edit(task))

    @app.post("/tasks/{task_id}/edit")
    def submit_edit(
        request: Request,
        task_id: str,
        title: str = Form(""),
        description: str = Form(""),
        priority: str = Form(""),
    ) -> Response:
        htmx = is_htmx(request)
        with timed("T5_edit_confirm", js_mode(htmx), enabled=timing):
            parsed = parse_task_id(task_id)
            # unknown ids answer 404 before the title is checked
            if parsed is None or store.get(parsed).is_null:
                return _not_found(htmx)

            form = TaskForm.from_fields(title, description, priority)
            try:
                task = edit_task(store, parsed, form)
            except TaskValidationError as e:
                logger.info("Rejected edit for task id=%s: %s", parsed, e)
                if htmx:
                    return _html(render_status(str(e), alert=True), 400)
                return _redirect(f"/tasks#task-{parsed}")

            if task.is_null:
                return _not_found(htmx)

            if not htmx:
                return _redirect(f"/tasks#task-{task.id}")
            return _html(render_task(task, oob=True))

    @app.get("/tasks/{task_id}/view")
    def close_edit(request: Request, task_id: str) -> Response:
        htmx = is_htmx(request)
        with timed("T6_view", js_mode(htmx), enabled=timing):
            task = _by_id(task_id, store.cancel_edit)
            if task.is_null:
                return _not_found(htmx)

            if not htmx:
                return _redirect(f"/tasks#task-{task.id}")
            return _html(render_task(task, oob=True))

    return app
