# src/taskboard/web/render.py

"""
HTML rendering for pages and htmx fragments.

Pure functions over Task values; nothing here touches the store.
`oob=True` marks a fragment for an out-of-band swap (hx-swap-oob), so one
response can update the task row, the status banner and the counter together.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..tasks.task_models import Task

TEMPLATES_DIR = Path(__file__).parent / "templates"

EMPTY_LIST_MESSAGE = "No tasks yet. Add one above!"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(("html",)),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(name: str, **context: object) -> str:
    return _env.get_template(name).render(**context)


def _require_real(task: Task) -> None:
    if task.is_null:
        raise ValueError("the null task cannot be rendered")


def render_page(
    tasks: Sequence[Task],
    *,
    title: str = "Tasks",
    app_name: str = "taskboard",
    message: str = "",
) -> str:
    for t in tasks:
        _require_real(t)
    return _render(
        "index.html",
        tasks=list(tasks),
        title=title,
        app_name=app_name,
        count=len(tasks),
        message=message,
        alert=False,
        oob=False,
    )


def render_task(task: Task, *, oob: bool = False) -> str:
    _require_real(task)
    return _render("_task.html", task=task, oob=oob)


def render_edit(task: Task) -> str:
    _require_real(task)
    return _render("_edit.html", task=task)


def render_status(message: str, *, alert: bool = False) -> str:
    return _render("_status.html", message=message, alert=alert, oob=True)


def render_count(count: int) -> str:
    return _render("_count.html", count=count, oob=True)


def render_empty_message(count: int) -> str:
    return _render("_empty.html", count=count)


def render_input_form() -> str:
    return _render("_form.html", oob=True)
