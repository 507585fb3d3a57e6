# src/taskboard/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import threading
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from .task_codec import MalformedLineError, decode_file, encode_file
from .task_models import Task, null_task

logger = logging.getLogger(__name__)


class TaskPersistError(RuntimeError):
    """Writing the tasks file failed; the in-memory state was left unchanged."""


class TaskStore:
    """
    In-memory task list mirrored to a flat file.

    Durability:
    - every mutation rewrites the whole file (header + one line per task)
    - the file is written to a temp sibling first, then swapped in with os.replace

    Thread-safety:
    - one lock serializes id allocation and every lookup-mutate-persist sequence
    - mutations are copy-on-write: a new list is persisted first and only then swapped in,
      so readers never need the lock and a failed write leaves memory untouched

    Lookups and id-scoped mutations return copies; a missing id gives null_task().
    """

    def __init__(self, path: str | Path = "data/tasks.csv") -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._next_id = 1
        self._load_or_create()
        logger.info(
            "TaskStore ready path=%s total=%s next_id=%s",
            self._path,
            len(self._tasks),
            self._next_id,
        )

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _load_or_create(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._write([])
            logger.info("Created empty tasks file %s", self._path)
            return

        tasks: list[Task] = []
        seen: set[int] = set()
        max_id = 0
        # surrogateescape keeps one undecodable line from losing the whole file;
        # decode_task rejects such lines individually
        text = self._path.read_bytes().decode("utf-8", errors="surrogateescape")
        for line_no, item in decode_file(text):
            if isinstance(item, MalformedLineError):
                logger.warning("Skipping malformed line %s:%d: %s", self._path, line_no, item)
                continue
            if item.id in seen:
                logger.warning("Skipping duplicate id=%s at %s:%d", item.id, self._path, line_no)
                continue
            seen.add(item.id)
            tasks.append(item)
            max_id = max(max_id, item.id)

        self._tasks = tasks
        self._next_id = max_id + 1

    def _write(self, tasks: list[Task]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(encode_file(tasks), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.exception("Failed to persist %d tasks to %s", len(tasks), self._path)
            raise TaskPersistError(f"failed to persist tasks to {self._path}") from e

    def _commit(self, tasks: list[Task]) -> None:
        # Caller holds the lock.
        self._write(tasks)
        self._tasks = tasks

    def _mutate(self, task_id: int, change: Callable[[Task], Task]) -> Task:
        with self._lock:
            for index, current in enumerate(self._tasks):
                if current.id == task_id:
                    break
            else:
                logger.debug("Task not found id=%s; nothing to update", task_id)
                return null_task()

            updated = change(current)
            tasks = list(self._tasks)
            tasks[index] = updated
            self._commit(tasks)
            return replace(updated)

    # ---- public API ----

    def all(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def get(self, task_id: int) -> Task:
        for t in self._tasks:
            if t.id == task_id:
                return replace(t)
        return null_task()

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return self.size()

    def add(self, title: str, description: str = "", priority: str = "") -> Task:
        """
        Append a new task with a freshly allocated id and persist.

        Title validation is the caller's job (see task_api.validate_title).
        If the write fails the id is still consumed: ids are never handed out twice.
        """
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                priority=priority,
            )
            self._next_id += 1
            self._commit([*self._tasks, task])
            logger.debug("Task added id=%s title=%r", task.id, task.title)
            return replace(task)

    def delete(self, task_id: int) -> bool:
        with self._lock:
            remaining = [t for t in self._tasks if t.id != task_id]
            if len(remaining) == len(self._tasks):
                return False
            self._commit(remaining)
            logger.debug("Task deleted id=%s", task_id)
            return True

    def toggle_completed(self, task_id: int) -> Task:
        return self._mutate(task_id, lambda t: replace(t, completed=not t.completed))

    def start_edit(self, task_id: int) -> Task:
        return self._mutate(task_id, lambda t: replace(t, edit=True))

    def cancel_edit(self, task_id: int) -> Task:
        return self._mutate(task_id, lambda t: replace(t, edit=False))

    def update(self, task_id: int, title: str, description: str = "", priority: str = "") -> Task:
        """Replace the text fields of a task and close its edit form."""
        return self._mutate(
            task_id,
            lambda t: replace(
                t,
                title=title,
                description=description,
                priority=priority,
                edit=False,
            ),
        )
