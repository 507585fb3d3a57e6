# tests/test_task_store_concurrency.py

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from taskboard.tasks.task_store import TaskStore

N = 150


def test_concurrent_adds_from_threads(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.csv")
    start = threading.Barrier(16)

    def add(i: int) -> int:
        if i < 16:
            start.wait()
        return store.add(f"task {i}").id

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(add, range(N)))

    assert len(set(ids)) == N
    assert store.size() == N
    assert {t.id for t in store.all()} == set(ids)

    lines = store.path.read_text("utf-8").splitlines()
    assert len(lines) == N + 1

    reloaded = TaskStore(store.path)
    assert {t.id for t in reloaded.all()} == set(ids)


def test_concurrent_mixed_mutations_keep_file_consistent(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.csv")
    seed = [store.add(f"seed {i}").id for i in range(20)]

    def work(i: int) -> None:
        task_id = seed[i % len(seed)]
        if i % 4 == 0:
            store.toggle_completed(task_id)
        elif i % 4 == 1:
            store.add(f"extra {i}")
        elif i % 4 == 2:
            store.start_edit(task_id)
        else:
            store.delete(task_id)

    with ThreadPoolExecutor(max_workers=12) as pool:
        list(pool.map(work, range(200)))

    # the file always mirrors memory after the last write
    assert TaskStore(store.path).all() == store.all()


@pytest.mark.asyncio
async def test_concurrent_adds_from_tasks(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.csv")

    tasks = await asyncio.gather(
        *(asyncio.to_thread(store.add, f"async {i}", "", "") for i in range(N))
    )

    ids = [t.id for t in tasks]
    assert len(set(ids)) == N
    assert sorted(ids) == list(range(1, N + 1))
    assert len(store.path.read_text("utf-8").splitlines()) == N + 1
