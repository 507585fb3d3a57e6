# src/taskboard/web/timing.py

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def js_mode(is_htmx: bool) -> str:
    return "on" if is_htmx else "off"


@contextmanager
def timed(code: str, mode: str, *, enabled: bool = True) -> Iterator[None]:
    """
    Log how long a handler body took.

    One INFO line per request, e.g. `timing code=T1_add js=on ms=3.2 ok=True`.
    Exceptions are logged with ok=False and re-raised.
    """
    start = time.perf_counter()
    ok = False
    try:
        yield
        ok = True
    finally:
        if enabled:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.info("timing code=%s js=%s ms=%.1f ok=%s", code, mode, elapsed_ms, ok)
