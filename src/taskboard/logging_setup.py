# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows taskboard and uvicorn records; other libraries only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith("taskboard."):
            return True

        if name.startswith("uvicorn"):
            return record.levelno >= logging.INFO

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    log_dir: str | Path = "data/logs",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Send taskboard, uvicorn and request-timing records to stderr (filtered, at
    console_level) and everything at file_level to <log_dir>/taskboard.log.

    Called once from cli.main before the store is opened, so load warnings about
    skipped task lines end up in both places.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskboard.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Drop handlers from earlier calls; uvicorn (log_config=None) adds none of its own.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
