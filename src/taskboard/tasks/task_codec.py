# src/taskboard/tasks/task_codec.py

"""
Line codec for the tasks file.

Layout:
- line 1 is a header, always written as HEADER and always skipped on read
- every other line is `id,title,description,priority,completed,edit`

There is no quoting. The delimiter is stripped from text fields on write, and line breaks
become a space, so values containing either do not survive a round-trip unchanged.
Lines in the older five-field layout (no `edit`) are still accepted on read.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .task_models import Task

HEADER = "id,title"
DELIMITER = ","

FIELDS_V1 = 5
FIELDS_V2 = 6

_LINE_BREAKS = re.compile(r"[\r\n]+")
_ID = re.compile(r"-?[0-9]+")


class MalformedLineError(ValueError):
    """A persisted line that cannot be turned into a Task."""


def sanitize_field(value: str) -> str:
    return _LINE_BREAKS.sub(" ", value).replace(DELIMITER, "")


def _encode_bool(value: bool) -> str:
    return "true" if value else "false"


def _decode_bool(raw: str, field: str) -> bool:
    v = raw.strip().lower()
    if v == "true":
        return True
    if v == "false":
        return False
    raise MalformedLineError(f"{field} is not a boolean: {raw!r}")


def encode_task(task: Task) -> str:
    return DELIMITER.join(
        (
            str(task.id),
            sanitize_field(task.title),
            sanitize_field(task.description),
            sanitize_field(task.priority),
            _encode_bool(task.completed),
            _encode_bool(task.edit),
        )
    )


def decode_task(line: str) -> Task:
    line = line.rstrip("\r\n")
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        # bytes that were not valid UTF-8 on disk (read with surrogateescape)
        raise MalformedLineError("line is not valid UTF-8") from None

    parts = line.split(DELIMITER)
    if len(parts) not in (FIELDS_V1, FIELDS_V2):
        raise MalformedLineError(f"expected {FIELDS_V1} or {FIELDS_V2} fields, got {len(parts)}")

    if not _ID.fullmatch(parts[0]):
        raise MalformedLineError(f"id is not an integer: {parts[0][:32]!r}")
    try:
        task_id = int(parts[0])
    except ValueError as e:
        # e.g. more digits than int() accepts
        raise MalformedLineError(f"id is out of range: {parts[0][:32]!r}...") from e
    if task_id < 0:
        raise MalformedLineError(f"id is negative: {task_id}")

    completed = _decode_bool(parts[4], "completed")
    edit = _decode_bool(parts[5], "edit") if len(parts) == FIELDS_V2 else False

    return Task(
        id=task_id,
        title=parts[1],
        description=parts[2],
        priority=parts[3],
        completed=completed,
        edit=edit,
    )


def encode_file(tasks: Iterable[Task]) -> str:
    lines = [HEADER]
    lines.extend(encode_task(t) for t in tasks)
    return "\n".join(lines) + "\n"


def decode_file(text: str) -> Iterator[tuple[int, Task | MalformedLineError]]:
    """
    Yield (line_no, Task) for good lines and (line_no, MalformedLineError) for bad ones.

    The header line and blank lines are skipped. Line numbers are 1-based.
    """
    # split on "\n" only: str.splitlines() also breaks on characters sanitize_field keeps
    for line_no, line in enumerate(text.split("\n"), start=1):
        if line_no == 1 or not line.strip():
            continue
        try:
            yield line_no, decode_task(line)
        except MalformedLineError as e:
            yield line_no, e
