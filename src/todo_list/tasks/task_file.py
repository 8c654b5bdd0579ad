# src/todo_list/tasks/task_file.py

"""
Whole-list persistence for tasks.

File format: a JSON array, one object per task, in list order:
  {"title": str, "due_date": "YYYY-MM-DD" | null, "priority": "Low|Medium|High", "done": bool}

Saving writes a sibling .tmp file and swaps it in with os.replace, so a
failed write never clobbers the previous save.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from ..errors import LoadError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "title": task.title,
        "due_date": task.due_date.isoformat() if task.due_date else None,
        "priority": task.priority.value,
        "done": task.done,
    }


def _task_from_dict(raw: Any, pos: int) -> Task:
    if not isinstance(raw, dict):
        raise ValueError(f"record {pos} is not an object")

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValueError(f"record {pos} has no title")

    due_raw = raw.get("due_date")
    if due_raw is not None and not isinstance(due_raw, str):
        raise ValueError(f"record {pos} has a non-text due_date")
    due = date.fromisoformat(due_raw) if due_raw else None

    priority = Priority(raw.get("priority"))

    done = raw.get("done", False)
    if not isinstance(done, bool):
        raise ValueError(f"record {pos} has a non-boolean done flag")

    return Task(title=title, due_date=due, priority=priority, done=done)


def save_tasks(tasks: Iterable[Task], path: str | Path) -> int:
    """
    Write all tasks to `path`, replacing any previous content.

    Returns the number of tasks written. Raises OSError on failure; the
    file at `path` is left as it was.
    """
    path = Path(path)
    records = [_task_to_dict(t) for t in tasks]
    payload = json.dumps(records, ensure_ascii=False, indent=2)

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(payload, "utf-8")
        os.replace(tmp, path)
    except OSError:
        logger.exception("Failed to save tasks to %s", path)
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise

    logger.info("Saved tasks: %d to %s", len(records), path)
    return len(records)


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read all tasks from `path`.

    A missing file is the first-run state and yields []. Anything else that
    goes wrong raises LoadError with the original exception chained.
    """
    path = Path(path)
    try:
        text = path.read_text("utf-8")
    except FileNotFoundError:
        logger.info("No tasks file at %s, starting empty.", path)
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, str(e)) from e

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # RecursionError: pathologically nested arrays/objects.
        raise LoadError(path, str(e) or type(e).__name__) from e

    if not isinstance(data, list):
        raise LoadError(path, "top-level value is not a list")

    try:
        tasks = [_task_from_dict(raw, pos) for pos, raw in enumerate(data)]
    except ValueError as e:
        raise LoadError(path, str(e)) from e

    logger.info("Loaded tasks: %d from %s", len(tasks), path)
    return tasks
