# src/todo_list/tasks/task_input.py

"""
Construction boundary for tasks.

Everything the user types goes through here before reaching TaskStore,
so the store never sees an empty title or a malformed date.
"""

from __future__ import annotations

import re
from datetime import date

from ..errors import ValidationError
from .task_models import Priority, Task

DATE_FORMAT_HINT = "yyyy-MM-dd"

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_due_date(text: str | None) -> date | None:
    """Blank -> None; otherwise strict YYYY-MM-DD."""
    raw = (text or "").strip()
    if not raw:
        return None
    # fromisoformat alone also accepts "20250101" and week dates on 3.11+.
    if not _ISO_DATE_RE.match(raw):
        raise ValidationError(f"Due date must be in {DATE_FORMAT_HINT} format.")
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise ValidationError(f"Due date must be in {DATE_FORMAT_HINT} format.") from e


def parse_priority(text: str | Priority) -> Priority:
    if isinstance(text, Priority):
        return text
    try:
        return Priority(str(text).strip())
    except ValueError as e:
        choices = "/".join(p.value for p in Priority)
        raise ValidationError(f"Priority must be one of {choices}.") from e


def validate_title(title: str | None, empty_message: str = "Please enter a title.") -> str:
    clean = (title or "").strip()
    if not clean:
        raise ValidationError(empty_message)
    return clean


def build_task(
    title: str | None,
    due_text: str | None = "",
    priority: str | Priority = Priority.MEDIUM,
    done: bool = False,
) -> Task:
    return Task(
        title=validate_title(title),
        due_date=parse_due_date(due_text),
        priority=parse_priority(priority),
        done=bool(done),
    )


def format_due(value: Task | date | None) -> str:
    if isinstance(value, Task):
        value = value.due_date
    return value.isoformat() if value is not None else ""
