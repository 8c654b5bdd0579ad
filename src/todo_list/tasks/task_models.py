# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class Priority(StrEnum):
    """
    Fixed priority set.

    Values are the persisted/displayed strings and are case-sensitive.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ChangeKind(StrEnum):
    INSERTED = "inserted"
    UPDATED = "updated"
    REMOVED = "removed"
    RESET = "reset"


@dataclass(slots=True)
class Task:
    title: str
    due_date: date | None = None
    priority: Priority = Priority.MEDIUM
    done: bool = False


@dataclass(frozen=True, slots=True)
class TaskChange:
    """Change notification emitted by TaskStore (index is None for RESET)."""

    kind: ChangeKind
    index: int | None = None
