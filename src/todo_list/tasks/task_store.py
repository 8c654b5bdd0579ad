# src/todo_list/tasks/task_store.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import Any

from ..core.ports import TaskObserver
from ..errors import IndexOutOfRange
from .task_models import ChangeKind, Priority, Task, TaskChange

logger = logging.getLogger(__name__)

_TASK_FIELDS = tuple(f.name for f in dataclasses.fields(Task))


class TaskStore:
    """
    In-memory ordered task list (newest first).

    Tasks are addressed by their current position; there is no stable id.
    Every mutation either applies fully and notifies observers, or raises
    and leaves the list untouched.

    Not thread-safe: callers serialize access (single UI/console thread).
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or ())
        self._observers: list[TaskObserver] = []

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- observers ----

    def subscribe(self, observer: TaskObserver) -> Callable[[], None]:
        """Register an observer. Returns a callable that unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _emit(self, kind: ChangeKind, index: int | None = None) -> None:
        change = TaskChange(kind=kind, index=index)
        for observer in list(self._observers):
            try:
                observer(change)
            except Exception:
                logger.exception("Task observer failed on %s", change)

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected: a position is a row, not a Python slice offset.
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))

    # ---- queries ----

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # ---- mutations ----

    def insert_front(self, task: Task) -> None:
        self._tasks.insert(0, task)
        logger.debug("Task inserted title=%r total=%d", task.title, len(self._tasks))
        self._emit(ChangeKind.INSERTED, 0)

    def update_at(self, index: int, **changes: Any) -> Task:
        """
        Replace selected fields of the task at `index` in place.

        Accepted keys: title, due_date, priority, done.
        """
        self._check_index(index)
        task = self._tasks[index]

        if "priority" in changes:
            changes["priority"] = Priority(changes["priority"])
        if "done" in changes and not isinstance(changes["done"], bool):
            raise TypeError(f"done must be bool, got {type(changes['done']).__name__}")
        if "due_date" in changes:
            due = changes["due_date"]
            # datetime is a date subclass but carries a time; only plain dates fit the model.
            if due is not None and (not isinstance(due, date) or isinstance(due, datetime)):
                raise TypeError(f"due_date must be date or None, got {type(due).__name__}")

        # replace() rejects unknown fields before anything is touched.
        updated = dataclasses.replace(task, **changes)
        for name in _TASK_FIELDS:
            setattr(task, name, getattr(updated, name))

        logger.debug("Task updated index=%d fields=%s", index, sorted(changes))
        self._emit(ChangeKind.UPDATED, index)
        return task

    def set_done(self, index: int, done: bool) -> Task:
        return self.update_at(index, done=done)

    def remove_at(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task removed index=%d title=%r", index, task.title)
        self._emit(ChangeKind.REMOVED, index)
        return task

    def replace_all(self, tasks: Iterable[Task]) -> None:
        self._tasks = list(tasks)
        logger.debug("Task list replaced total=%d", len(self._tasks))
        self._emit(ChangeKind.RESET)
