# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front-end.

Commands and the table view depend on these Protocols instead of the
concrete TaskStore, which keeps the presentation layer swappable and
makes testing easier.
"""

from collections.abc import Callable
from typing import Any, Protocol

from ..tasks.task_models import Task, TaskChange


class TaskObserver(Protocol):
    """Receives one TaskChange per successful store mutation."""
    def __call__(self, change: TaskChange) -> None: ...


class TaskRepo(Protocol):
    def __len__(self) -> int: ...

    def get(self, index: int) -> Task: ...
    def snapshot(self) -> tuple[Task, ...]: ...

    def insert_front(self, task: Task) -> None: ...
    def update_at(self, index: int, **changes: Any) -> Task: ...
    def set_done(self, index: int, done: bool) -> Task: ...
    def remove_at(self, index: int) -> Task: ...
    def replace_all(self, tasks: Any) -> None: ...

    def subscribe(self, observer: TaskObserver) -> Callable[[], None]: ...
