# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..tasks.task_models import TaskChange
from ..tasks.task_table import TaskTable
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: object
    store: TaskRepo

    table: TaskTable = field(init=False)
    # True once the in-memory list differs from the last save/load.
    dirty: bool = False
    last_change: TaskChange | None = None

    def __post_init__(self) -> None:
        self.table = TaskTable(self.store)
        self.store.subscribe(self._on_change)

    def _on_change(self, change: TaskChange) -> None:
        self.last_change = change
        self.dirty = True

    @property
    def tasks_path(self) -> Path:
        return Path(getattr(self.settings, "tasks_path", "tasks.dat"))

    def mark_clean(self) -> None:
        self.dirty = False
