# src/todo_list/tasks/task_table.py

from __future__ import annotations

from typing import Any

from ..core.ports import TaskRepo
from .task_input import format_due
from .task_models import Task

COLUMNS: tuple[str, ...] = ("Title", "Due", "Priority", "Done")
DONE_COLUMN = 3


def row_values(task: Task) -> tuple[str, str, str, bool]:
    return (task.title, format_due(task), task.priority.value, task.done)


class TaskTable:
    """
    Four-column table view over a task repo (normally TaskStore).

    Only the Done cell is editable in place; every other change goes through
    the full edit flow (TaskStore.update_at).
    """

    def __init__(self, store: TaskRepo) -> None:
        self._store = store

    @property
    def row_count(self) -> int:
        return len(self._store)

    @property
    def column_count(self) -> int:
        return len(COLUMNS)

    def column_name(self, col: int) -> str:
        return COLUMNS[col]

    def column_type(self, col: int) -> type:
        return bool if col == DONE_COLUMN else str

    def is_cell_editable(self, row: int, col: int) -> bool:
        return col == DONE_COLUMN

    def value_at(self, row: int, col: int) -> Any:
        values = row_values(self._store.get(row))
        if not 0 <= col < len(values):
            return ""
        return values[col]

    def set_value_at(self, value: Any, row: int, col: int) -> bool:
        """Apply a cell edit. Returns False when the edit is ignored."""
        if col != DONE_COLUMN or not isinstance(value, bool):
            return False
        self._store.set_done(row, value)
        return True

    def rows(self) -> list[tuple[str, str, str, bool]]:
        return [row_values(t) for t in self._store.snapshot()]
