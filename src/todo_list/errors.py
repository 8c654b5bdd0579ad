# src/todo_list/errors.py

"""
Error kinds shared by the task subsystem and the front-end.

- ValidationError: bad user input, raised before a Task is built
- IndexOutOfRange: stale/invalid row position passed to the store
- LoadError: the tasks file exists but cannot be read or parsed

Save failures are plain OSError (disk full, permissions, ...).
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for todo_list errors."""


class ValidationError(TodoError, ValueError):
    pass


class IndexOutOfRange(TodoError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Task index {index} out of range for {length} task(s).")
        self.index = index
        self.length = length


class LoadError(TodoError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Failed to load tasks from {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
