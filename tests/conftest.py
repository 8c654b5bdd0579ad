# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.tasks.task_models import Priority, Task
from todo_list.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        tasks_path=tmp_path / "tasks.dat",
        data_dir=tmp_path / "data",
        autosave=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, store=TaskStore())


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task("Pay rent", date(2025, 1, 1), Priority.HIGH, False),
        Task("Buy milk", None, Priority.LOW, False),
        Task("Call mom", date(2024, 12, 24), Priority.MEDIUM, True),
    ]
