# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires TaskStore into AppState,
- loads tasks on startup and saves them on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import LoadError
from ..tasks import task_api
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)
    return AppState(settings=settings, store=TaskStore())


def load_initial_tasks(state: AppState) -> str:
    """
    Load tasks from disk into the store and return a status line.

    A broken file is reported and the app continues with an empty list.
    """
    try:
        n = task_api.reload(state)
    except LoadError as e:
        logger.error("Starting with an empty list: %s", e)
        return f"Failed to load tasks: {e.reason}"
    return f"Loaded {n} tasks."


def save_on_exit(state: AppState) -> str | None:
    """
    Autosave hook. Returns a status line, or None when nothing was saved.

    Only a changed list is written, so an unreadable file from startup is
    not overwritten by an empty list the user never touched.
    """
    if not getattr(state.settings, "autosave", True) or not state.dirty:
        return None
    try:
        n = task_api.save(state)
    except OSError as e:
        return f"Failed to save tasks: {e}"
    return f"Saved {n} tasks."
