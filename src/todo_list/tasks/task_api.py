# src/todo_list/tasks/task_api.py

from __future__ import annotations

from ..core.state import AppState
from ..errors import ValidationError
from .task_file import load_tasks, save_tasks
from .task_input import build_task, parse_due_date, parse_priority, validate_title
from .task_models import Priority, Task
from .task_table import DONE_COLUMN

# Field names accepted by edit_task.
EDIT_FIELDS = ("title", "due", "priority", "done")

_TRUE_WORDS = {"1", "true", "yes", "y", "on"}
_FALSE_WORDS = {"0", "false", "no", "n", "off"}


def parse_flag(text: str) -> bool:
    raw = text.strip().lower()
    if raw in _TRUE_WORDS:
        return True
    if raw in _FALSE_WORDS:
        return False
    raise ValidationError(f"Expected yes/no, got {text!r}.")


def add_task(
    state: AppState,
    title: str,
    due_text: str = "",
    priority: str | Priority = Priority.MEDIUM,
) -> Task:
    """Validate input and put the new task on top of the list."""
    task = build_task(title, due_text, priority)
    state.store.insert_front(task)
    return task


def edit_task(state: AppState, index: int, fields: dict[str, str]) -> Task:
    """
    Full edit flow: every given field is validated first, then applied at once.

    `fields` uses the user-facing names from EDIT_FIELDS with raw text values.
    """
    changes: dict[str, object] = {}
    for key, raw in fields.items():
        if key not in EDIT_FIELDS:
            raise ValidationError(f"Unknown field {key!r}. Use: {', '.join(EDIT_FIELDS)}.")
        if key == "title":
            changes["title"] = validate_title(raw, "Title cannot be empty.")
        elif key == "due":
            changes["due_date"] = parse_due_date(raw)
        elif key == "priority":
            changes["priority"] = parse_priority(raw)
        else:
            changes["done"] = parse_flag(raw)

    if not changes:
        raise ValidationError("Nothing to change.")
    return state.store.update_at(index, **changes)


def toggle_done(state: AppState, index: int, done: bool | None = None) -> Task:
    """Flip (or set) the Done flag through the table's editable cell."""
    if done is None:
        done = not state.store.get(index).done
    state.table.set_value_at(done, index, DONE_COLUMN)
    return state.store.get(index)


def delete_task(state: AppState, index: int) -> Task:
    return state.store.remove_at(index)


def save(state: AppState) -> int:
    """Persist the whole list. Raises OSError; in-memory state is kept either way."""
    n = save_tasks(state.store.snapshot(), state.tasks_path)
    state.mark_clean()
    return n


def reload(state: AppState) -> int:
    """Replace the in-memory list with the file content. Raises LoadError."""
    tasks = load_tasks(state.tasks_path)
    state.store.replace_all(tasks)
    state.mark_clean()
    return len(tasks)
