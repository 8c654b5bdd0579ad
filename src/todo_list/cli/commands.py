# src/todo_list/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..errors import IndexOutOfRange, LoadError, ValidationError
from ..tasks import task_api
from ..tasks.task_models import TaskChange
from ..tasks.task_table import COLUMNS

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Input errors (bad fields, stale row numbers) become replies; the
        task list is left as it was.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValidationError as e:
            return str(e)
        except IndexOutOfRange as e:
            logger.debug("Stale row requested: %s", e)
            return f"No task #{e.index + 1}. Use /list to see row numbers."

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  (plain text adds a task with that title)")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def parse_row(token: str) -> int:
    """User-facing 1-based row number -> 0-based store index."""
    try:
        return int(token) - 1
    except ValueError as e:
        raise ValidationError(f"Row must be a number, got {token!r}.") from e


def split_fields(args: list[str], keys: tuple[str, ...]) -> tuple[list[str], dict[str, str]]:
    """
    Split "free words key=value more words key2=..." into free words and fields.

    Words after a key=value token belong to that field, so titles can contain spaces:
      ["title=Pay", "rent", "due=2025-01-01"] -> {"title": "Pay rent", "due": "2025-01-01"}
    """
    free: list[str] = []
    fields: dict[str, str] = {}
    current: str | None = None
    for token in args:
        key, sep, value = token.partition("=")
        if sep and key.lower() in keys:
            current = key.lower()
            fields[current] = value
        elif current is not None:
            fields[current] = f"{fields[current]} {token}".strip()
        else:
            free.append(token)
    return free, fields


def render_table(state: AppState) -> str:
    rows = state.table.rows()
    if not rows:
        return "No tasks yet."
    title_w = max(len(COLUMNS[0]), *(len(r[0]) for r in rows))
    lines = [f"{'#':>3}  {COLUMNS[0]:<{title_w}}  {COLUMNS[1]:<10}  {COLUMNS[2]:<8}  {COLUMNS[3]}"]
    lines.append("-" * len(lines[0]))
    for n, (title, due, priority, done) in enumerate(rows, start=1):
        mark = "[x]" if done else "[ ]"
        lines.append(f"{n:>3}  {title:<{title_w}}  {due:<10}  {priority:<8}  {mark}")
    return "\n".join(lines)


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def describe_change(change: TaskChange | None) -> str:
    """Human-readable form of the last store change (rows are 1-based)."""
    if change is None:
        return "none"
    if change.index is None:
        return f"{change.kind.value} (whole list)"
    return f"{change.kind.value} #{change.index + 1}"


def cmd_status(state: AppState, args: list[str]) -> str:
    done = sum(1 for t in state.store.snapshot() if t.done)
    return (
        "Status:\n"
        f"  Tasks: {len(state.store)} ({done} done)\n"
        f"  File: {state.tasks_path}\n"
        f"  Unsaved changes: {'YES' if state.dirty else 'no'}\n"
        f"  Last change: {describe_change(state.last_change)}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_table(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title words> [due=YYYY-MM-DD] [priority=Low|Medium|High]
    """
    free, fields = split_fields(args, ("title", "due", "priority"))
    title = " ".join(free) or fields.get("title", "")
    task = task_api.add_task(
        state,
        title,
        due_text=fields.get("due", ""),
        priority=fields.get("priority", "Medium"),
    )
    return f"Added: {task.title}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <n> [title=...] [due=YYYY-MM-DD|due=] [priority=...] [done=yes|no]
    """
    if not args:
        return "Usage: /edit <n> title=... due=YYYY-MM-DD priority=Low|Medium|High done=yes|no"
    index = parse_row(args[0])
    free, fields = split_fields(args[1:], task_api.EDIT_FIELDS)
    if free:
        raise ValidationError(f"Unexpected text {' '.join(free)!r}. Use field=value.")
    task = task_api.edit_task(state, index, fields)
    return f"Updated #{index + 1}: {task.title}"


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <n>        -> toggle
    /done <n> on|off -> set
    """
    if not args:
        return "Usage: /done <n> [on|off]"
    index = parse_row(args[0])
    flag = task_api.parse_flag(args[1]) if len(args) > 1 else None
    task = task_api.toggle_done(state, index, flag)
    return f"#{index + 1} {task.title}: {'done' if task.done else 'not done'}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    """
    /del <n>      -> ask for confirmation
    /del <n> yes  -> delete
    """
    if not args:
        return "Usage: /del <n> [yes]"
    index = parse_row(args[0])
    task = state.store.get(index)
    if len(args) < 2:
        return f"Delete #{index + 1} {task.title!r}? Repeat as /del {index + 1} yes to confirm."
    if not task_api.parse_flag(args[1]):
        return f"Kept: {task.title}"
    task_api.delete_task(state, index)
    logger.debug("Deleted row %d via console", index)
    return f"Deleted: {task.title}"


def cmd_save(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    if emit:
        with contextlib.suppress(Exception):
            emit(f"Saving to {state.tasks_path}...")
    try:
        n = task_api.save(state)
    except OSError as e:
        return f"Failed to save tasks: {e}"
    return f"Saved {n} tasks."


def cmd_reload(state: AppState, args: list[str]) -> str:
    try:
        n = task_api.reload(state)
    except LoadError as e:
        logger.warning("Reload failed: %s", e)
        return f"Failed to load tasks: {e.reason}"
    return f"Loaded {n} tasks."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count, file and unsaved changes.")
registry.register("list", cmd_list, help_text="Show the task table.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title> [due=YYYY-MM-DD] [priority=Low|Medium|High]."
)
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <n> title=... due=... priority=... done=yes|no."
)
registry.register("done", cmd_done, help_text="Toggle done: /done <n> [on|off].", aliases=["x"])
registry.register(
    "del", cmd_delete, help_text="Delete a task: /del <n> yes (asks first).", aliases=["rm", "delete"]
)
registry.register("save", cmd_save, help_text="Save tasks to disk.")
registry.register("reload", cmd_reload, help_text="Discard in-memory changes and reload from disk.")
