# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_table
from ..core.state import AppState
from ..errors import ValidationError
from ..tasks import task_api

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, emit: Callable[[str], None] | None = None) -> str:
    """
    One console input -> one reply.

    Slash commands go to the registry; anything else is a new task title.
    """
    cmd_response = command_registry.handle(state, line, emit=emit)
    if cmd_response is not None:
        return cmd_response
    try:
        task = task_api.add_task(state, line)
    except ValidationError as e:
        return str(e)
    return f"Added: {task.title}"


def run_console_loop(state: AppState, input_fn: Callable[[str], str] | None = None) -> None:
    read = input_fn or input
    logger.info("Console started with %d tasks.", len(state.store))
    app_name = str(getattr(state.settings, "app_name", "todo"))
    _print_ts(f"[{app_name}] Type a title to add a task. Use /help for commands, /exit to quit.")
    if len(state.store):
        print(render_table(state))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = read("todo> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _print_ts(reply)

    logger.info("Console finished.")
