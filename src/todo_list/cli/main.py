# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads tasks, runs the console
front-end, then autosaves on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_initial_tasks, save_on_exit
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(
        log_dir=settings.data_dir,
        file_level=file_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    print(load_initial_tasks(state))

    try:
        run_console_loop(state)
    finally:
        msg = save_on_exit(state)
        if msg:
            print(msg)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
