# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Every value has a default, so a bare `todo-list` run needs no setup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Behaviour ----
    autosave: bool

    # ---- Local paths ----
    data_dir: Path
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo") or "todo",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            autosave=_env_bool(_k("AUTOSAVE"), True),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/todo")),
            tasks_path=_env_path(_k("TASKS_PATH"), Path("tasks.dat")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
