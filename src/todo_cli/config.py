# src/todo_cli/config.py

"""Settings loaded from environment variables (+ optional .env).

All variables are optional. With none set, the tracker keeps its task file
`task_file_db` in the current directory and logs warnings only.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str, default: Path) -> Path | None:
    # Explicitly empty disables the feature; unset falls back to the default.
    raw = os.getenv(name)
    if raw is None:
        return default
    if raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Task file ----
    tasks_path: Path
    atomic_save: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo") or "todo",
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_dir=_env_optional_path(_k("LOG_DIR"), Path(".local/todo")),
            tasks_path=_env_path(_k("TASKS_PATH"), Path("task_file_db")),
            atomic_save=_env_bool(_k("ATOMIC_SAVE"), True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
