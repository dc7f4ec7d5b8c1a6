# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the task file, store and renderer into AppState.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ..config import get_settings
from ..core.renderer import Renderer
from ..core.state import AppState
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, out: TextIO | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings are injectable for tests; if None, falls back to get_settings().
    Loading the task file happens here (a missing file means an empty list).
    """
    if settings is None:
        settings = get_settings()

    task_file = TaskFile(settings.tasks_path, atomic=settings.atomic_save)
    store = TaskStore.open(task_file)
    logger.debug("State created (tasks_path=%s).", task_file.path)

    return AppState(
        settings=settings,
        store=store,
        renderer=Renderer(out),
    )
