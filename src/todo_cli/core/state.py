# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .renderer import Renderer


@dataclass
class AppState:
    # Settings live on the state so command handlers can reach them.
    settings: object

    store: TaskStore
    renderer: Renderer

    # Set by `exit`; the console loop stops after the current command.
    is_end: bool = False
