# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the store and the command layer.

The store depends on Protocols instead of concrete implementations,
so tests can swap the file or the terminal for in-memory fakes.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: load everything, save everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...


class TaskListView(Protocol):
    """Anything that can display the ordered task list with its stats."""

    def print_task_list(self, tasks: Sequence[Task]) -> None: ...
