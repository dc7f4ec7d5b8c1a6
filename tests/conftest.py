# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.renderer import Renderer
from todo_cli.core.state import AppState
from todo_cli.tasks.task_file import TaskFile
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_dir=None,
        tasks_path=tmp_path / "task_file_db",
        atomic_save=True,
    )


@pytest.fixture()
def task_file(settings: SimpleNamespace) -> TaskFile:
    return TaskFile(settings.tasks_path)


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def state(settings: SimpleNamespace, task_file: TaskFile, out: io.StringIO) -> AppState:
    """
    AppState wired with a real TaskStore on a tmp file and a Renderer
    writing into a StringIO, so tests can assert on both disk and screen.
    """
    return AppState(
        settings=settings,
        store=TaskStore.open(task_file),
        renderer=Renderer(out),
    )
