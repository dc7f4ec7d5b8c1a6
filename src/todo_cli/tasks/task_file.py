# src/todo_cli/tasks/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "task_file_db"


class TaskFile:
    """
    Plain-text task file.

    Each task is stored as two lines: the name, then "1" (done) or "0".
    The whole file is rewritten on every save; load tolerates partial writes:
    - blank lines where a name is expected are skipped
    - a trailing name without its flag line is discarded
    - repeated names keep only the first record

    The file is opened and closed inside each call (no long-lived handles).
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE, *, atomic: bool = True) -> None:
        self._path = Path(path)
        self._atomic = atomic

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("Task file %s not found, starting with an empty list.", self._path)
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        name: str | None = None

        with open(self._path, encoding="utf-8", errors="replace") as fh:
            for raw in fh:
                line = raw.rstrip("\r\n")
                if name is None:
                    if line == "":
                        continue
                    name = line
                    continue

                if name in seen:
                    logger.warning("Skipping duplicate task %r in %s", name, self._path)
                else:
                    seen.add(name)
                    tasks.append(Task.from_record(name, line))
                name = None

        if name is not None:
            logger.warning("Discarding incomplete record %r at end of %s", name, self._path)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = "".join(task.serialize() + "\n" for task in tasks)

        self._path.parent.mkdir(parents=True, exist_ok=True)

        if not self._atomic:
            with open(self._path, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(payload)
            logger.debug("Saved task file %s (%d bytes)", self._path, len(payload))
            return

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(payload)
            os.replace(tmp, self._path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Saved task file %s (%d bytes, atomic)", self._path, len(payload))
