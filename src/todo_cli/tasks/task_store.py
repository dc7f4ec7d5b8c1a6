# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from ..core.ports import TaskListView, TaskRepo
from ..errors import DuplicateName, UnknownTarget
from .task_models import SortDirection, Task

logger = logging.getLogger(__name__)

REMOVE_DONE = "-d"
REMOVE_ALL = "-r"


class TaskStore:
    """
    Ordered task list plus a name index.

    Invariants:
    - names are unique
    - self._names always equals {t.name for t in self._tasks}
    - after every successful mutation the repo holds the list in current order

    Targets (rm/do/undo) are resolved by exact name first, then by 0-based index.
    """

    def __init__(self, repo: TaskRepo, tasks: Iterable[Task] = ()) -> None:
        self._repo = repo
        self._tasks: list[Task] = []
        self._names: set[str] = set()
        for task in tasks:
            if task.name in self._names:
                logger.warning("Dropping duplicate task %r", task.name)
                continue
            self._names.add(task.name)
            self._tasks.append(task)

    @classmethod
    def open(cls, repo: TaskRepo) -> TaskStore:
        store = cls(repo, repo.load())
        logger.info("TaskStore ready total=%d", len(store))
        return store

    # ---- read-only views ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._names)

    # ---- low-level helpers ----

    def _commit(self, candidate: list[Task]) -> None:
        """Save `candidate`, then make it current; a failed save changes nothing."""
        self._repo.save(candidate)
        self._tasks = candidate
        self._names = {t.name for t in candidate}

    def _index_of(self, name: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.name == name:
                return i
        raise UnknownTarget(name)

    def resolve(self, target: str) -> int:
        """Map a raw `rm`/`do`/`undo` argument to an index."""
        if target in self._names:
            return self._index_of(target)
        if target.isascii() and target.isdigit():
            idx = int(target)
            if idx < len(self._tasks):
                return idx
        raise UnknownTarget(target)

    # ---- public API ----

    def add(self, name: str) -> None:
        if name in self._names:
            raise DuplicateName(name)
        self._commit([*self._tasks, Task(name=name)])
        logger.debug("Task added name=%r index=%d", name, len(self._tasks) - 1)

    def remove_by_index(self, index: int) -> Task:
        if not 0 <= index < len(self._tasks):
            raise UnknownTarget(str(index))
        task = self._tasks[index]
        self._commit(self._tasks[:index] + self._tasks[index + 1 :])
        logger.debug("Task removed name=%r index=%d", task.name, index)
        return task

    def remove_by_name(self, name: str) -> Task:
        return self.remove_by_index(self._index_of(name))

    def remove_done(self) -> int:
        kept = [t for t in self._tasks if not t.done]
        removed = len(self._tasks) - len(kept)
        self._commit(kept)
        logger.debug("Removed %d done tasks", removed)
        return removed

    def remove_all(self) -> int:
        removed = len(self._tasks)
        self._commit([])
        logger.debug("Removed all %d tasks", removed)
        return removed

    def remove(self, target: str) -> None:
        """`rm` entry point: -d / -r short-circuit before name/index resolution."""
        if target == REMOVE_DONE:
            self.remove_done()
            return
        if target == REMOVE_ALL:
            self.remove_all()
            return
        try:
            idx = self.resolve(target)
        except UnknownTarget:
            raise UnknownTarget(target, "Invalid id_task or name_task or option") from None
        self.remove_by_index(idx)

    def mark(self, target: str, done: bool) -> bool:
        """
        Toggle the task selected by `target`.

        Returns False (and does not persist) when the task is already in
        the requested state.
        """
        idx = self.resolve(target)
        task = replace(self._tasks[idx])
        changed = task.mark_done() if done else task.mark_undone()
        if not changed:
            logger.debug("Task %r already done=%s, nothing to do", task.name, done)
            return False
        candidate = list(self._tasks)
        candidate[idx] = task
        self._commit(candidate)
        logger.debug("Task marked name=%r done=%s", task.name, done)
        return True

    def sort(self, direction: SortDirection = SortDirection.ASCENDING) -> None:
        # sorted() keeps equal keys in place for reverse=True too
        self._commit(
            sorted(self._tasks, key=Task.order_key, reverse=direction is SortDirection.DESCENDING)
        )
        logger.debug("Tasks sorted direction=%s", direction.name)

    def render(self, view: TaskListView) -> None:
        view.print_task_list(self.tasks)
