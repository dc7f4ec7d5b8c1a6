# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..errors import InvalidSortOption

DONE_FLAG = "1"
UNDONE_FLAG = "0"


class SortDirection(IntEnum):
    """
    Sort option accepted by the `sort` command.

    ASCENDING puts undone tasks first, DESCENDING puts done tasks first.
    """

    ASCENDING = 0
    DESCENDING = 1

    @classmethod
    def from_option(cls, raw: str | None) -> SortDirection:
        if raw is None or raw == "":
            return cls.ASCENDING
        if not (raw.isascii() and raw.isdigit()):
            raise InvalidSortOption(raw)
        try:
            return cls(int(raw))
        except ValueError:
            raise InvalidSortOption(raw) from None


@dataclass(slots=True)
class Task:
    name: str
    done: bool = False

    @classmethod
    def from_record(cls, name: str, flag: str) -> Task:
        return cls(name=name, done=flag == DONE_FLAG)

    def mark_done(self) -> bool:
        """Returns False if the task was already done."""
        if self.done:
            return False
        self.done = True
        return True

    def mark_undone(self) -> bool:
        """Returns False if the task was already undone."""
        if not self.done:
            return False
        self.done = False
        return True

    def order_key(self) -> bool:
        return self.done

    def serialize(self) -> str:
        return f"{self.name}\n{DONE_FLAG if self.done else UNDONE_FLAG}"
