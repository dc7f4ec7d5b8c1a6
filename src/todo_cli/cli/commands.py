# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..core.state import AppState
from ..errors import MissingArgument, UnknownCommand
from ..tasks.task_models import SortDirection

CommandHandler = Callable[[AppState, list[str]], None]

NOOP_NOTICE = "Task already in requested state"

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def normalize(line: str) -> str:
    """Lowercase ASCII letters only; everything else is left untouched."""
    return line.translate(_ASCII_LOWER)


def tokenize(line: str) -> list[str]:
    """Split on runs of spaces (tabs are part of a token)."""
    return [part for part in line.split(" ") if part]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    option: str
    description: str
    handler: CommandHandler
    requires_arg: bool = False


class CommandRegistry:
    """Fixed command table used by the console loop (ls, add, rm, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}
        self.table: Mapping[str, CommandSpec] = MappingProxyType(self._commands)

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str,
        option: str = "",
        requires_arg: bool = False,
    ) -> None:
        key = name.lower()
        if key in self._commands:
            raise ValueError(f"command {key!r} already registered")
        self._commands[key] = CommandSpec(
            name=key,
            option=option,
            description=description,
            handler=handler,
            requires_arg=requires_arg,
        )

    def handle(self, state: AppState, line: str) -> None:
        """
        Normalize, tokenize and run one command line.

        Raises TodoError subclasses for user mistakes; the caller prints them.
        Blank lines are ignored.
        """
        parts = tokenize(normalize(line))
        if not parts:
            return

        name, args = parts[0], parts[1:]
        spec = self.table.get(name)
        if spec is None:
            raise UnknownCommand(name)
        if spec.requires_arg and not args:
            raise MissingArgument(name)

        logger.debug("Dispatch %s args=%r", name, args)
        spec.handler(state, args)


registry = CommandRegistry()


def cmd_ls(state: AppState, args: list[str]) -> None:
    state.store.render(state.renderer)


def cmd_man(state: AppState, args: list[str]) -> None:
    state.renderer.print_tutorial(registry.table.values())


def cmd_rm(state: AppState, args: list[str]) -> None:
    """
    rm <id>       -> remove by index
    rm <name>     -> remove by exact name
    rm -d         -> remove every done task
    rm -r         -> remove everything
    """
    state.store.remove(" ".join(args))


def cmd_sort(state: AppState, args: list[str]) -> None:
    # Only the first token counts: "sort 1 whatever" sorts done-first.
    direction = SortDirection.from_option(args[0] if args else None)
    state.store.sort(direction)


def cmd_add(state: AppState, args: list[str]) -> None:
    state.store.add(" ".join(args))


def _mark(state: AppState, args: list[str], done: bool) -> None:
    if not state.store.mark(" ".join(args), done):
        state.renderer.print_notice(NOOP_NOTICE)


def cmd_do(state: AppState, args: list[str]) -> None:
    _mark(state, args, True)


def cmd_undo(state: AppState, args: list[str]) -> None:
    _mark(state, args, False)


def cmd_clear(state: AppState, args: list[str]) -> None:
    state.renderer.clear_terminal()


def cmd_exit(state: AppState, args: list[str]) -> None:
    state.is_end = True


registry.register(
    "ls",
    cmd_ls,
    description=(
        "Print all tasks with [id] name_task (green = done, red = not done) "
        "and number of tasks completed and remaining."
    ),
)
registry.register("man", cmd_man, description="Print the tutorial.")
registry.register(
    "rm",
    cmd_rm,
    option="[id_task, name_task, -d, -r]",
    description=(
        "Remove a specific task [id / name_task] [-d remove done task] [-r remove all tasks]."
    ),
    requires_arg=True,
)
registry.register(
    "sort",
    cmd_sort,
    option="[0, 1]",
    description="Sort the tasks ([0] (default) first undone tasks, [1] done tasks first).",
)
registry.register(
    "add",
    cmd_add,
    option="[name task]",
    description="Add a new task with a specified name.",
    requires_arg=True,
)
registry.register(
    "do",
    cmd_do,
    option="[id, name_task]",
    description="Mark a task with [id / name_task] as done.",
    requires_arg=True,
)
registry.register(
    "undo",
    cmd_undo,
    option="[id, name_task]",
    description="Mark a task with [id / name_task] as undone.",
    requires_arg=True,
)
registry.register("clear", cmd_clear, description="Clear the shell.")
registry.register("exit", cmd_exit, description="Exit the program (or you can press CTRL+C).")
