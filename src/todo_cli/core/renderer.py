# src/todo_cli/core/renderer.py

"""
ANSI terminal output.

Every method writes straight to the output stream; the renderer keeps no state
besides the stream itself.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from enum import IntEnum
from typing import Protocol, TextIO

from ..tasks.task_models import Task

ESC = "\033["
RESET = f"{ESC}0m"
CLEAR_TERMINAL = f"{ESC}H{ESC}2J{ESC}3J"

BOLD = "1"
UNDERLINE = "4"


class Color(IntEnum):
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34


def task_color(task: Task) -> Color:
    return Color.GREEN if task.done else Color.RED


def style_code(color: Color | None = None, *, bold: bool = False, underline: bool = False) -> str:
    parts: list[str] = []
    if bold:
        parts.append(BOLD)
    if underline:
        parts.append(UNDERLINE)
    if color is not None:
        parts.append(str(int(color)))
    return f"{ESC}{';'.join(parts)}m"


def styled(
    text: str,
    color: Color | None = None,
    *,
    bold: bool = False,
    underline: bool = False,
) -> str:
    return style_code(color, bold=bold, underline=underline) + text + RESET


class TutorialEntry(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def option(self) -> str: ...

    @property
    def description(self) -> str: ...


class Renderer:
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _line(self, text: str = "") -> None:
        self._write(text + "\n")

    def newline(self) -> None:
        self._line()

    def clear_terminal(self) -> None:
        self._write(CLEAR_TERMINAL)

    def print_banner(self, title: str = "ToDo") -> None:
        self._line(styled(title, bold=True))

    def print_error(self, message: str) -> None:
        self._line(styled(message, Color.RED, underline=True))

    def print_notice(self, message: str) -> None:
        self._line(styled(message, Color.YELLOW))

    def print_tutorial(self, commands: Iterable[TutorialEntry]) -> None:
        self._line()
        self._line(styled("Tutorial", Color.GREEN, bold=True))
        for number, cmd in enumerate(commands, start=1):
            head = styled(f"{cmd.name} {cmd.option}", Color.BLUE, bold=True)
            body = styled(f"\t{cmd.description}", underline=True)
            self._line(f"{number}) {head}{body}")
            self._line()

    def print_task_list(self, tasks: Sequence[Task]) -> None:
        done = 0
        for i, task in enumerate(tasks):
            self._line(f"{i} {styled(task.name, task_color(task), bold=True)}")
            done += task.done

        if tasks and done == len(tasks):
            self._line(styled("All tasks done :)", Color.GREEN, bold=True))
            return

        undone_part = styled(f"undone: {len(tasks) - done}", Color.RED, bold=True)
        done_part = styled(f" done: {done}", Color.GREEN, bold=True)
        self._line(f"Stats:\t{undone_part}{done_part}")

    def prompt(self) -> None:
        self._write("Insert command:\t" + style_code(Color.YELLOW, bold=True))

    def end_prompt(self) -> None:
        self._write(RESET)
