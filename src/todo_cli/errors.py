# src/todo_cli/errors.py

"""
User-facing error kinds.

Every error carries the message shown to the user; the console loop prints it
in red and returns to the prompt.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for recoverable command errors."""

    default_message = "Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnknownCommand(TodoError):
    default_message = "Not a valid command"

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__()


class MissingArgument(TodoError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"The command {command} requires an option")


class DuplicateName(TodoError):
    default_message = "Task already exists"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__()


class UnknownTarget(TodoError):
    default_message = "Invalid id_task or name_task"

    def __init__(self, target: str, message: str | None = None) -> None:
        self.target = target
        super().__init__(message)


class InvalidSortOption(TodoError):
    default_message = "Invalid sort option [0 - 1]"

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__()
