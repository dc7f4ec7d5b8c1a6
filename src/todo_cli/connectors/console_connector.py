# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..errors import TodoError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def _read_command(stdin: TextIO) -> str | None:
    """
    Read until a non-empty line arrives (no reprompt in between).
    Returns None on end of input.
    """
    while True:
        raw = stdin.readline()
        if raw == "":
            return None
        line = raw.rstrip("\r\n")
        if line:
            return line


def start_session(state: AppState) -> None:
    """Clear the screen, then show the banner and the tutorial."""
    state.renderer.clear_terminal()
    state.renderer.print_banner()
    state.renderer.print_tutorial(command_registry.table.values())


def run_console_loop(state: AppState, stdin: TextIO | None = None) -> int:
    """
    Prompt/read/dispatch until `exit` (or end of input).

    Returns the process exit code.
    """
    stdin = stdin if stdin is not None else sys.stdin
    renderer = state.renderer
    logger.info("Console loop started (tasks=%d).", len(state.store))

    try:
        while not state.is_end:
            renderer.prompt()
            line = _read_command(stdin)
            renderer.end_prompt()

            if line is None:
                logger.info("Console EOF received, exiting.")
                state.is_end = True
                break

            try:
                command_registry.handle(state, line)
            except TodoError as e:
                logger.debug("Command rejected: %s", e.message)
                renderer.print_error(e.message)
            except Exception:
                logger.exception("Command handler crashed.")
                renderer.print_error("Internal error while handling a command.")
    except KeyboardInterrupt:
        # Ctrl+C while reading or while a command runs.
        renderer.end_prompt()
        renderer.newline()
        logger.info("Console KeyboardInterrupt, exiting.")
        return EXIT_INTERRUPTED

    renderer.clear_terminal()
    logger.info("Console loop finished.")
    return EXIT_OK
