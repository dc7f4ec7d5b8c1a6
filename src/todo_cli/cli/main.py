# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file),
then runs the console loop in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, start_session
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_STARTUP_FAILED = 1


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OSError:
        logger.exception("Failed to load tasks from %s", settings.tasks_path)
        return EXIT_STARTUP_FAILED

    start_session(state)
    code = run_console_loop(state)
    logger.info("Bye (exit code %d).", code)
    return code


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
