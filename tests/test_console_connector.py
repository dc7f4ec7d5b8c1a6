# tests/test_console_connector.py

"""
End-to-end scenarios: scripted stdin through run_console_loop,
asserting on the rendered screen and on the task file.
"""

from __future__ import annotations

import io

from todo_cli.cli.bootstrap import create_initial_state
from todo_cli.connectors.console_connector import (
    EXIT_INTERRUPTED,
    EXIT_OK,
    run_console_loop,
    start_session,
)

RED = "\033[1;31m"
GREEN = "\033[1;32m"
RESET = "\033[0m"
PROMPT = "Insert command:\t"


def _run(state, script: str) -> int:
    return run_console_loop(state, io.StringIO(script))


def test_s1_add_then_ls(state, out) -> None:
    assert _run(state, "add buy milk\nls\nexit\n") == EXIT_OK

    screen = out.getvalue()
    assert f"0 {RED}buy milk{RESET}\n" in screen
    assert f"Stats:\t{RED}undone: 1{RESET}{GREEN} done: 0{RESET}\n" in screen


def test_s2_do_by_index(state, out) -> None:
    _run(state, "add a\nadd b\ndo 1\nls\nexit\n")

    screen = out.getvalue()
    assert f"0 {RED}a{RESET}\n1 {GREEN}b{RESET}\n" in screen
    assert f"{RED}undone: 1{RESET}{GREEN} done: 1{RESET}" in screen


def test_s3_duplicate_add(state, out, settings) -> None:
    _run(state, "add a\nadd a\nexit\n")

    assert "\033[4;31mTask already exists\033[0m\n" in out.getvalue()
    assert [t.name for t in state.store] == ["a"]
    assert settings.tasks_path.read_text("utf-8") == "a\n0\n"


def test_s4_sort_done_first(state, out) -> None:
    _run(state, "add x\nadd y\ndo y\nsort 1\nls\nexit\n")

    assert f"0 {GREEN}y{RESET}\n1 {RED}x{RESET}\n" in out.getvalue()


def test_s5_remove_done(state, out, settings) -> None:
    _run(state, "add a\nadd b\ndo a\nrm -d\nls\nexit\n")

    assert f"0 {RED}b{RESET}\n" in out.getvalue()
    assert [t.name for t in state.store] == ["b"]
    assert settings.tasks_path.read_text("utf-8") == "b\n0\n"


def test_s6_restart_reloads_tasks(state, settings) -> None:
    _run(state, "add t\nexit\n")

    out2 = io.StringIO()
    restarted = create_initial_state(settings=settings, out=out2)
    run_console_loop(restarted, io.StringIO("ls\nexit\n"))

    assert f"0 {RED}t{RESET}\n" in out2.getvalue()


def test_empty_lines_do_not_reprompt(state, out) -> None:
    _run(state, "\n\n\nls\n\nexit\n")
    assert out.getvalue().count(PROMPT) == 2


def test_errors_are_printed_and_loop_continues(state, out) -> None:
    _run(state, "bogus\nadd\nrm 4\nsort 7\nadd ok\nexit\n")

    screen = out.getvalue()
    assert "\033[4;31mNot a valid command\033[0m" in screen
    assert "\033[4;31mThe command add requires an option\033[0m" in screen
    assert "\033[4;31mInvalid id_task or name_task or option\033[0m" in screen
    assert "\033[4;31mInvalid sort option [0 - 1]\033[0m" in screen
    assert [t.name for t in state.store] == ["ok"]


def test_exit_clears_terminal_and_resets_style(state, out) -> None:
    _run(state, "exit\n")
    assert out.getvalue() == PROMPT + "\033[1;33m" + RESET + "\033[H\033[2J\033[3J"
    assert state.is_end is True


def test_end_of_input_behaves_like_exit(state, settings) -> None:
    assert _run(state, "add a\n") == EXIT_OK
    assert state.is_end is True
    assert settings.tasks_path.read_text("utf-8") == "a\n0\n"


def test_keyboard_interrupt_returns_130(state, out) -> None:
    class InterruptingStdin:
        def readline(self) -> str:
            raise KeyboardInterrupt

    assert run_console_loop(state, InterruptingStdin()) == EXIT_INTERRUPTED  # type: ignore[arg-type]
    assert out.getvalue().endswith(RESET + "\n")


def test_handler_crash_is_reported(state, out, monkeypatch) -> None:
    def boom(name: str) -> None:
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(state.store, "add", boom)
    assert _run(state, "add a\nexit\n") == EXIT_OK
    assert "Internal error while handling a command." in out.getvalue()


def test_start_session_shows_banner_and_tutorial(state, out) -> None:
    start_session(state)

    screen = out.getvalue()
    assert screen.startswith("\033[H\033[2J\033[3J\033[1mToDo\033[0m\n")
    assert "\033[1;32mTutorial\033[0m" in screen
    assert "9) \033[1;34mexit \033[0m" in screen


def test_failed_save_keeps_screen_and_disk_in_sync(state, out, settings, monkeypatch) -> None:
    def refuse(tasks) -> None:
        raise PermissionError("read-only")

    monkeypatch.setattr(state.store._repo, "save", refuse)
    _run(state, "add a\nadd a\nexit\n")

    screen = out.getvalue()
    assert screen.count("Internal error while handling a command.") == 2
    assert "Task already exists" not in screen
    assert len(state.store) == 0
    assert not settings.tasks_path.exists()


def test_keyboard_interrupt_during_command_returns_130(state, out, monkeypatch) -> None:
    def interrupted(name: str) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(state.store, "add", interrupted)

    assert _run(state, "add a\nexit\n") == EXIT_INTERRUPTED
    assert out.getvalue().endswith(RESET + "\n")
    assert state.is_end is False
