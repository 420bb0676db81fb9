# tests/test_main.py

from __future__ import annotations

from taskrofi.cli.main import run, run_menu_loop
from taskrofi.errors import MenuCancelled, MenuError, TaskCommandError


def test_loop_runs_actions_until_exit(state, menu, store) -> None:
    menu.answers = ["Done", "Low priority", "List", 0, "Exit"]
    run_menu_loop(state)
    assert [t.uuid for t in store.saved] == ["aaa"]
    assert menu.answers == []


def test_cancelling_action_menu_is_benign(state, menu) -> None:
    menu.answers = [MenuCancelled()]
    assert run(state) == 0
    assert menu.errors == []


def test_open_ends_the_program(state, menu, opener) -> None:
    menu.answers = ["Open", "Read the paper", 1]
    assert run(state) == 0
    assert len(opener.opened) == 1


def test_task_errors_are_shown_in_menu(state, menu, store) -> None:
    def failing_save(task) -> None:
        raise TaskCommandError("stdout:  / stderr: database locked")

    store.save = failing_save  # type: ignore[method-assign]
    menu.answers = ["Start", "Low priority"]

    assert run(state) == 1
    assert menu.errors == ["stdout:  / stderr: database locked"]


def test_input_errors_are_shown_in_menu(state, menu) -> None:
    menu.answers = ["Add", "   "]
    assert run(state) == 1
    assert menu.errors == ["No input given to add"]


def test_unexpected_exceptions_are_shown_too(state, menu, store) -> None:
    def broken_filter() -> str:
        raise KeyError("report")

    store.default_filter = broken_filter  # type: ignore[method-assign]
    menu.answers = ["Done"]

    assert run(state) == 1
    assert menu.errors == ["'report'"]


def test_error_menu_failure_falls_back_to_stderr(state, menu, capsys) -> None:
    def broken_show(message: str) -> None:
        raise MenuError("rofi missing")

    menu.show_error = broken_show  # type: ignore[method-assign]
    menu.answers = ["Add", ""]

    assert run(state) == 1
    assert "Error: No input given to add" in capsys.readouterr().err
