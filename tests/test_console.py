# tests/test_console.py

from __future__ import annotations

import builtins
from collections.abc import Iterable
from pathlib import Path

import pytest

from todo_keeper.cli.console import run_console_loop
from todo_keeper.tasks.errors import StorageIoError
from todo_keeper.tasks.task_store import TaskStore


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> list[str]:
    """Replace input() with a scripted sequence; EOF once it runs out."""
    pending = list(lines)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts


def test_console_add_update_remove_exit(
    store: TaskStore, tasks_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    prompts = _feed(
        monkeypatch,
        ["add buy milk", "add walk dog", "update 2", "remove 1", "exit", "add never"],
    )

    run_console_loop(store)

    assert len(prompts) == 5
    reloaded = TaskStore.load(tasks_path)
    assert [(t.text, t.done, t.position) for t in reloaded.tasks] == [("walk dog", True, 0)]
    out = capsys.readouterr().out
    assert "1. [x]  |  walk dog" in out


def test_console_bad_input_prints_error_and_help_then_continues(
    store: TaskStore, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    _feed(monkeypatch, ["frobnicate", "remove two", "update 5", "", "add ok", "exit"])

    run_console_loop(store)

    out = capsys.readouterr().out
    assert "Error: Unknown command: frobnicate" in out
    assert "Position must be a number" in out
    assert "Invalid position 5" in out
    assert out.count("Available commands:") == 3
    assert [t.text for t in store.tasks] == ["ok"]


def test_console_help_lists_exit(store: TaskStore, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    _feed(monkeypatch, ["help", "quit"])

    run_console_loop(store)

    out = capsys.readouterr().out
    assert "add <text>" in out
    assert "exit" in out


def test_console_reports_save_failure_and_keeps_prompting(
    store: TaskStore, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    def fail_save() -> None:
        raise StorageIoError("disk is read-only")

    monkeypatch.setattr(store, "save", fail_save)
    prompts = _feed(monkeypatch, ["add a", "show", "exit"])

    run_console_loop(store)

    out = capsys.readouterr().out
    assert "could not save tasks: disk is read-only" in out
    assert len(prompts) == 3


def test_console_stops_on_eof(store: TaskStore, monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _feed(monkeypatch, [])
    run_console_loop(store)
    assert len(prompts) == 1


def test_console_stops_on_ctrl_c(store: TaskStore, monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupt(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupt)
    run_console_loop(store)
