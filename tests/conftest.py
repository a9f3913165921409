# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "db.json"


@pytest.fixture()
def settings(tmp_path: Path, tasks_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap helpers.

    We intentionally use a SimpleNamespace rather than the real env-backed
    config, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-keeper-test",
        log_level="DEBUG",
        log_file=None,
        data_dir=tmp_path,
        tasks_path=tasks_path,
    )


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    """Fresh store backed by an empty file in tmp_path."""
    return TaskStore.load(tasks_path)
