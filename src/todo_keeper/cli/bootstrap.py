# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- configures logging from settings,
- resolves the task file location,
- loads the TaskStore.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    setup_logging(
        log_file=settings.log_file,
        console_level=level_from_name(settings.log_level),
    )


def open_store(*, settings: Settings | None = None) -> TaskStore:
    """
    Load the TaskStore for the configured workspace.

    StorageError propagates: the caller decides whether it is fatal.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    logger.debug("Opening task file %s", settings.tasks_path)
    return TaskStore.load(settings.tasks_path)
