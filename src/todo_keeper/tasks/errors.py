# src/todo_keeper/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for everything the task core raises on purpose."""


class ValidationError(TaskError):
    """Bad user input (unknown verb, non-numeric position, empty text). Recoverable."""


class TaskIndexError(ValidationError, IndexError):
    """Index/position outside the current list."""

    def __init__(self, value: int, size: int, *, one_based: bool = False) -> None:
        self.value = value
        self.size = size
        self.one_based = one_based
        if one_based:
            msg = f"Invalid position {value}: expected 1..{size}" if size else (
                f"Invalid position {value}: the list is empty"
            )
        else:
            msg = f"Invalid index {value} for list of size {size}"
        super().__init__(msg)


class StorageError(TaskError):
    """Persisting or loading the task file failed."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class StorageIoError(StorageError):
    """The file system refused to open, read or write the task file."""


class StorageCorruptError(StorageError):
    """
    The task file has content that cannot be parsed into task records.

    Fatal: callers must stop instead of starting over with an empty list,
    otherwise the next save would overwrite whatever is on disk.
    """
