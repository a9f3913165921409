# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import stat
import tempfile
from pathlib import Path

from .errors import (
    StorageCorruptError,
    StorageError,
    StorageIoError,
    TaskIndexError,
    ValidationError,
)
from .positions import index_to_position
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "db.json"


class TaskStore:
    """
    Ordered task list persisted as one JSON file.

    Invariant: tasks[i].position == i for every task, between operations.

    Mutating methods only touch memory; callers persist with save().
    The file is replaced as a whole (temp file + os.replace), there is no
    locking: two processes saving at once means last writer wins.
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE, tasks: list[Task] | None = None) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = list(tasks or [])
        self._renumber(0)

    # ---- construction ----

    @classmethod
    def load(cls, path: str | Path = DEFAULT_TASKS_FILE) -> TaskStore:
        """
        Open (or create) the task file and build a store from it.

        Missing or empty file -> empty store.
        Unparseable content -> StorageCorruptError (never an empty store).
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            raw = path.read_text("utf-8")
        except OSError as e:
            raise StorageIoError(f"Cannot open task file {path}: {e}", path) from e
        except UnicodeDecodeError as e:
            raise StorageCorruptError(f"Task file {path} is not valid UTF-8: {e}", path) from e

        if not raw.strip():
            logger.info("TaskStore ready path=%s total=0 (empty file)", path)
            return cls(path)

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # Deeply nested arrays overflow the decoder with RecursionError.
            raise StorageCorruptError(f"Task file {path} is not valid JSON: {e}", path) from e

        if not isinstance(data, list):
            raise StorageCorruptError(
                f"Task file {path} must contain a JSON array, got {type(data).__name__}", path
            )

        tasks: list[Task] = []
        for i, rec in enumerate(data):
            try:
                tasks.append(Task.from_record(rec))
            except ValueError as e:
                raise StorageCorruptError(f"Task file {path}, record #{i}: {e}", path) from e

        mismatched = [t.position for i, t in enumerate(tasks) if t.position != i]
        if mismatched:
            logger.warning(
                "Task file %s had %d out-of-order positions; renumbering from list order.",
                path,
                len(mismatched),
            )

        store = cls(path, tasks)
        logger.info("TaskStore ready path=%s total=%s", path, len(store))
        return store

    # ---- read access ----

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def _renumber(self, start: int) -> None:
        for i in range(start, len(self._tasks)):
            self._tasks[i].position = i

    # ---- mutations ----

    def insert(self, text: str) -> Task:
        if not text or not text.strip():
            raise ValidationError("Task text must not be empty.")

        task = Task(text=text, done=False, position=len(self._tasks))
        self._tasks.append(task)
        logger.debug("Task inserted position=%s text=%r", task.position, text)
        return task

    def toggle(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks[index]
        task.done = not task.done
        logger.debug("Task toggled position=%s done=%s", index, task.done)
        return task

    def remove_at(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        self._renumber(index)
        logger.debug("Task removed position=%s text=%r", index, removed.text)
        return removed

    # ---- persistence ----

    def save(self) -> None:
        """
        Replace the task file with the current list.

        The payload is serialized before the disk is touched, and written
        through a temp file in the same directory, so a failed save leaves
        the previous file as it was.
        """
        try:
            payload = json.dumps([t.to_record() for t in self._tasks], ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize tasks: {e}", self._path) from e

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tf:
                tmp_name = tf.name
                tf.write(payload)
                tf.flush()
                os.fsync(tf.fileno())
            self._copy_mode(tmp_name)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StorageIoError(f"Cannot write task file {self._path}: {e}", self._path) from e

        logger.info("Saved %d tasks to %s", len(self._tasks), self._path)

    def _copy_mode(self, tmp_name: str) -> None:
        """Give the temp file the permissions of the file it replaces."""
        try:
            mode = stat.S_IMODE(os.stat(self._path).st_mode)
        except FileNotFoundError:
            return
        os.chmod(tmp_name, mode)

    # ---- rendering ----

    def render(self) -> str:
        lines = ["Todos:", "", "   Done |  ToDo"]
        for task in self._tasks:
            lines.append(f"{index_to_position(task.position)}. {task.marker}  |  {task.text}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
