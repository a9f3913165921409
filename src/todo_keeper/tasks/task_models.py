# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# On-disk key for the task text, kept compatible with existing db.json files.
TEXT_KEY = "item"


@dataclass(slots=True)
class Task:
    text: str
    done: bool = False
    position: int = 0

    @property
    def marker(self) -> str:
        return "[x]" if self.done else "[ ]"

    def to_record(self) -> dict[str, Any]:
        return {TEXT_KEY: self.text, "done": self.done, "position": self.position}

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON record.

        Raises ValueError when the record does not have the expected shape;
        the store turns that into StorageCorruptError.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        text = raw.get(TEXT_KEY)
        done = raw.get("done")
        position = raw.get("position")

        if not isinstance(text, str):
            raise ValueError(f"task record field '{TEXT_KEY}' must be a string")
        if not isinstance(done, bool):
            raise ValueError("task record field 'done' must be a boolean")
        # bool is a subclass of int, reject it explicitly.
        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise ValueError("task record field 'position' must be a non-negative integer")

        return cls(text=text, done=done, position=position)
