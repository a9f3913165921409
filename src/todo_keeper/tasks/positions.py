# src/todo_keeper/tasks/positions.py

"""Conversion between user-facing 1-based positions and 0-based list indexes."""

from __future__ import annotations

from .errors import TaskIndexError, ValidationError


def parse_position(raw: str | int | None) -> int:
    """Parse a user-supplied position. Range is checked by position_to_index."""
    if isinstance(raw, bool):
        raise ValidationError(f"Position must be a number, got {raw!r}")
    if isinstance(raw, int):
        return raw
    text = "" if raw is None else str(raw).strip()
    if not text:
        raise ValidationError("A position is required.")
    digits = text[1:] if text[0] in "+-" else text
    # Plain ASCII digits only: int() would also take "1_0" or other scripts' digits.
    if not (digits.isascii() and digits.isdecimal()):
        raise ValidationError(f"Position must be a number, got {raw!r}")
    return int(text)


def position_to_index(position: int, size: int) -> int:
    if position < 1 or position > size:
        raise TaskIndexError(position, size, one_based=True)
    return position - 1


def index_to_position(index: int) -> int:
    return index + 1
