# tests/test_positions.py

from __future__ import annotations

import pytest

from todo_keeper.tasks.errors import TaskIndexError, ValidationError
from todo_keeper.tasks.positions import index_to_position, parse_position, position_to_index


def test_position_to_index_bounds() -> None:
    assert position_to_index(1, 3) == 0
    assert position_to_index(3, 3) == 2

    for bad in (0, -1, 4):
        with pytest.raises(TaskIndexError) as exc:
            position_to_index(bad, 3)
        assert exc.value.value == bad
        assert "1..3" in str(exc.value)


def test_position_to_index_on_empty_list() -> None:
    with pytest.raises(TaskIndexError, match="empty"):
        position_to_index(1, 0)


def test_parse_position() -> None:
    assert parse_position("2") == 2
    assert parse_position(" 7 ") == 7
    assert parse_position(3) == 3
    assert parse_position("-1") == -1


@pytest.mark.parametrize("raw", ["two", "1.5", "", "  ", None, True])
def test_parse_position_rejects_non_numeric(raw) -> None:
    with pytest.raises(ValidationError):
        parse_position(raw)


def test_index_to_position() -> None:
    assert index_to_position(0) == 1


@pytest.mark.parametrize("raw", ["1_0", "١", "²", "+", "--1", "1e2"])
def test_parse_position_accepts_plain_ascii_digits_only(raw: str) -> None:
    with pytest.raises(ValidationError):
        parse_position(raw)


def test_parse_position_allows_sign() -> None:
    assert parse_position("+2") == 2
    assert parse_position("-0") == 0
