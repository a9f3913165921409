# tests/helpers.py

from __future__ import annotations

import random

from todo_keeper.tasks.task_store import TaskStore


def assert_positions(store: TaskStore) -> None:
    assert [t.position for t in store.tasks] == list(range(len(store)))


def random_operations(seed: int, steps: int = 60) -> list[tuple[str, object]]:
    """
    Seeded insert/toggle/remove script.

    Indexes are picked against the list size the script itself tracks, so
    every step is valid when replayed on a store that starts empty.
    """
    rng = random.Random(seed)
    size = 0
    ops: list[tuple[str, object]] = []
    for n in range(steps):
        choice = rng.choice(("insert", "insert", "toggle", "remove")) if size else "insert"
        if choice == "insert":
            ops.append(("insert", f"task-{seed}-{n}"))
            size += 1
        elif choice == "toggle":
            ops.append(("toggle", rng.randrange(size)))
        else:
            ops.append(("remove", rng.randrange(size)))
            size -= 1
    return ops
