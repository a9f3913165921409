# src/todo_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..tasks.errors import ValidationError
from ..tasks.positions import parse_position, position_to_index
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Verb registry shared by the one-shot CLI and the interactive console.

    A handler gets the store and the raw argument string (everything after
    the verb) and returns the text to show. Handlers validate first, mutate
    second and save last, so a rejected command leaves the list untouched.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def dispatch(self, store: TaskStore, verb: str, arg: str = "") -> str:
        handler = self._handlers.get(verb.lower())
        if handler is None:
            raise ValidationError(f"Unknown command: {verb}")
        return handler(store, arg)

    def handle(self, store: TaskStore, line: str) -> str:
        """Handle a line like "add buy milk" or "remove 2"."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            raise ValidationError("Empty command.")
        verb = parts[0]
        arg = parts[1] if len(parts) > 1 else ""
        return self.dispatch(store, verb, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, (usage, help_text) in self._help.items():
            call = f"{name} {usage}".rstrip()
            lines.append(f"  {call:<20} {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_show(store: TaskStore, arg: str) -> str:
    return store.render()


def cmd_add(store: TaskStore, arg: str) -> str:
    task = store.insert(arg.strip())
    store.save()
    logger.info("Added task position=%s", task.position + 1)
    return store.render()


def cmd_update(store: TaskStore, arg: str) -> str:
    index = position_to_index(parse_position(arg), len(store))
    task = store.toggle(index)
    store.save()
    state = "done" if task.done else "not done"
    return f"Task {index + 1} marked {state}.\n\n{store.render()}"


def cmd_remove(store: TaskStore, arg: str) -> str:
    index = position_to_index(parse_position(arg), len(store))
    removed = store.remove_at(index)
    store.save()
    return f"Removed task {index + 1}: {removed.text}\n\n{store.render()}"


def cmd_help(store: TaskStore, arg: str) -> str:
    return registry.build_help()


registry.register("show", cmd_show, help_text="Show the task list.", aliases=["list", "ls"])
registry.register(
    "add", cmd_add, help_text="Append a new task.", usage="<text>", aliases=["insert"]
)
registry.register(
    "update",
    cmd_update,
    help_text="Toggle the done flag of a task.",
    usage="<position>",
    aliases=["toggle"],
)
registry.register(
    "remove", cmd_remove, help_text="Delete a task.", usage="<position>", aliases=["rm"]
)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
