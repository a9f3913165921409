# src/todo_keeper/cli/console.py

from __future__ import annotations

import logging

from ..tasks.errors import StorageError, ValidationError
from ..tasks.task_store import TaskStore
from .commands import CommandRegistry
from .commands import registry as command_registry

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
HELP_COMMANDS = ("help", "h", "?")
PROMPT = "todo> "


def console_help(registry: CommandRegistry) -> str:
    return registry.build_help() + f"\n  {'exit':<20} Leave the console."


def run_console_loop(store: TaskStore, registry: CommandRegistry | None = None) -> None:
    """
    Read-eval-print loop over the task list.

    Bad input prints the error plus help and re-prompts. A failed save is
    reported and the loop goes on; only "exit" (or EOF / Ctrl+C) ends it.
    """
    registry = registry or command_registry
    logger.info("Console started path=%s", store.path)
    print("Type a command. Use help for commands. Use exit to quit.\n")
    print(store.render())

    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        if line.lower() in HELP_COMMANDS:
            print(console_help(registry))
            continue

        try:
            reply = registry.handle(store, line)
        except ValidationError as e:
            print(f"Error: {e}")
            print(console_help(registry))
            continue
        except StorageError as e:
            logger.error("Save failed: %s", e)
            print(f"Error: could not save tasks: {e}")
            print(store.render())
            continue

        print(reply)

    logger.info("Console finished.")
