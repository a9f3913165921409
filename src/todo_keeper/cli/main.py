# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

One-shot mode: load -> one action -> save -> print -> exit.
Interactive mode (--interactive): load once, then hand over to the console loop.

Exit codes: 0 on success or rejected input, 1 when the task file cannot be
read or written, 2 when it is corrupt.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .. import __version__
from ..config import get_settings
from ..tasks.errors import StorageCorruptError, StorageError, ValidationError
from .bootstrap import configure_logging, open_store
from .commands import registry
from .console import run_console_loop

logger = logging.getLogger(__name__)

EXIT_STORAGE_IO = 1
EXIT_STORAGE_CORRUPT = 2

ACTIONS = ("show", "insert", "update", "remove")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="todo-keeper")
@click.option(
    "-a",
    "--action",
    type=click.Choice(ACTIONS, case_sensitive=False),
    default="show",
    show_default=True,
    help="What to do with the list.",
)
@click.option("-i", "--item", default="", help="Task text, used by insert.")
@click.option("-p", "--position", default=None, help="1-based task position, used by update/remove.")
@click.option(
    "-f",
    "--file",
    "tasks_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Task file to use instead of the configured one.",
)
@click.option("--interactive", is_flag=True, help="Start the interactive console.")
@click.pass_context
def main(
    ctx: click.Context,
    action: str,
    item: str,
    position: str | None,
    tasks_file: Path | None,
    interactive: bool,
) -> None:
    """Personal task list."""
    settings = get_settings()
    if tasks_file is not None:
        settings = settings.with_tasks_path(tasks_file)

    configure_logging(settings)
    logger.debug("Starting %s action=%s interactive=%s", settings.app_name, action, interactive)

    try:
        store = open_store(settings=settings)
    except StorageCorruptError as e:
        logger.critical("Refusing to continue with a corrupt task file: %s", e)
        click.echo(f"Task file is corrupt, not touching it: {e}", err=True)
        ctx.exit(EXIT_STORAGE_CORRUPT)
    except StorageError as e:
        logger.error("Cannot open task file: %s", e)
        click.echo(f"Cannot open task file: {e}", err=True)
        ctx.exit(EXIT_STORAGE_IO)

    if interactive:
        run_console_loop(store)
        return

    action = action.lower()
    arg = item if action == "insert" else (position or "")

    try:
        output = registry.dispatch(store, action, arg)
    except ValidationError as e:
        click.echo(f"Invalid input: {e}", err=True)
        return
    except StorageError as e:
        logger.error("Save failed: %s", e)
        click.echo(f"Saving gone wrong: {e}", err=True)
        click.echo(store.render())
        ctx.exit(EXIT_STORAGE_IO)

    click.echo(output)


if __name__ == "__main__":
    main()
