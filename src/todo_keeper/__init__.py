"""todo-keeper: a small personal task list with a CLI and an interactive console."""

__version__ = "0.1.0"
