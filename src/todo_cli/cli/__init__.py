"""Command-line interface for todo-cli."""

from todo_cli.cli.app import TodoApp
from todo_cli.cli.builtin_commands import (
    AddCommand,
    DeleteCommand,
    ExitCommand,
    ListCommand,
    ToggleCommand,
    format_task_line,
)
from todo_cli.cli.commands import Command, CommandRegistry, parse_position

__all__ = [
    "AddCommand",
    "Command",
    "CommandRegistry",
    "DeleteCommand",
    "ExitCommand",
    "ListCommand",
    "TodoApp",
    "ToggleCommand",
    "format_task_line",
    "parse_position",
]
