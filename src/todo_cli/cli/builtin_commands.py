"""Built-in commands: add, list, toggle, delete, exit."""

from typing import TYPE_CHECKING

from rich.text import Text

from todo_cli.cli.commands import Command, parse_position
from todo_cli.errors import TodoError
from todo_cli.models import Task

if TYPE_CHECKING:
    from todo_cli.cli.app import TodoApp

DONE_MARK = "✅"
PENDING_MARK = "❌"


def format_task_line(position: int, task: Task) -> str:
    """Render one listing line, e.g. ``1. ❌ buy milk``."""
    mark = DONE_MARK if task.completed else PENDING_MARK
    return f"{position}. {mark} {task}"


class AddCommand(Command):
    """Append a new task."""

    def __init__(self) -> None:
        super().__init__(name="add", description="Add a new task")

    def execute(self, app: "TodoApp") -> None:
        title = app.ask("What would you like to add?")
        if title is None:
            return
        try:
            result = app.manager.add(title)
        except TodoError as e:
            app.error(str(e))
            return
        app.success(f"Task added: {result.task}")
        app.report_save(result.saved)


class ListCommand(Command):
    """Print every task with its position and completion mark."""

    def __init__(self) -> None:
        super().__init__(name="list", description="List all tasks")

    def execute(self, app: "TodoApp") -> None:
        app.print(Text("Your To Do's", style="bold"))
        entries = app.manager.list()
        if not entries:
            app.print(Text("No tasks yet.", style="dim"))
            return
        for position, task in entries:
            style = "dim" if task.completed else ""
            app.print(Text(format_task_line(position, task), style=style))


class ToggleCommand(Command):
    """Flip the completion flag of a task."""

    def __init__(self) -> None:
        super().__init__(name="toggle", description="Mark a task done or not done")

    def execute(self, app: "TodoApp") -> None:
        answer = app.ask("Which item status do you want to switch?")
        if answer is None:
            return
        try:
            position = parse_position(answer)
            result = app.manager.toggle(position)
        except TodoError as e:
            app.error(str(e))
            return
        state = "completed" if result.task.completed else "not completed"
        app.success(f"Task {position} marked as {state}")
        app.report_save(result.saved)


class DeleteCommand(Command):
    """Remove a task; later tasks move up one position."""

    def __init__(self) -> None:
        super().__init__(name="delete", description="Delete a task")

    def execute(self, app: "TodoApp") -> None:
        answer = app.ask("Which item do you want to remove?")
        if answer is None:
            return
        try:
            position = parse_position(answer)
            result = app.manager.delete(position)
        except TodoError as e:
            app.error(str(e))
            return
        app.success(f"Task {position} deleted: {result.task}")
        app.report_save(result.saved)


class ExitCommand(Command):
    """Exit the application."""

    def __init__(self) -> None:
        super().__init__(name="exit", description="Exit the application")

    def execute(self, app: "TodoApp") -> None:
        app.stop()


BUILTIN_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    ListCommand,
    ToggleCommand,
    DeleteCommand,
    ExitCommand,
)
