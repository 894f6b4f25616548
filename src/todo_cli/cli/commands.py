"""Command registry and base command class.

Example of creating a custom command:

    from todo_cli.cli.commands import Command

    class CountCommand(Command):
        '''Show how many tasks there are.'''

        def __init__(self):
            super().__init__(name="count", description="Show the number of tasks")

        def execute(self, app: "TodoApp") -> None:
            app.print(f"{len(app.manager)} tasks")
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from todo_cli.errors import UnparseableInputError

if TYPE_CHECKING:
    from todo_cli.cli.app import TodoApp


def parse_position(text: str) -> int:
    """Parse a user-supplied 1-based task number.

    Raises:
        UnparseableInputError: If the text is not an integer.
    """
    try:
        return int(text.strip())
    except ValueError:
        raise UnparseableInputError(text.strip()) from None


class Command(ABC):
    """Base class for REPL commands.

    Subclass this to create commands. Override execute() to implement
    command behavior. Commands that need an argument read it with
    ``app.ask()``, which prompts for exactly one further line.
    """

    def __init__(self, name: str, description: str) -> None:
        """Initialize the command.

        Args:
            name: Command name as typed at the prompt
            description: Short description of what the command does
        """
        self.name = name
        self.description = description

    @abstractmethod
    def execute(self, app: "TodoApp") -> None:
        """Execute the command.

        Args:
            app: The running application
        """
        pass


class CommandRegistry:
    """Registry mapping command names to commands.

    Lookups are case-insensitive. Registering a name again replaces the
    earlier command.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command under its name.

        Args:
            command: Command instance to register
        """
        self._commands[command.name.lower()] = command

    def get(self, name: str) -> Command | None:
        """Get a command by name.

        Args:
            name: Command name as typed

        Returns:
            Command if found, None otherwise
        """
        return self._commands.get(name.strip().lower())

    def all_commands(self) -> list[Command]:
        """Get all commands in registration order."""
        return list(self._commands.values())

    def command_names(self) -> list[str]:
        """Get command names in registration order."""
        return [cmd.name for cmd in self.all_commands()]

    def get_completions(self) -> list[str]:
        """Get all command names for auto-completion."""
        return list(self._commands.keys())
