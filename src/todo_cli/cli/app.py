"""Interactive command loop.

TodoApp reads one command per line, looks it up in the CommandRegistry
and runs it against the TaskManager. Input comes from a prompt_toolkit
PromptSession (history and command-name completion); output goes
through a rich Console. Both can be replaced, which is how the tests
drive the loop.
"""

import time
from typing import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, DummyCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console, RenderableType
from rich.text import Text

from todo_cli.cli.builtin_commands import BUILTIN_COMMANDS
from todo_cli.cli.commands import CommandRegistry
from todo_cli.config import TodoSettings
from todo_cli.logging import Loggers
from todo_cli.manager import TaskManager
from todo_cli.store.base import SaveResult

logger = Loggers.cli()

InputFunc = Callable[[str], str]


class TodoApp:
    """Read-eval-print loop over a TaskManager.

    The loop runs until the exit command, end of input (Ctrl-D) or
    Ctrl-C at the command prompt. Unrecognized commands are announced
    unless ``settings.announce_unknown_commands`` is off, in which case
    they are ignored and the prompt repeats.
    """

    def __init__(
        self,
        manager: TaskManager,
        settings: TodoSettings,
        *,
        console: Console | None = None,
        input_func: InputFunc | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the application.

        Args:
            manager: Task manager bound to a store
            settings: Application settings
            console: Output console (defaults to stdout)
            input_func: Line reader taking the prompt text; defaults to a
                prompt_toolkit session
            sleep: Pause function used for ``settings.prompt_delay``
        """
        self.manager = manager
        self._settings = settings
        self.console = console or Console(highlight=False)
        self._sleep = sleep

        self.command_registry = CommandRegistry()
        for command_cls in BUILTIN_COMMANDS:
            self.command_registry.register(command_cls())

        self._input_func = input_func
        self._session: PromptSession[str] | None = None
        self._completer: Completer = WordCompleter(
            self.command_registry.get_completions(), ignore_case=True
        )

        self.should_exit = False

    @property
    def command_prompt(self) -> str:
        names = ", ".join(self.command_registry.command_names())
        return f"What would you like to do? ({names}): "

    # === Loop ===

    def run(self) -> int:
        """Run until exit and return the process exit status."""
        logger.info("app_started", tasks=len(self.manager))
        self.should_exit = False

        while not self.should_exit:
            try:
                line = self._read(self.command_prompt, completer=self._completer)
            except (EOFError, KeyboardInterrupt):
                logger.debug("input_closed")
                break

            # Ctrl-C while a command runs or during the pause also ends the loop
            try:
                if self.handle(line) and not self.should_exit:
                    self._pause()
            except KeyboardInterrupt:
                logger.debug("interrupted")
                break

        logger.info("app_stopped", tasks=len(self.manager))
        return 0

    def handle(self, line: str) -> bool:
        """Dispatch one command line.

        Returns:
            True if a command was executed, False if the line was blank or
            not a known command.
        """
        name = line.strip().lower()
        if not name:
            return False

        command = self.command_registry.get(name)
        if command is None:
            logger.debug("unknown_command", command=name)
            if self._settings.announce_unknown_commands:
                names = ", ".join(self.command_registry.command_names())
                self.warning(f"Unknown command '{name}'. Available: {names}")
            return False

        logger.debug("command_started", command=command.name)
        command.execute(self)
        return True

    def stop(self) -> None:
        """Ask the loop to finish after the current command."""
        self.should_exit = True

    def ask(self, question: str) -> str | None:
        """Prompt for one line of input.

        Returns:
            The line, or None if the user cancelled with Ctrl-C or Ctrl-D.
        """
        try:
            return self._read(f"{question} ", completer=DummyCompleter())
        except (EOFError, KeyboardInterrupt):
            self.warning("Cancelled.")
            return None

    def _read(self, message: str, completer: Completer) -> str:
        if self._input_func is not None:
            return self._input_func(message)
        if self._session is None:
            self._session = PromptSession(history=InMemoryHistory())
        # A completer passed to prompt() sticks to the session, so always pass one
        return self._session.prompt(message, completer=completer)

    def _pause(self) -> None:
        if self._settings.prompt_delay > 0:
            self._sleep(self._settings.prompt_delay)

    # === Output ===

    def print(self, renderable: RenderableType) -> None:
        self.console.print(renderable)

    def success(self, message: str) -> None:
        self.console.print(Text(message, style="green"))

    def warning(self, message: str) -> None:
        self.console.print(Text(message, style="yellow"))

    def error(self, message: str) -> None:
        self.console.print(Text(message, style="bold red"))

    def report_save(self, result: SaveResult) -> None:
        """Tell the user when a change stayed in memory only."""
        if not result.ok:
            self.error(f"Warning: changes were not saved ({result.error})")
