"""Shared test fixtures and utilities for todo-cli tests.

Provides:
- Settings pointing at a temporary data directory
- File and memory stores, and a manager bound to one
- ScriptedInput for driving the command loop without a terminal
- An app factory whose rich console writes into a buffer
"""

import io
import os
from pathlib import Path
from typing import Callable, Iterable
from unittest.mock import patch

import pytest
from rich.console import Console

from todo_cli.cli.app import TodoApp
from todo_cli.config import TodoSettings
from todo_cli.manager import TaskManager
from todo_cli.store import FileStore, MemoryStore


class ScriptedInput:
    """Line reader that replays prepared answers.

    Records every prompt it was asked and raises EOFError once the
    script runs out, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> list[str]:
        return list(self._lines)


class AppHarness:
    """A TodoApp wired to scripted input and a captured console."""

    def __init__(self, app: TodoApp, reader: ScriptedInput, buffer: io.StringIO) -> None:
        self.app = app
        self.reader = reader
        self._buffer = buffer

    @property
    def output(self) -> str:
        return self._buffer.getvalue()

    @property
    def lines(self) -> list[str]:
        return [line.rstrip() for line in self.output.splitlines()]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Fixture providing a temporary data directory (not yet created)."""
    return tmp_path / "data"


@pytest.fixture
def settings(data_dir: Path) -> TodoSettings:
    """Fixture providing settings isolated from the environment."""
    with patch.dict(os.environ, {}, clear=True):
        return TodoSettings(data_dir=data_dir)


@pytest.fixture
def file_store(settings: TodoSettings) -> FileStore:
    return FileStore(settings.tasks_path)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def manager(memory_store: MemoryStore) -> TaskManager:
    return TaskManager(memory_store)


@pytest.fixture
def make_app(settings: TodoSettings) -> Callable[..., AppHarness]:
    """Factory building a TodoApp that reads the given lines."""

    def _make(
        lines: Iterable[str],
        manager: TaskManager | None = None,
        app_settings: TodoSettings | None = None,
        sleep: Callable[[float], None] = lambda _: None,
    ) -> AppHarness:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=200,
            force_terminal=False,
            color_system=None,
            highlight=False,
        )
        reader = ScriptedInput(lines)
        app = TodoApp(
            manager if manager is not None else TaskManager(MemoryStore()),
            app_settings or settings,
            console=console,
            input_func=reader,
            sleep=sleep,
        )
        return AppHarness(app, reader, buffer)

    return _make
