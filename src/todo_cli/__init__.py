"""todo-cli - a command-line to-do list manager.

Tasks live in an ordered in-memory list managed by TaskManager and are
saved after every change through a pluggable TaskStore:

- FileStore keeps them in a JSON file between runs
- MemoryStore keeps them for the current session only

TodoApp is the interactive loop on top (add, list, toggle, delete, exit).
"""

from todo_cli.cli.app import TodoApp
from todo_cli.config import TodoSettings
from todo_cli.errors import (
    EmptyTitleError,
    InvalidPositionError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    TodoError,
    UnparseableInputError,
)
from todo_cli.manager import OperationResult, TaskManager
from todo_cli.models import Task
from todo_cli.store import FileStore, MemoryStore, SaveResult, TaskStore, create_store

__version__ = "0.1.0"

__all__ = [
    # Model
    "Task",
    # Persistence
    "TaskStore",
    "FileStore",
    "MemoryStore",
    "SaveResult",
    "create_store",
    # Manager
    "TaskManager",
    "OperationResult",
    # CLI
    "TodoApp",
    # Settings
    "TodoSettings",
    # Errors
    "TodoError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "InvalidPositionError",
    "UnparseableInputError",
    "EmptyTitleError",
]
