"""Task list persistence.

Two interchangeable backends share the TaskStore contract:

- FileStore: JSON file, survives restarts.
- MemoryStore: process memory, lost on exit.

Example:
    >>> store = create_store(settings)
    >>> store.save(tasks)
    >>> store.load()
"""

from typing import TYPE_CHECKING

from todo_cli.store.base import SaveResult, TaskStore
from todo_cli.store.file import FileStore
from todo_cli.store.memory import MemoryStore

if TYPE_CHECKING:
    from todo_cli.config import TodoSettings


def create_store(settings: "TodoSettings") -> TaskStore:
    """Create the store backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return MemoryStore()
    return FileStore(settings.tasks_path)


__all__ = [
    "FileStore",
    "MemoryStore",
    "SaveResult",
    "TaskStore",
    "create_store",
]
