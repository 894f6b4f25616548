"""In-process task store.

Keeps the last saved list for the lifetime of the instance only.
Saving an empty list and then loading reports absent (None), not an
empty list.
"""

from dataclasses import replace
from typing import Sequence

from todo_cli.logging import Loggers
from todo_cli.models import Task
from todo_cli.store.base import SaveResult, TaskStore

logger = Loggers.store()


class MemoryStore(TaskStore):
    """Ephemeral task store held in process memory."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def save(self, tasks: Sequence[Task]) -> SaveResult:
        # Copies, so later in-place toggles by the caller don't leak in
        self._tasks = [replace(task) for task in tasks]
        logger.debug("tasks_saved", backend="memory", count=len(self._tasks))
        return SaveResult.success()

    def load(self) -> list[Task] | None:
        if not self._tasks:
            return None
        return [replace(task) for task in self._tasks]
