"""Task list management.

TaskManager owns the authoritative in-memory list and persists it after
every successful mutation. The in-memory list is the source of truth for
the session: a failed save is reported through the returned
OperationResult but the mutation is kept, so the next successful save
includes it.
"""

from dataclasses import dataclass, replace

from todo_cli.errors import EmptyTitleError, InvalidPositionError
from todo_cli.logging import Loggers
from todo_cli.models import Task
from todo_cli.store.base import SaveResult, TaskStore

logger = Loggers.manager()


@dataclass(frozen=True)
class OperationResult:
    """The affected task, as it was right after the mutation, and the save outcome."""

    task: Task
    saved: SaveResult


class TaskManager:
    """Ordered task list addressed by 1-based position.

    Example:
        manager = TaskManager(MemoryStore())
        manager.add("buy milk")
        result = manager.toggle(1)
        result.task.completed   # True
        result.saved.ok         # True
        [(n, str(t)) for n, t in manager.list()]   # [(1, 'buy milk')]
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._tasks: list[Task] = store.load() or []
        logger.debug("tasks_restored", count=len(self._tasks))

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def tasks(self) -> list[Task]:
        """A copy of the current task list."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def add(self, title: str) -> OperationResult:
        """Append a new task and persist the list.

        Args:
            title: Task title; surrounding whitespace is stripped.

        Raises:
            EmptyTitleError: If the title is empty after stripping.
        """
        title = title.strip()
        if not title:
            raise EmptyTitleError()
        task = Task.create(title)
        self._tasks.append(task)
        logger.info("task_added", task_id=task.id, position=len(self._tasks))
        return OperationResult(task=replace(task), saved=self._persist())

    def list(self) -> list[tuple[int, Task]]:
        """Return (position, task) pairs in display order."""
        return [(index + 1, task) for index, task in enumerate(self._tasks)]

    def toggle(self, position: int) -> OperationResult:
        """Flip the completion flag of the task at ``position``.

        Raises:
            InvalidPositionError: If position is outside ``[1, len]``.
        """
        task = self._tasks[self._index(position)]
        task.completed = not task.completed
        logger.info(
            "task_toggled", task_id=task.id, position=position, completed=task.completed
        )
        return OperationResult(task=replace(task), saved=self._persist())

    def delete(self, position: int) -> OperationResult:
        """Remove the task at ``position``; later tasks move up by one.

        Raises:
            InvalidPositionError: If position is outside ``[1, len]``.
        """
        task = self._tasks.pop(self._index(position))
        logger.info("task_deleted", task_id=task.id, position=position)
        return OperationResult(task=replace(task), saved=self._persist())

    def _index(self, position: int) -> int:
        # Checked against the current length on every call
        if not 1 <= position <= len(self._tasks):
            logger.debug("invalid_position", position=position, length=len(self._tasks))
            raise InvalidPositionError(position, len(self._tasks))
        return position - 1

    def _persist(self) -> SaveResult:
        result = self._store.save(self._tasks)
        if not result.ok:
            logger.warning("tasks_not_saved", error=result.error)
        return result
