"""JSON file task store.

The whole list is stored as a JSON array at a single path and rewritten
atomically on every save:

    [
      {"id": "<uuid>", "title": "buy milk", "isCompleted": false},
      ...
    ]
"""

import json
from pathlib import Path
from typing import Any, Sequence

from todo_cli.errors import StorageReadError, StorageWriteError
from todo_cli.logging import Loggers
from todo_cli.models import Task
from todo_cli.store._utils import atomic_write_json
from todo_cli.store.base import SaveResult, TaskStore

logger = Loggers.store()


def decode_tasks(data: Any) -> list[Task]:
    """Convert a decoded JSON document into a task list.

    Raises:
        StorageReadError: If the document is not an array of valid,
            uniquely identified task objects.
    """
    if not isinstance(data, list):
        raise StorageReadError(
            f"expected a JSON array, got {type(data).__name__}"
        )

    tasks: list[Task] = []
    seen: set[str] = set()
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise StorageReadError(f"entry {index} is not an object")
        try:
            task = Task.from_dict(item)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageReadError(f"entry {index} is invalid: {e}") from e
        if task.id in seen:
            raise StorageReadError(f"entry {index} repeats id {task.id}")
        seen.add(task.id)
        tasks.append(task)
    return tasks


class FileStore(TaskStore):
    """Durable task store backed by a JSON file.

    Example:
        >>> store = FileStore(settings.tasks_path)
        >>> store.save([Task.create("buy milk")])
        SaveResult(ok=True, error=None)
        >>> [t.title for t in store.load()]
        ['buy milk']
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, tasks: Sequence[Task]) -> SaveResult:
        data = [task.to_dict() for task in tasks]
        try:
            atomic_write_json(self.path, data)
        except (OSError, TypeError, ValueError) as e:
            error = StorageWriteError(f"cannot write {self.path}: {e}")
            logger.error("tasks_save_failed", path=str(self.path), error=str(e))
            return SaveResult.failure(str(error))
        logger.debug("tasks_saved", path=str(self.path), count=len(data))
        return SaveResult.success()

    def load(self) -> list[Task] | None:
        if not self.path.exists():
            logger.debug("tasks_file_missing", path=str(self.path))
            return None
        try:
            tasks = decode_tasks(json.loads(self.path.read_text(encoding="utf-8")))
        except (OSError, ValueError, RecursionError, StorageReadError) as e:
            logger.warning("tasks_load_failed", path=str(self.path), error=str(e))
            return None
        logger.debug("tasks_loaded", path=str(self.path), count=len(tasks))
        return tasks
