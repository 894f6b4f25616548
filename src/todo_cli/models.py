"""Task data model."""

import uuid
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Task:
    """A single to-do entry.

    Identity is the ``id`` field: two tasks are equal when their ids are,
    regardless of title or completion state.
    """

    id: str
    title: str
    completed: bool = False

    @classmethod
    def create(cls, title: str) -> "Task":
        """Build a new, not yet completed task with a fresh identifier."""
        return cls(id=str(uuid.uuid4()), title=title, completed=False)

    def __str__(self) -> str:
        return self.title

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "isCompleted": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Create a task from its stored form.

        Raises:
            KeyError: If a required field is missing.
            TypeError: If a field has the wrong type.
            ValueError: If the id or title is empty.
        """
        task_id = data["id"]
        title = data["title"]
        completed = data["isCompleted"]
        if not isinstance(task_id, str) or not isinstance(title, str):
            raise TypeError("'id' and 'title' must be strings")
        if not isinstance(completed, bool):
            raise TypeError("'isCompleted' must be a boolean")
        if not task_id or not title:
            raise ValueError("'id' and 'title' must not be empty")
        return cls(id=task_id, title=title, completed=completed)
