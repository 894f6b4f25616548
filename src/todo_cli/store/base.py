"""Persistence capability shared by all task stores.

A store has exactly two operations. ``save`` reports its outcome as a
value instead of raising, so the command loop can tell the user that a
change was not persisted and carry on. ``load`` returns ``None`` when
there is nothing usable to restore.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from todo_cli.models import Task


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save operation."""

    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> "SaveResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "SaveResult":
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok


class TaskStore(ABC):
    """Base class for task list persistence backends."""

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> SaveResult:
        """Persist the entire list, replacing any prior content.

        Args:
            tasks: The ordered task list.

        Returns:
            SaveResult describing success or the failure reason.
        """
        ...

    @abstractmethod
    def load(self) -> list[Task] | None:
        """Return the previously saved list, or None if absent."""
        ...
