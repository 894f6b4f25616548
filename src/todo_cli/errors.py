"""Error types for todo-cli.

Storage errors never escape a store: they are converted into an absent
load result or a failed SaveResult. The remaining errors are raised by
the manager and the command layer and reported to the user.
"""


class TodoError(Exception):
    """Base class for all todo-cli errors."""

    pass


class StorageError(TodoError):
    """Raised when the task list cannot be read or written."""

    pass


class StorageReadError(StorageError):
    """The stored task list is missing, unreadable or malformed."""

    pass


class StorageWriteError(StorageError):
    """The task list could not be serialized or written."""

    pass


class InvalidPositionError(TodoError):
    """A position outside ``[1, length]`` was given for toggle or delete."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(
            f"Choice {position} does not exist. Please select a valid choice."
        )


class UnparseableInputError(TodoError):
    """Text that should have been a task number is not an integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"'{text}' is not a valid task number.")


class EmptyTitleError(TodoError):
    """A task title was empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Task title cannot be empty.")
