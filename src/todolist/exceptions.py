"""Exception hierarchy for the todo CLI.

Only TodoError subclasses are turned into user-facing messages and a
non-zero exit code; anything else is a bug and propagates.
"""


class TodoError(Exception):
    """Base class for expected, user-reportable failures."""


class StorageError(TodoError):
    """The task file could not be read, or a change could not be persisted."""


class TaskNotFoundError(TodoError):
    """No task with the requested id exists."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class CommandError(TodoError):
    """Malformed command-line input.

    Attributes:
        usage: Optional usage line shown to the user as a hint.
    """

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage
