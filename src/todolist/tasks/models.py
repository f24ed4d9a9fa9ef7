"""Task data model."""

from dataclasses import dataclass
from enum import Enum


class TaskStatus(str, Enum):
    """Completion state of a task.

    The value is the literal string written to the ``done`` column.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value: str) -> "TaskStatus | None":
        """Return the status whose stored string is ``value``, or None."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class TaskItem:
    """A single task entry.

    ``raw_status`` holds a ``done`` value that is not a known status,
    exactly as read from disk. Such a task counts as pending and the
    value is written back unchanged until the task is completed.
    """

    id: int
    description: str
    status: TaskStatus = TaskStatus.PENDING
    raw_status: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    def mark_completed(self) -> None:
        self.status = TaskStatus.COMPLETED
        self.raw_status = None

    def to_row(self) -> list[str]:
        """Fields in ``id,text,done`` column order."""
        done = self.raw_status if self.raw_status is not None else self.status.value
        return [str(self.id), self.description, done]
