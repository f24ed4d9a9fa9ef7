"""Task records and the operations over them.

Example:
    >>> store = RecordStore(settings.storage_path)
    >>> ops = TaskOperations(store)
    >>> ops.add("Buy groceries")
    >>> ops.mark_done(1)
    >>> ops.list_tasks()
"""

from todolist.tasks.models import TaskItem, TaskStatus
from todolist.tasks.operations import TaskOperations
from todolist.tasks.store import LoadResult, LoadStatus, RecordStore, next_task_id

__all__ = [
    "LoadResult",
    "LoadStatus",
    "RecordStore",
    "TaskItem",
    "TaskOperations",
    "TaskStatus",
    "next_task_id",
]
