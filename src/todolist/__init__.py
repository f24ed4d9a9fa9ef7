"""todolist - a personal task tracker for the terminal.

Tasks are kept in a small CSV file (one header row, then
``id,text,done`` rows) and managed with four verbs: add, view,
markdone and delete.

The record store and task operations are usable on their own:

    from todolist.tasks import RecordStore, TaskOperations

    ops = TaskOperations(RecordStore(path))
    ops.add("Buy groceries")
"""

__version__ = "1.1.0"

from todolist.config import TodoSettings, get_settings, reload_settings, set_settings
from todolist.exceptions import CommandError, StorageError, TaskNotFoundError, TodoError
from todolist.tasks import (
    LoadResult,
    LoadStatus,
    RecordStore,
    TaskItem,
    TaskOperations,
    TaskStatus,
)

__all__ = [
    # Settings
    "TodoSettings",
    "get_settings",
    "set_settings",
    "reload_settings",
    # Tasks
    "LoadResult",
    "LoadStatus",
    "RecordStore",
    "TaskItem",
    "TaskOperations",
    "TaskStatus",
    # Errors
    "TodoError",
    "StorageError",
    "TaskNotFoundError",
    "CommandError",
]
