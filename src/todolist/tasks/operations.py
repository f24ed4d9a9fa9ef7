"""Task verbs: add, list, mark done, delete.

Every operation reloads the full store, applies one change and writes
the full store back. Nothing is cached between calls.
"""

from todolist.exceptions import StorageError, TaskNotFoundError
from todolist.logging import Loggers
from todolist.tasks.models import TaskItem
from todolist.tasks.store import RecordStore, next_task_id


class TaskOperations:
    """Read-modify-write operations over a RecordStore.

    Example:
        >>> ops = TaskOperations(RecordStore(settings.storage_path))
        >>> ops.add("Buy milk")[-1].id
        1
        >>> ops.mark_done(1).status
        <TaskStatus.COMPLETED: 'Completed'>
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store
        self._logger = Loggers.tasks()

    @property
    def store(self) -> RecordStore:
        return self._store

    def _load(self, action: str) -> list[TaskItem]:
        result = self._store.load()
        if not result.ok:
            self._logger.error("load_failed", action=action, error=result.error)
            raise StorageError(f"Could not read tasks from {self._store.path}")
        return result.tasks

    def _save(self, tasks: list[TaskItem], action: str) -> None:
        if not self._store.save(tasks):
            self._logger.error("save_failed", action=action)
            raise StorageError(f"Could not save tasks to {self._store.path}")

    def add(self, description: str) -> list[TaskItem]:
        """Append a new pending task.

        Args:
            description: Task text, stored verbatim.

        Returns:
            The full updated task list; the new task is last.

        Raises:
            StorageError: If the store could not be read or written.
        """
        tasks = self._load("add")
        task = TaskItem(id=next_task_id(tasks), description=description)
        tasks.append(task)
        self._save(tasks, "add")
        self._logger.info("task_added", task_id=task.id)
        return tasks

    def list_tasks(self) -> list[TaskItem]:
        """All tasks in file order."""
        return self._load("list")

    def get(self, task_id: int) -> TaskItem | None:
        """Get a task by id."""
        for task in self._load("get"):
            if task.id == task_id:
                return task
        return None

    def mark_done(self, task_id: int) -> TaskItem:
        """Mark a task completed.

        Completing an already completed task succeeds without rewriting
        the file.

        Raises:
            TaskNotFoundError: If no task has this id.
            StorageError: If the store could not be read or written.
        """
        tasks = self._load("markdone")
        for task in tasks:
            if task.id == task_id:
                if task.is_completed:
                    self._logger.info("task_already_completed", task_id=task_id)
                    return task
                task.mark_completed()
                self._save(tasks, "markdone")
                self._logger.info("task_marked_done", task_id=task_id)
                return task

        self._logger.error("task_not_found", action="markdone", task_id=task_id)
        raise TaskNotFoundError(task_id)

    def delete(self, task_id: int) -> TaskItem:
        """Remove a task.

        Returns:
            The removed task.

        Raises:
            TaskNotFoundError: If no task has this id.
            StorageError: If the store could not be read or written.
        """
        tasks = self._load("delete")
        for index, task in enumerate(tasks):
            if task.id == task_id:
                del tasks[index]
                self._save(tasks, "delete")
                self._logger.info("task_deleted", task_id=task_id)
                return task

        self._logger.error("task_not_found", action="delete", task_id=task_id)
        raise TaskNotFoundError(task_id)
