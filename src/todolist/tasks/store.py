"""CSV-backed record store for tasks.

The whole file is the unit of consistency: load() reads every record,
save() rewrites every record. There is no locking, so two processes
writing the same file concurrently race and the last writer wins.

File layout::

    id,text,done
    1,Buy groceries,Pending
    2,Finish report,Completed
"""

import csv
import io
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from todolist.logging import Loggers
from todolist.persistence import atomic_write_text
from todolist.tasks.models import TaskItem, TaskStatus

HEADER = ["id", "text", "done"]
MIN_FIELDS = len(HEADER)


class LoadStatus(Enum):
    """How a load finished."""

    LOADED = "loaded"
    MISSING = "missing"  # no file yet, normal on first run
    EMPTY = "empty"  # zero-length file
    FAILED = "failed"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of RecordStore.load().

    ``tasks`` is always a list; check ``ok`` to tell "no data" apart
    from "could not read the data".
    """

    status: LoadStatus
    tasks: list[TaskItem] = field(default_factory=list)
    error: str | None = None
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.status is not LoadStatus.FAILED


def next_task_id(tasks: list[TaskItem]) -> int:
    """Next free id: one past the current maximum (1 for no tasks)."""
    return max((task.id for task in tasks), default=0) + 1


def _parse_id(value: str) -> int | None:
    # ASCII digits only: no sign, padding, underscores or other scripts.
    if not (value.isascii() and value.isdigit()):
        return None
    task_id = int(value)
    return task_id if task_id > 0 else None


class RecordStore:
    """Loads and rewrites the task file at a fixed path.

    Example:
        >>> store = RecordStore(settings.storage_path)
        >>> result = store.load()
        >>> if result.ok:
        ...     store.save(result.tasks + [TaskItem(3, "Water plants")])
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._logger = Loggers.store().bind(path=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        """Read every task from disk.

        Rows with fewer than three fields or an id that is not a positive
        integer are skipped with a warning. Rows with an unknown status
        or a repeated id are kept, with a warning, so the next save does
        not drop them. File-level problems yield a FAILED result.
        """
        try:
            with open(self._path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            return LoadResult(LoadStatus.MISSING)
        except (OSError, UnicodeDecodeError) as e:
            self._logger.error(
                "storage_open_failed",
                abs_path=str(self._path.absolute()),
                error=str(e),
            )
            return LoadResult(LoadStatus.FAILED, error=str(e))

        if not content:
            return LoadResult(LoadStatus.EMPTY)

        try:
            rows = list(csv.reader(io.StringIO(content, newline=""), strict=True))
        except csv.Error as e:
            self._logger.error("storage_parse_failed", error=str(e))
            return LoadResult(LoadStatus.FAILED, error=str(e))

        tasks: list[TaskItem] = []
        seen: set[int] = set()
        skipped = 0
        # Row 1 is the header, whatever it contains.
        for line_no, record in enumerate(rows[1:], start=2):
            if not record:
                continue
            if len(record) < MIN_FIELDS:
                self._logger.warning(
                    "row_skipped_too_few_fields", row=line_no, fields=len(record)
                )
                skipped += 1
                continue

            task_id = _parse_id(record[0])
            if task_id is None:
                self._logger.warning("row_skipped_bad_id", row=line_no, id_value=record[0])
                skipped += 1
                continue

            task = TaskItem(id=task_id, description=record[1])
            status = TaskStatus.parse(record[2])
            if status is None:
                self._logger.warning("row_unknown_status", row=line_no, status_value=record[2])
                task.raw_status = record[2]
            else:
                task.status = status

            if task_id in seen:
                self._logger.warning("row_duplicate_id", row=line_no, task_id=task_id)
            seen.add(task_id)
            tasks.append(task)

        return LoadResult(LoadStatus.LOADED, tasks=tasks, skipped=skipped)

    def save(self, tasks: list[TaskItem]) -> bool:
        """Replace the file with exactly ``tasks``.

        Returns:
            True if the file was written, False if it could not be
            (the error is logged).
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        # The minimal writer only quotes "\n", so a bare "\r" would split
        # the row on reload.
        quoting_writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_ALL)
        writer.writerow(HEADER)
        for task in tasks:
            row = task.to_row()
            if any("\r" in value for value in row):
                quoting_writer.writerow(row)
            else:
                writer.writerow(row)

        try:
            atomic_write_text(self._path, buffer.getvalue())
        except OSError as e:
            self._logger.error(
                "storage_write_failed",
                abs_path=str(self._path.absolute()),
                error=str(e),
            )
            return False

        self._logger.debug("storage_saved", count=len(tasks))
        return True
