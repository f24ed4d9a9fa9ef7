"""Tests for the CSV record store."""

from pathlib import Path

import pytest
from structlog.testing import capture_logs

from todolist.tasks.models import TaskItem, TaskStatus
from todolist.tasks.store import LoadStatus, RecordStore, next_task_id


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="")


class TestNextTaskId:
    """Tests for id assignment."""

    def test_empty_store_starts_at_one(self):
        assert next_task_id([]) == 1

    def test_one_past_maximum(self):
        tasks = [TaskItem(1, "a"), TaskItem(5, "b"), TaskItem(3, "c")]
        assert next_task_id(tasks) == 6

    def test_gaps_are_not_filled(self):
        tasks = [TaskItem(2, "a"), TaskItem(4, "b")]
        assert next_task_id(tasks) == 5


class TestLoad:
    """Tests for RecordStore.load()."""

    def test_missing_file_is_empty_not_error(self, store: RecordStore):
        result = store.load()

        assert result.ok
        assert result.status is LoadStatus.MISSING
        assert result.tasks == []
        assert result.error is None

    def test_zero_length_file(self, store: RecordStore, storage_path: Path):
        write_file(storage_path, "")

        result = store.load()

        assert result.ok
        assert result.status is LoadStatus.EMPTY
        assert result.tasks == []

    def test_header_only(self, store: RecordStore, storage_path: Path):
        write_file(storage_path, "id,text,done\n")

        result = store.load()

        assert result.status is LoadStatus.LOADED
        assert result.tasks == []

    def test_loads_rows_in_file_order(self, store: RecordStore, storage_path: Path):
        write_file(
            storage_path,
            "id,text,done\n"
            "2,Finish report,Completed\n"
            "1,Buy groceries,Pending\n",
        )

        result = store.load()

        assert result.tasks == [
            TaskItem(2, "Finish report", TaskStatus.COMPLETED),
            TaskItem(1, "Buy groceries", TaskStatus.PENDING),
        ]

    def test_first_row_discarded_whatever_it_contains(
        self, store: RecordStore, storage_path: Path
    ):
        write_file(storage_path, "7,Looks like a task,Pending\n8,Real task,Pending\n")

        result = store.load()

        assert [t.id for t in result.tasks] == [8]

    def test_short_row_is_skipped_with_warning(
        self, storage_path: Path
    ):
        write_file(
            storage_path,
            "id,text,done\n"
            "1,Buy groceries,Pending\n"
            "2,Only two fields\n",
        )

        with capture_logs() as logs:
            result = RecordStore(storage_path).load()

        assert result.ok
        assert len(result.tasks) == 1
        assert result.tasks[0].description == "Buy groceries"
        assert result.skipped == 1
        assert any(
            e["event"] == "row_skipped_too_few_fields" and e["log_level"] == "warning"
            for e in logs
        )

    @pytest.mark.parametrize(
        "bad_id", ["abc", "0", "-4", "1.5", "", " 5 ", "+5", "1_0", "٣"]
    )
    def test_bad_id_is_skipped(self, storage_path: Path, bad_id: str):
        write_file(
            storage_path,
            f"id,text,done\n{bad_id},Broken,Pending\n3,Fine,Pending\n",
        )

        with capture_logs() as logs:
            result = RecordStore(storage_path).load()

        assert [t.id for t in result.tasks] == [3]
        assert [e["event"] for e in logs] == ["row_skipped_bad_id"]
        assert logs[0]["id_value"] == bad_id

    def test_unknown_status_is_kept_as_pending(self, storage_path: Path):
        write_file(storage_path, "id,text,done\n1,Buy milk,Done\n2,Other,Completed\n")

        with capture_logs() as logs:
            result = RecordStore(storage_path).load()

        assert [t.id for t in result.tasks] == [1, 2]
        assert result.skipped == 0
        kept = result.tasks[0]
        assert not kept.is_completed
        assert kept.raw_status == "Done"
        assert [e["event"] for e in logs] == ["row_unknown_status"]

    def test_unknown_status_survives_rewrite(self, store: RecordStore, storage_path: Path):
        write_file(storage_path, "id,text,done\n1,Buy milk,Done\n")

        store.save(store.load().tasks + [TaskItem(2, "x")])

        assert storage_path.read_text(encoding="utf-8") == (
            "id,text,done\n1,Buy milk,Done\n2,x,Pending\n"
        )

    def test_duplicate_ids_are_all_kept(self, storage_path: Path):
        write_file(storage_path, "id,text,done\n1,First,Pending\n1,Second,Pending\n")

        with capture_logs() as logs:
            result = RecordStore(storage_path).load()

        assert result.tasks == [TaskItem(1, "First"), TaskItem(1, "Second")]
        assert result.skipped == 0
        assert [e["event"] for e in logs] == ["row_duplicate_id"]

    def test_extra_fields_ignored_and_blank_lines_skipped(
        self, store: RecordStore, storage_path: Path
    ):
        write_file(storage_path, "id,text,done\n\n1,Task,Pending,extra\n\n")

        result = store.load()

        assert result.tasks == [TaskItem(1, "Task")]
        assert result.skipped == 0

    def test_unparseable_file_fails(self, storage_path: Path):
        write_file(storage_path, 'id,text,done\n1,"unterminated,Pending\n')

        with capture_logs() as logs:
            result = RecordStore(storage_path).load()

        assert not result.ok
        assert result.status is LoadStatus.FAILED
        assert result.tasks == []
        assert result.error
        assert any(e["log_level"] == "error" for e in logs)

    def test_undecodable_file_fails(self, store: RecordStore, storage_path: Path):
        storage_path.parent.mkdir(parents=True)
        storage_path.write_bytes(b"id,text,done\n1,\xff\xfe,Pending\n")

        result = store.load()

        assert result.status is LoadStatus.FAILED

    def test_directory_in_place_of_file_fails(self, store: RecordStore, storage_path: Path):
        storage_path.mkdir(parents=True)

        result = store.load()

        assert result.status is LoadStatus.FAILED
        assert result.error


class TestSave:
    """Tests for RecordStore.save()."""

    def test_writes_header_and_rows(self, store: RecordStore, storage_path: Path):
        assert store.save(
            [
                TaskItem(1, "Buy groceries"),
                TaskItem(2, "Finish report", TaskStatus.COMPLETED),
            ]
        )

        assert storage_path.read_text(encoding="utf-8") == (
            "id,text,done\n"
            "1,Buy groceries,Pending\n"
            "2,Finish report,Completed\n"
        )

    def test_creates_parent_directories(self, tmp_path: Path):
        path = tmp_path / "a" / "b" / "c" / "storage.csv"

        assert RecordStore(path).save([TaskItem(1, "x")])
        assert path.exists()

    def test_quotes_special_characters(self, store: RecordStore, storage_path: Path):
        store.save([TaskItem(1, 'Say "hi", then leave')])

        assert storage_path.read_text(encoding="utf-8").splitlines()[1] == (
            '1,"Say ""hi"", then leave",Pending'
        )

    def test_full_replace(self, store: RecordStore, storage_path: Path):
        store.save([TaskItem(1, "a"), TaskItem(2, "b"), TaskItem(3, "c")])
        store.save([TaskItem(2, "b")])

        assert store.load().tasks == [TaskItem(2, "b")]

    def test_empty_list_leaves_header(self, store: RecordStore, storage_path: Path):
        store.save([])

        assert storage_path.read_text(encoding="utf-8") == "id,text,done\n"

    def test_no_temp_file_left_behind(self, store: RecordStore, storage_path: Path):
        store.save([TaskItem(1, "a")])

        assert sorted(p.name for p in storage_path.parent.iterdir()) == ["storage.csv"]

    def test_uncreatable_directory_returns_false(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = RecordStore(blocker / "storage.csv")

        with capture_logs() as logs:
            assert store.save([TaskItem(1, "a")]) is False

        assert [e["event"] for e in logs] == ["storage_write_failed"]

    def test_roundtrip_preserves_text(self, store: RecordStore):
        tasks = [
            TaskItem(1, "plain"),
            TaskItem(4, "comma, inside", TaskStatus.COMPLETED),
            TaskItem(9, 'quote " inside'),
            TaskItem(10, "multi\nline\r\ntext"),
            TaskItem(11, "  padded  "),
            TaskItem(12, ""),
            TaskItem(13, "ünïcödé ✓"),
            TaskItem(14, "a\rb"),
            TaskItem(15, "tail\r", TaskStatus.COMPLETED),
            TaskItem(16, "after"),
        ]

        store.save(tasks)

        assert store.load().tasks == tasks

    def test_carriage_return_is_quoted(self, store: RecordStore, storage_path: Path):
        store.save([TaskItem(1, "a\rb"), TaskItem(2, "tail\r")])

        assert storage_path.read_bytes() == (
            b'id,text,done\n"1","a\rb","Pending"\n"2","tail\r","Pending"\n'
        )
        result = store.load()
        assert result.skipped == 0
        assert [t.description for t in result.tasks] == ["a\rb", "tail\r"]
