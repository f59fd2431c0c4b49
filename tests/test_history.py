"""Tests for commit history helpers."""

import pytest

from minigit.engine.history import (
    append_commit,
    build_commit_record,
    iter_history,
    to_log_entry,
)
from minigit.engine.state import make_initial_state
from minigit.models import FileRecord
from minigit.utils.fingerprint import fingerprint


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_file(name: str, content: str) -> FileRecord:
    return FileRecord(filename=name, fingerprint=fingerprint(content), content=content)


def snapshot(files: dict[str, str]) -> dict[str, FileRecord]:
    return {name: make_file(name, content) for name, content in files.items()}


def commit(state, message: str, files: dict[str, str]):
    staging = snapshot(files)
    record = build_commit_record(
        commit_id=state.next_commit_id,
        message=message,
        timestamp=f"t{state.next_commit_id}",
        staging=staging,
        last_commit=state.last_commit_snapshot,
        parent_id=state.head_id,
    )
    append_commit(state, record, staging)
    return record


@pytest.fixture
def state():
    return make_initial_state("/repo", "/repo/.minigit")


# ---------------------------------------------------------------------------
# build_commit_record
# ---------------------------------------------------------------------------

class TestBuildCommitRecord:

    def test_root_commit_holds_full_snapshot(self):
        staging = snapshot({"a.txt": "x", "b.txt": "y"})
        record = build_commit_record(1, "initial", "t", staging, {}, None)
        assert record.is_root
        assert set(record.full_snapshot) == {"a.txt", "b.txt"}
        assert record.deltas == ()
        assert record.added_files == ()
        assert record.deleted_files == ()

    def test_root_commit_ignores_last_commit_snapshot(self):
        staging = snapshot({"a.txt": "x"})
        record = build_commit_record(1, "initial", "t", staging, snapshot({"z": "1"}), None)
        assert record.deleted_files == ()

    def test_non_root_partitions_changes(self):
        last = snapshot({"keep": "same", "edit": "old", "drop": "bye"})
        staging = snapshot({"keep": "same", "edit": "new", "add": "hi"})
        record = build_commit_record(2, "c2", "t", staging, last, 1)

        assert record.added_files == ("add",)
        assert record.modified_files == ("edit",)
        assert record.deleted_files == ("drop",)
        assert set(record.full_snapshot) == {"add"}
        assert record.full_snapshot["add"].content == "hi"
        assert record.parent_id == 1

        added = set(record.added_files)
        modified = set(record.modified_files)
        deleted = set(record.deleted_files)
        assert added.isdisjoint(modified)
        assert added.isdisjoint(deleted)
        assert modified.isdisjoint(deleted)

    def test_non_root_no_changes_is_empty(self):
        files = snapshot({"a.txt": "x"})
        record = build_commit_record(2, "nothing", "t", files, dict(files), 1)
        assert record.touched_files() == set()
        assert record.full_snapshot == {}


# ---------------------------------------------------------------------------
# append_commit / iter_history
# ---------------------------------------------------------------------------

class TestAppendAndTraverse:

    def test_ids_increase_by_one_from_one(self, state):
        ids = [commit(state, f"c{i}", {"a.txt": str(i)}).commit_id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]
        assert state.next_commit_id == 6

    def test_parent_links_form_linear_chain(self, state):
        first = commit(state, "c1", {"a.txt": "x"})
        second = commit(state, "c2", {"a.txt": "y"})
        assert first.parent_id is None
        assert second.parent_id == first.commit_id
        assert state.head_id == second.commit_id

    def test_last_commit_snapshot_replaced_wholesale(self, state):
        commit(state, "c1", {"a.txt": "x", "b.txt": "y"})
        commit(state, "c2", {"a.txt": "changed"})
        assert set(state.last_commit_snapshot) == {"a.txt"}
        assert state.last_commit_snapshot["a.txt"].content == "changed"

    def test_append_rejects_record_not_on_head(self, state):
        commit(state, "c1", {"a.txt": "x"})
        stale = build_commit_record(1, "stale", "t", {}, {}, None)
        with pytest.raises(ValueError):
            append_commit(state, stale, {})
        assert state.next_commit_id == 2
        assert len(state.commits) == 1

    def test_iter_history_newest_first(self, state):
        for i in range(3):
            commit(state, f"c{i + 1}", {"a.txt": str(i)})
        assert [r.message for r in iter_history(state)] == ["c3", "c2", "c1"]

    def test_iter_history_empty(self, state):
        assert list(iter_history(state)) == []

    def test_iter_history_is_single_use(self, state):
        commit(state, "c1", {"a.txt": "x"})
        iterator = iter_history(state)
        assert len(list(iterator)) == 1
        assert list(iterator) == []
        assert len(list(iter_history(state))) == 1


def test_to_log_entry_copies_touched_files(state):
    commit(state, "c1", {"a.txt": "x", "c.txt": "bye"})
    record = commit(state, "c2", {"a.txt": "y", "b.txt": "z"})
    entry = to_log_entry(record)
    assert entry.commit_id == 2
    assert entry.message == "c2"
    assert entry.timestamp == "t2"
    assert entry.added_files == ("b.txt",)
    assert entry.modified_files == ("a.txt",)
    assert entry.deleted_files == ("c.txt",)
