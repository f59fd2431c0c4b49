"""Helper functions for the linear commit history.

The history is an arena of immutable CommitRecords keyed by id. Each
record names exactly one parent, so the chain can never branch.
"""

from collections.abc import Iterator

from minigit.engine.state import RepositoryState
from minigit.models import CommitRecord, FileDelta, FileRecord, LogEntry
from minigit.utils.diff_generator import compute_delta


def build_commit_record(
    commit_id: int,
    message: str,
    timestamp: str,
    staging: dict[str, FileRecord],
    last_commit: dict[str, FileRecord],
    parent_id: int | None,
) -> CommitRecord:
    """Build the record for a new commit without touching repository state.

    Args:
        commit_id: Id to assign.
        message: Commit message.
        timestamp: Display timestamp.
        staging: Snapshot being committed.
        last_commit: Snapshot as of the previous commit (ignored for the root).
        parent_id: Id of the current head, or None for the root commit.

    Returns:
        CommitRecord. A root record holds every staged file in
        ``full_snapshot``; later records hold added files in full, deltas for
        files whose fingerprint changed, and the names of deleted files.
    """
    if parent_id is None:
        return CommitRecord(
            commit_id=commit_id,
            message=message,
            timestamp=timestamp,
            full_snapshot=dict(staging),
        )

    full_snapshot: dict[str, FileRecord] = {}
    added_files: list[str] = []
    deltas: list[FileDelta] = []

    for filename in sorted(staging):
        record = staging[filename]
        previous = last_commit.get(filename)
        if previous is None:
            # Added files always get full content, never a delta
            added_files.append(filename)
            full_snapshot[filename] = record
        elif previous.fingerprint != record.fingerprint:
            deltas.append(compute_delta(filename, previous.content, record.content))

    deleted_files = sorted(name for name in last_commit if name not in staging)

    return CommitRecord(
        commit_id=commit_id,
        message=message,
        timestamp=timestamp,
        full_snapshot=full_snapshot,
        deltas=tuple(deltas),
        added_files=tuple(added_files),
        deleted_files=tuple(deleted_files),
        parent_id=parent_id,
    )


def append_commit(
    state: RepositoryState,
    record: CommitRecord,
    staging: dict[str, FileRecord],
) -> None:
    """Make ``record`` the new head and mirror ``staging`` as last-committed.

    Args:
        state: Repository state to update.
        record: Record built for ``state.next_commit_id`` on top of the head.
        staging: Snapshot the record was built from.

    Raises:
        ValueError: If the record does not extend the current head with the
            next commit id.
    """
    if record.commit_id != state.next_commit_id or record.parent_id != state.head_id:
        raise ValueError(
            f"Commit {record.commit_id} (parent {record.parent_id}) does not extend "
            f"head {state.head_id} with id {state.next_commit_id}"
        )
    state.commits[record.commit_id] = record
    state.head_id = record.commit_id
    state.next_commit_id += 1
    state.last_commit_snapshot = dict(staging)


def iter_history(state: RepositoryState) -> Iterator[CommitRecord]:
    """Yield commits from the head back to the root, newest first.

    Each call starts a fresh traversal; the returned iterator is single-use.
    """
    commit_id = state.head_id
    while commit_id is not None:
        record = state.commits[commit_id]
        yield record
        commit_id = record.parent_id


def to_log_entry(record: CommitRecord) -> LogEntry:
    return LogEntry(
        commit_id=record.commit_id,
        message=record.message,
        timestamp=record.timestamp,
        added_files=record.added_files,
        modified_files=record.modified_files,
        deleted_files=record.deleted_files,
    )
