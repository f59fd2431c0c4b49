"""Repository state engine."""

from minigit.engine.history import (
    append_commit,
    build_commit_record,
    iter_history,
    to_log_entry,
)
from minigit.engine.repository import Repository
from minigit.engine.snapshot import SnapshotBuilder
from minigit.engine.state import RepositoryState, make_initial_state
from minigit.engine.status import compute_status

__all__ = [
    "Repository",
    "RepositoryState",
    "SnapshotBuilder",
    "append_commit",
    "build_commit_record",
    "compute_status",
    "iter_history",
    "make_initial_state",
    "to_log_entry",
]
