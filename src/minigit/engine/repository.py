"""Repository facade: init, status, commit and log."""

from __future__ import annotations

import logging
from pathlib import Path

from minigit.engine.history import (
    append_commit,
    build_commit_record,
    iter_history,
    to_log_entry,
)
from minigit.engine.snapshot import SnapshotBuilder
from minigit.engine.state import RepositoryState, make_initial_state
from minigit.engine.status import compute_status
from minigit.exceptions import (
    EmptyCommitMessageError,
    NotInitializedError,
    RepositoryPathMissingError,
)
from minigit.fs.base import Clock, FileSystem
from minigit.fs.local import DEFAULT_METADATA_DIR, LocalFileSystem, SystemClock
from minigit.models import CommitRecord, FileRecord, LogEntry, StatusReport

logger = logging.getLogger(__name__)


class Repository:
    """Single-repository version-tracking engine.

    The engine starts uninitialized; ``init`` binds it to a directory.
    Every other operation raises NotInitializedError until then. Operations
    are all-or-nothing: when one raises, the state is left untouched.
    """

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        clock: Clock | None = None,
        metadata_dir_name: str = DEFAULT_METADATA_DIR,
    ):
        """Initialize the engine.

        Args:
            filesystem: File-system port (defaults to the local disk).
            clock: Timestamp source (defaults to the system clock).
            metadata_dir_name: Name of the metadata directory excluded from scans.
        """
        self.metadata_dir_name = metadata_dir_name
        self.filesystem = filesystem or LocalFileSystem(metadata_dir_name)
        self.clock = clock or SystemClock()
        self.snapshot_builder = SnapshotBuilder(self.filesystem)
        self.state: RepositoryState | None = None

    @property
    def initialized(self) -> bool:
        return self.state is not None

    def init(self, path: str) -> RepositoryState:
        """Bind the engine to ``path`` and create the metadata directory.

        The directory is created if it does not exist. Re-running init
        discards any in-memory history and starts over at ``path``.

        Args:
            path: Directory to track.

        Returns:
            The fresh RepositoryState.
        """
        if not self.filesystem.directory_exists(path):
            self.filesystem.create_directory(path)
            logger.info("Created directory: %s", path)

        metadata_path = str(Path(path) / self.metadata_dir_name)
        self.filesystem.create_directory(metadata_path)

        self.state = make_initial_state(repo_path=path, metadata_path=metadata_path)
        logger.info("Initialized mini-git repository in %s", path)
        return self.state

    def status(self) -> StatusReport:
        """Compare the working directory with the last commit.

        Returns:
            StatusReport of added, modified and deleted filenames.

        Raises:
            NotInitializedError: If init has not been called.
            RepositoryPathMissingError: If the repository directory is gone.
        """
        state = self._require_state()
        staging = self._scan(state)
        state.staging_snapshot = staging

        report = compute_status(staging, state.last_commit_snapshot)
        logger.debug(
            "Status: %d added, %d modified, %d deleted",
            len(report.added),
            len(report.modified),
            len(report.deleted),
        )
        return report

    def commit(self, message: str) -> CommitRecord:
        """Record the current working directory as a new commit.

        Commits with no changes are accepted and produce an empty record.

        Args:
            message: Commit message; surrounding whitespace is stripped.

        Returns:
            A copy of the new head CommitRecord; the stored record is not shared.

        Raises:
            NotInitializedError: If init has not been called.
            EmptyCommitMessageError: If ``message`` is blank.
            RepositoryPathMissingError: If the repository directory is gone.
        """
        state = self._require_state()
        message = (message or "").strip()
        if not message:
            raise EmptyCommitMessageError()

        staging = self._scan(state)
        record = build_commit_record(
            commit_id=state.next_commit_id,
            message=message,
            timestamp=self.clock.current_timestamp(),
            staging=staging,
            last_commit=state.last_commit_snapshot,
            parent_id=state.head_id,
        )

        state.staging_snapshot = staging
        append_commit(state, record, staging)

        logger.info(
            "Commit %d: %d added, %d modified, %d deleted",
            record.commit_id,
            len(record.added_files),
            len(record.deltas),
            len(record.deleted_files),
        )
        return record.model_copy(deep=True)

    def log(self) -> list[LogEntry]:
        """Return the commit history, newest first.

        Raises:
            NotInitializedError: If init has not been called.
        """
        state = self._require_state()
        return [to_log_entry(record) for record in iter_history(state)]

    def _require_state(self) -> RepositoryState:
        if self.state is None:
            raise NotInitializedError()
        return self.state

    def _scan(self, state: RepositoryState) -> dict[str, FileRecord]:
        if not self.filesystem.directory_exists(state.repo_path):
            raise RepositoryPathMissingError(state.repo_path)
        return self.snapshot_builder.build(state.repo_path)
