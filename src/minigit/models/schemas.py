"""Pydantic data models for tracked files and commits."""

from pydantic import BaseModel, ConfigDict, Field

from minigit.models.diff_models import FileDelta


class FileRecord(BaseModel):
    """Tracked state of a single file at one point in time."""

    model_config = ConfigDict(frozen=True)

    filename: str
    fingerprint: int
    content: str
    deleted: bool = False  # never set by the engine; absence marks deletion


class CommitRecord(BaseModel):
    """One node of the linear commit chain.

    The root commit carries a full snapshot of every tracked file. Later
    commits carry deltas for modified files, full records only for files
    added in that commit, and the names of deleted files.
    """

    model_config = ConfigDict(frozen=True)

    commit_id: int
    message: str
    timestamp: str
    full_snapshot: dict[str, FileRecord] = Field(default_factory=dict)
    deltas: tuple[FileDelta, ...] = ()
    added_files: tuple[str, ...] = ()
    deleted_files: tuple[str, ...] = ()
    parent_id: int | None = None  # None only for the root commit

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def modified_files(self) -> tuple[str, ...]:
        return tuple(delta.filename for delta in self.deltas)

    def touched_files(self) -> set[str]:
        """Return every filename added, modified or deleted by this commit."""
        return set(self.added_files) | set(self.modified_files) | set(self.deleted_files)


class LogEntry(BaseModel):
    """Summary of one commit as reported by ``log``."""

    model_config = ConfigDict(frozen=True)

    commit_id: int
    message: str
    timestamp: str
    added_files: tuple[str, ...] = ()
    modified_files: tuple[str, ...] = ()
    deleted_files: tuple[str, ...] = ()
