"""Repository state owned by one initialized repository instance."""

from pydantic import BaseModel, ConfigDict, Field

from minigit.models import CommitRecord, FileRecord


class RepositoryState(BaseModel):
    """Mutable state of an initialized repository.

    Commits are kept in an arena keyed by commit id; each record points at
    its predecessor through ``parent_id``. ``last_commit_snapshot`` is a
    full-content mirror of the tree as of the newest commit and is replaced
    wholesale on every commit, never rebuilt from deltas.
    """

    model_config = ConfigDict(frozen=False)

    repo_path: str
    metadata_path: str

    # Rebuilt from disk on every status/commit call
    staging_snapshot: dict[str, FileRecord] = Field(default_factory=dict)
    last_commit_snapshot: dict[str, FileRecord] = Field(default_factory=dict)

    # History arena
    commits: dict[int, CommitRecord] = Field(default_factory=dict)
    head_id: int | None = None
    next_commit_id: int = 1

    @property
    def head(self) -> CommitRecord | None:
        if self.head_id is None:
            return None
        return self.commits[self.head_id]


def make_initial_state(repo_path: str, metadata_path: str) -> RepositoryState:
    """Create the state for a freshly initialized repository.

    Args:
        repo_path: Directory whose files are tracked.
        metadata_path: Engine metadata directory inside ``repo_path``.

    Returns:
        RepositoryState with empty snapshots, no commits and next id 1.
    """
    return RepositoryState(repo_path=repo_path, metadata_path=metadata_path)
