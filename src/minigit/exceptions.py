"""Exceptions for mini-git repository operations."""


class MiniGitError(Exception):
    """Base exception for all repository engine operations."""


class NotInitializedError(MiniGitError):
    """Raised when status, commit or log is called before init."""

    def __init__(self, message: str = "Repository not initialized! Use 'init' first."):
        super().__init__(message)


class EmptyCommitMessageError(MiniGitError):
    """Raised when commit is invoked with a blank message."""

    def __init__(self, message: str = "Commit message must not be empty."):
        super().__init__(message)


class RepositoryPathMissingError(MiniGitError):
    """Raised when the bound repository path no longer exists on disk."""

    def __init__(self, repo_path: str):
        self.repo_path = repo_path
        super().__init__(f"Repository path does not exist: {repo_path}")


class UnreadableFileError(MiniGitError):
    """Raised when a tracked file's content cannot be read."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot read file {path}{detail}")
