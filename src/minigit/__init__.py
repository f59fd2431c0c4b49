"""Minimal local version-tracking engine."""

from minigit.engine import Repository
from minigit.exceptions import (
    EmptyCommitMessageError,
    MiniGitError,
    NotInitializedError,
    RepositoryPathMissingError,
    UnreadableFileError,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyCommitMessageError",
    "MiniGitError",
    "NotInitializedError",
    "Repository",
    "RepositoryPathMissingError",
    "UnreadableFileError",
]
