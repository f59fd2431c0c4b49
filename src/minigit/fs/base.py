from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """File-system operations the repository engine depends on."""

    def directory_exists(self, path: str) -> bool:
        """Return True if ``path`` is an existing directory."""

    def create_directory(self, path: str) -> None:
        """Create ``path`` (and parents). No-op if it already exists."""

    def list_regular_files(self, path: str) -> list[str]:
        """Names of regular files directly inside ``path``, minus engine metadata."""

    def read_all_bytes(self, path: str) -> str:
        """Full file content, or "" if the file cannot be read."""


@runtime_checkable
class Clock(Protocol):
    """Source of human-readable commit timestamps."""

    def current_timestamp(self) -> str:
        """Timestamp for display; not required to be machine-parseable."""
