"""Local disk implementations of the engine's file-system and clock ports."""

from __future__ import annotations

import logging
from pathlib import Path

from minigit.exceptions import UnreadableFileError
from minigit.utils.timestamps import current_timestamp

logger = logging.getLogger(__name__)

DEFAULT_METADATA_DIR = ".minigit"


class LocalFileSystem:
    """File-system port backed by the local disk."""

    def __init__(self, metadata_dir_name: str = DEFAULT_METADATA_DIR):
        self.metadata_dir_name = metadata_dir_name

    def directory_exists(self, path: str) -> bool:
        return Path(path).is_dir()

    def create_directory(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def list_regular_files(self, path: str) -> list[str]:
        """List regular files directly inside ``path``.

        Entries whose name contains the metadata directory name are skipped,
        so neither the metadata directory nor stray files such as
        ``.minigit.bak`` are ever tracked.

        Args:
            path: Directory to scan (non-recursive).

        Returns:
            Sorted list of bare filenames. Empty if the directory is missing.
        """
        root = Path(path)
        if not root.is_dir():
            return []

        names = []
        for entry in root.iterdir():
            if self.metadata_dir_name in entry.name:
                continue
            if entry.is_file():
                names.append(entry.name)
        return sorted(names)

    def read_all_bytes(self, path: str) -> str:
        try:
            return self._read(path)
        except UnreadableFileError as exc:
            # Degrades to empty content; indistinguishable from an empty file
            logger.warning("%s; treating as empty", exc)
            return ""

    def _read(self, path: str) -> str:
        try:
            raw = Path(path).read_bytes()
        except OSError as exc:
            raise UnreadableFileError(path, exc.strerror or str(exc)) from exc
        return raw.decode("utf-8", errors="surrogateescape")


class SystemClock:
    """Clock port returning local wall-clock time."""

    def current_timestamp(self) -> str:
        return current_timestamp()
