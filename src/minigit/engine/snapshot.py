"""Snapshot builder: scans a directory into tracked file records."""

import logging
from pathlib import Path

from minigit.fs.base import FileSystem
from minigit.models import FileRecord
from minigit.utils.fingerprint import fingerprint

logger = logging.getLogger(__name__)


class SnapshotBuilder:
    """Builds the filename -> FileRecord mapping for a working directory."""

    def __init__(self, filesystem: FileSystem):
        self.filesystem = filesystem

    def build(self, directory_path: str) -> dict[str, FileRecord]:
        """Scan regular files directly inside ``directory_path``.

        Engine metadata is excluded by the file-system port. Consumers must
        not rely on the iteration order of the returned mapping.

        Args:
            directory_path: Directory to scan (non-recursive).

        Returns:
            Mapping of filename to FileRecord. Empty if the directory is missing.
        """
        if not self.filesystem.directory_exists(directory_path):
            return {}

        snapshot: dict[str, FileRecord] = {}
        for filename in self.filesystem.list_regular_files(directory_path):
            content = self.filesystem.read_all_bytes(str(Path(directory_path) / filename))
            snapshot[filename] = FileRecord(
                filename=filename,
                fingerprint=fingerprint(content),
                content=content,
            )

        logger.debug("Scanned %d file(s) in %s", len(snapshot), directory_path)
        return snapshot
