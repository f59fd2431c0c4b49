"""File-system and clock ports for the mini-git engine."""

from minigit.fs.base import Clock, FileSystem
from minigit.fs.local import DEFAULT_METADATA_DIR, LocalFileSystem, SystemClock

__all__ = [
    "Clock",
    "DEFAULT_METADATA_DIR",
    "FileSystem",
    "LocalFileSystem",
    "SystemClock",
]
