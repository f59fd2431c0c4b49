"""Data models for the mini-git engine."""

from minigit.models.diff_models import FileDelta
from minigit.models.report_models import StatusReport
from minigit.models.schemas import CommitRecord, FileRecord, LogEntry

__all__ = [
    "CommitRecord",
    "FileDelta",
    "FileRecord",
    "LogEntry",
    "StatusReport",
]
