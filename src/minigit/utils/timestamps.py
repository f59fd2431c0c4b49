"""Commit timestamp formatting."""

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``YYYY-MM-DD HH:MM:SS`` (no timezone)."""
    return moment.strftime(TIMESTAMP_FORMAT)


def current_timestamp() -> str:
    return format_timestamp(datetime.now())
