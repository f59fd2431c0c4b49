"""Utilities for the mini-git engine."""

from minigit.utils.diff_generator import compute_delta, split_lines
from minigit.utils.fingerprint import fingerprint
from minigit.utils.timestamps import TIMESTAMP_FORMAT, current_timestamp, format_timestamp

__all__ = [
    "TIMESTAMP_FORMAT",
    "compute_delta",
    "current_timestamp",
    "fingerprint",
    "format_timestamp",
    "split_lines",
]
