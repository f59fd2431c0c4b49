"""Utilities for computing positional line deltas."""

from minigit.models.diff_models import FileDelta


def split_lines(content: str) -> list[str]:
    """Split content on ``\\n``.

    A trailing unterminated line counts as a line; a final terminator does
    not produce an extra empty line. Empty content yields no lines. A ``\\r``
    right before ``\\n`` is dropped; other control characters such as form
    feeds stay inside their line.
    """
    *terminated, tail = content.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if tail:
        lines.append(tail)
    return lines


def compute_delta(filename: str, old_content: str, new_content: str) -> FileDelta:
    """Compute a positional line-level delta between two file versions.

    Lines are compared index by index up to the shorter length. This is not
    an alignment diff: an inserted or removed line shifts every following
    line and shows up as a run of modified lines.

    Args:
        filename: Name of the file the delta belongs to.
        old_content: Content as of the last commit.
        new_content: Current content.

    Returns:
        FileDelta. Empty when both contents split to the same lines.
    """
    old_lines = split_lines(old_content)
    new_lines = split_lines(new_content)
    common = min(len(old_lines), len(new_lines))

    added_lines: list[str] = []
    deleted_lines: list[str] = []
    modified_line_indices: list[int] = []

    for index in range(common):
        if old_lines[index] != new_lines[index]:
            modified_line_indices.append(index)
            deleted_lines.append(old_lines[index])
            added_lines.append(new_lines[index])

    # Tail growth / tail shrink
    added_lines.extend(new_lines[common:])
    deleted_lines.extend(old_lines[common:])

    return FileDelta(
        filename=filename,
        added_lines=tuple(added_lines),
        deleted_lines=tuple(deleted_lines),
        modified_line_indices=tuple(modified_line_indices),
    )
