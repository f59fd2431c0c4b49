"""Working-tree classification against the last committed snapshot."""

from minigit.models import FileRecord, StatusReport


def compute_status(
    staging: dict[str, FileRecord],
    last_commit: dict[str, FileRecord],
) -> StatusReport:
    """Classify files as added, modified or deleted.

    Two files with equal fingerprints are treated as unchanged. Neither
    mapping is modified.

    Args:
        staging: Snapshot freshly built from disk.
        last_commit: Full-content snapshot as of the newest commit.

    Returns:
        StatusReport with the three disjoint filename sets.
    """
    added = {name for name in staging if name not in last_commit}
    modified = {
        name
        for name, record in staging.items()
        if name in last_commit and last_commit[name].fingerprint != record.fingerprint
    }
    deleted = {name for name in last_commit if name not in staging}
    return StatusReport(added=added, modified=modified, deleted=deleted)
