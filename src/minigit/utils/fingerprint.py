"""Content fingerprinting for change detection.

Fingerprints are used purely to short-circuit content comparison: two
files with equal fingerprints are *treated* as unchanged. This is a
heuristic, not a proof of equality; a collision would hide a change.
Nothing is ever reconstructed from a fingerprint.
"""

import hashlib

FINGERPRINT_BYTES = 8


def fingerprint(content: str) -> int:
    """Return a deterministic 64-bit integer digest of ``content``.

    Args:
        content: File content as read by the file-system layer. Undecodable
            bytes are expected to be carried as surrogate escapes.

    Returns:
        Unsigned integer digest, stable across processes and platforms.
    """
    digest = hashlib.blake2b(
        content.encode("utf-8", errors="surrogateescape"),
        digest_size=FINGERPRINT_BYTES,
    ).digest()
    return int.from_bytes(digest, "big")
