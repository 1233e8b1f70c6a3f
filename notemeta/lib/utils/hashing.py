"""Hashing utilities for index entries"""

import hashlib


def compute_sha256(text: str) -> str:
    """
    Compute SHA256 hash of text.

    Returns: "sha256:{hex_digest}"
    """
    return "sha256:" + hashlib.sha256(text.encode("utf-8")).hexdigest()


def compute_entry_id(path: str) -> str:
    """
    Compute a stable index entry id from a file path.

    Returns first 12 hex chars of the path's SHA256.

    Example: "a3f2bc1d9e8f"
    """
    return hashlib.sha256(path.encode("utf-8")).hexdigest()[:12]
