"""Shared utility functions"""

from .hashing import compute_sha256, compute_entry_id

__all__ = [
    "compute_sha256",
    "compute_entry_id",
]
