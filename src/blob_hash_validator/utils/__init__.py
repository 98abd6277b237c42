"""Utility functions for blob hash computation."""

from .hashing import (
    BLOB_HASH_LENGTH,
    EMPTY_BLOB_HASH,
    build_blob_header,
    compute_blob_hash,
    hash_blob_content,
    read_file_content,
)

__all__ = [
    "BLOB_HASH_LENGTH",
    "EMPTY_BLOB_HASH",
    "build_blob_header",
    "compute_blob_hash",
    "hash_blob_content",
    "read_file_content",
]
