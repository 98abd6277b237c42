"""Compute and validate Git blob hashes of local files."""

__version__ = "0.1.0"

from blob_hash_validator.exceptions import (  # noqa: E402
    BlobHashError,
    FileAccessError,
    InvalidArgumentError,
)
from blob_hash_validator.utils.hashing import compute_blob_hash  # noqa: E402
from blob_hash_validator.validator import check_blob_hash, validate  # noqa: E402

__all__ = [
    "__version__",
    "BlobHashError",
    "FileAccessError",
    "InvalidArgumentError",
    "check_blob_hash",
    "compute_blob_hash",
    "validate",
]
