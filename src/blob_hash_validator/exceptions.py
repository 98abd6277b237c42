"""Custom exceptions for blob hash computation and validation."""

import os
from pathlib import Path


class BlobHashError(Exception):
    """Base exception for all blob hash errors."""

    pass


class FileAccessError(BlobHashError):
    """Raised when a file cannot be read in full.

    This covers a missing path, a path that is not a readable regular
    file, and a read that fails partway. The underlying OSError is kept
    as ``__cause__``.
    """

    def __init__(self, file_path: str | bytes | Path, reason: str) -> None:
        self.file_path = Path(os.fsdecode(file_path))
        self.reason = reason
        super().__init__(f"Cannot read {self.file_path}: {reason}")


class InvalidArgumentError(BlobHashError, ValueError):
    """Raised when a request argument is rejected before any I/O.

    A blank file path or a blank expected hash ends up here. A non-blank
    expected hash that is not 40 hex characters is not an error; it
    simply fails comparison.
    """

    pass
