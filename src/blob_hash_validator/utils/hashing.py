"""Git blob hashing utilities.

A blob hash is the SHA-1 of ``b"blob <size>\\0"`` followed by the raw file
bytes. It is the object ID a Git hosting service reports for a file, so
it can be compared without downloading the file again.
"""

import hashlib
import logging
from pathlib import Path

from blob_hash_validator.exceptions import FileAccessError, InvalidArgumentError
from blob_hash_validator.utils.arguments import parse_arguments
from schemas.request import BlobHashRequest

BLOB_HASH_LENGTH = 40
EMPTY_BLOB_HASH = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"

logger = logging.getLogger(__name__)


def build_blob_header(size: int) -> bytes:
    """Build the header Git prepends to blob content before hashing.

    Args:
        size: Exact byte count of the content

    Returns:
        ASCII bytes ``blob <size>`` terminated by a single null byte

    Raises:
        InvalidArgumentError: If size is negative
    """
    if size < 0:
        raise InvalidArgumentError(f"Blob size must not be negative: {size}")
    return b"blob " + str(size).encode("ascii") + b"\x00"


def hash_blob_content(content: bytes) -> str:
    """Compute the Git blob hash of in-memory content.

    Args:
        content: Raw file bytes

    Returns:
        Lowercase hexadecimal SHA-1 of header plus content
    """
    sha1 = hashlib.sha1()
    sha1.update(build_blob_header(len(content)))
    sha1.update(content)
    return sha1.hexdigest()


def read_file_content(file_path: str | bytes | Path) -> bytes:
    """Read a file's bytes exactly as stored.

    Args:
        file_path: Path to file to read

    Returns:
        Full file content

    Raises:
        FileAccessError: If the file is missing, unreadable, or the read fails
    """
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(file_path, e.strerror or str(e)) from e
    except ValueError as e:
        # open() rejects paths with embedded null bytes
        raise FileAccessError(file_path, str(e)) from e


def compute_blob_hash(file_path: str | bytes | Path) -> str:
    """Compute the Git blob hash of a file.

    Args:
        file_path: Path to file to hash; bytes paths are decoded with
            os.fsdecode

    Returns:
        40-character lowercase hexadecimal blob hash

    Raises:
        InvalidArgumentError: If file_path is blank or contains a null byte
        FileAccessError: If the file cannot be read in full
    """
    request = parse_arguments(BlobHashRequest, file_path=file_path)
    content = read_file_content(request.file_path)
    blob_hash = hash_blob_content(content)
    logger.debug(f"Blob hash of {request.file_path} ({len(content)} bytes): {blob_hash}")
    return blob_hash
