"""Blob hash validation against an expected value."""

import logging
from pathlib import Path

from blob_hash_validator.utils.arguments import parse_arguments
from blob_hash_validator.utils.hashing import BLOB_HASH_LENGTH, compute_blob_hash
from schemas.request import HashCheckRequest, HashCheckResult

MATCH_SYMBOL = "✓"
MISMATCH_SYMBOL = "✗"
MATCH_MESSAGE = "Hashes match"
MISMATCH_MESSAGE = "Hashes do not match"

logger = logging.getLogger(__name__)


def check_blob_hash(file_path: str | Path, expected_hash: str) -> HashCheckResult:
    """Compare a file's blob hash with an expected hash.

    The comparison ignores letter case and does not depend on locale.
    A mismatch is a normal result, not an error.

    Args:
        file_path: Path to file to check
        expected_hash: Expected blob hash in any letter case

    Returns:
        HashCheckResult with both hashes and the match flag

    Raises:
        InvalidArgumentError: If file_path or expected_hash is blank
        FileAccessError: If the file cannot be read in full
    """
    request = parse_arguments(
        HashCheckRequest, file_path=file_path, expected_hash=expected_hash
    )
    if len(request.expected_hash) != BLOB_HASH_LENGTH:
        logger.debug(
            f"Expected hash has {len(request.expected_hash)} characters, "
            f"not {BLOB_HASH_LENGTH}; it cannot match"
        )

    actual_hash = compute_blob_hash(request.file_path)
    return HashCheckResult(
        file_path=request.file_path,
        expected_hash=request.expected_hash,
        actual_hash=actual_hash,
        matches=actual_hash == request.expected_hash.lower(),
    )


def format_result_message(result: HashCheckResult) -> str:
    """Format the status message for a check result.

    Args:
        result: Result of check_blob_hash

    Returns:
        Match or mismatch message with a status symbol
    """
    if result.matches:
        return f"{MATCH_SYMBOL} {MATCH_MESSAGE}: {result.file_path}"
    return (
        f"{MISMATCH_SYMBOL} {MISMATCH_MESSAGE}: {result.file_path}\n"
        f"  Expected: {result.expected_hash}\n"
        f"  Actual:   {result.actual_hash}"
    )


def validate(
    file_path: str | Path, expected_hash: str, quiet: bool = False
) -> str | bool:
    """Validate a file against the blob hash reported by a Git host.

    In default mode the status message is printed to stdout and
    returned. In quiet mode nothing is printed and the match flag is
    returned instead. Errors propagate in both modes; a file that cannot
    be read is never reported as a mismatch.

    Args:
        file_path: Path to file to check
        expected_hash: Expected blob hash in any letter case
        quiet: Return a boolean instead of emitting a message

    Returns:
        Status message in default mode, match flag in quiet mode

    Raises:
        InvalidArgumentError: If file_path or expected_hash is blank
        FileAccessError: If the file cannot be read in full
    """
    result = check_blob_hash(file_path, expected_hash)

    if quiet:
        logger.debug(f"Quiet check of {result.file_path}: matches={result.matches}")
        return result.matches

    return report_result(result)


def report_result(result: HashCheckResult) -> str:
    """Log a check result at its severity and print its status message.

    A match is logged at INFO and a mismatch at WARNING.

    Args:
        result: Result of check_blob_hash

    Returns:
        The printed status message
    """
    if result.matches:
        logger.info(f"Blob hash matches for {result.file_path}")
    else:
        logger.warning(
            f"Blob hash mismatch for {result.file_path}: "
            f"expected {result.expected_hash}, got {result.actual_hash}"
        )

    message = format_result_message(result)
    print(message)
    return message
