"""Unit tests for exception types."""

from pathlib import Path

from blob_hash_validator.exceptions import (
    BlobHashError,
    FileAccessError,
    InvalidArgumentError,
)


class TestExceptions:
    """Tests for exception hierarchy."""

    def test_file_access_error(self):
        """Test FileAccessError attributes and message."""
        error = FileAccessError("/tmp/file.txt", "Permission denied")

        assert isinstance(error, BlobHashError)
        assert error.file_path == Path("/tmp/file.txt")
        assert error.reason == "Permission denied"
        assert str(error) == "Cannot read /tmp/file.txt: Permission denied"

    def test_invalid_argument_is_value_error(self):
        """Test that InvalidArgumentError can be caught as ValueError."""
        error = InvalidArgumentError("bad")

        assert isinstance(error, BlobHashError)
        assert isinstance(error, ValueError)
