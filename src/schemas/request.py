"""Pydantic models for blob hash requests and results."""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlobHashRequest(BaseModel):
    """Request to compute the blob hash of a single file."""

    model_config = ConfigDict(frozen=True)

    file_path: Path = Field(description="Path to the file to hash")

    @field_validator("file_path", mode="before")
    @classmethod
    def validate_file_path(cls, value: Any) -> Any:
        """Decode bytes paths and reject paths that cannot be opened.

        Blank strings are rejected before they collapse to the current
        directory, and null bytes before open() raises on them.
        """
        if isinstance(value, bytes):
            value = os.fsdecode(value)
        if isinstance(value, (str, Path)):
            if not str(value).strip():
                raise ValueError("File path must not be blank")
            if "\x00" in str(value):
                raise ValueError("File path must not contain a null byte")
        return value


class HashCheckRequest(BlobHashRequest):
    """Request to compare a file's blob hash against an expected value.

    The expected hash is not checked for format. Anything that is not the
    correct 40-character hex digest fails comparison as a normal result.
    """

    expected_hash: str = Field(description="Expected blob hash (any letter case)")
    @field_validator("expected_hash")
    @classmethod
    def validate_expected_hash_not_blank(cls, value: str) -> str:
        """Reject empty or whitespace-only expected hashes."""
        if not value.strip():
            raise ValueError("Expected hash must not be blank")
        return value


class HashCheckResult(BaseModel):
    """Outcome of comparing a computed blob hash with an expected one."""

    model_config = ConfigDict(frozen=True)

    file_path: Path = Field(description="Path of the file that was hashed")
    expected_hash: str = Field(description="Expected hash as supplied by the caller")
    actual_hash: str = Field(
        pattern=r"^[0-9a-f]{40}$",
        description="Computed blob hash (lowercase hex)",
    )
    matches: bool = Field(description="Whether the hashes are equal ignoring case")
