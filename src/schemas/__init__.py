"""Schema definitions for blob hash requests."""

from .request import BlobHashRequest, HashCheckRequest, HashCheckResult

__all__ = [
    "BlobHashRequest",
    "HashCheckRequest",
    "HashCheckResult",
]
