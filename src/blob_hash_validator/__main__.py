"""Entry point for blob-hash-validator command."""

import sys

from blob_hash_validator.cli import main

if __name__ == "__main__":
    sys.exit(main())
