"""Command-line interface for blob-hash-validator."""

import argparse
import logging
import sys
import traceback

from blob_hash_validator import __version__
from blob_hash_validator.exceptions import FileAccessError, InvalidArgumentError
from blob_hash_validator.utils.hashing import compute_blob_hash
from blob_hash_validator.validator import check_blob_hash, report_result

# Exit codes
EXIT_SUCCESS = 0
EXIT_MISMATCH = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_FILE_ACCESS_ERROR = 3
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Without an expected hash the blob hash of FILE is printed. With one,
    FILE is validated against it and the exit code reports the outcome.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for mismatch or errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args)

    try:
        if args.expected_hash is None:
            print(compute_blob_hash(args.file))
            return EXIT_SUCCESS

        result = check_blob_hash(args.file, args.expected_hash)
        if not args.quiet:
            report_result(result)

        return EXIT_SUCCESS if result.matches else EXIT_MISMATCH

    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        print(f"\nERROR: {e}\n", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    except FileAccessError as e:
        logger.error(f"File access failed: {e}")
        print(f"\nERROR: {e}\n", file=sys.stderr)
        if args.debug:
            traceback.print_exc()
        return EXIT_FILE_ACCESS_ERROR

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


def create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for the blob hash command.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="blob-hash-validator",
        description="Compute or validate the Git blob hash of a local file",
        epilog=(
            "Exit codes: 0 match, 1 mismatch, 2 invalid argument, "
            "3 file access error, 130 interrupted."
        ),
    )

    # Positional arguments
    parser.add_argument(
        "file",
        metavar="FILE",
        help="File to hash",
    )
    parser.add_argument(
        "expected_hash",
        metavar="EXPECTED_HASH",
        nargs="?",
        help="Expected blob hash (any letter case); omit to print the hash",
    )

    # Verbosity options
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (show progress details)",
    )
    verbosity_group.add_argument(
        "--debug", action="store_true", help="Debug output (show all details)"
    )
    verbosity_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode (no status message, result in exit code only)",
    )

    # Version
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def setup_logging(args: argparse.Namespace) -> None:
    """Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments
    """
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


if __name__ == "__main__":
    sys.exit(main())
