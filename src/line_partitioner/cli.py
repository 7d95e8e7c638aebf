"""Command-line interface for line partitioner."""

import argparse
import logging
import sys

from line_partitioner.config import load_settings
from line_partitioner.partition import (
    PartitionError,
    describe_partitions,
    find_partitions,
    open_source,
    verify_partitions,
)

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="line-partitioner",
        description="Split a newline-delimited file into line-aligned byte ranges.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the newline-delimited input file",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Intended number of partitions (default: $LP_WORKERS or CPU count)",
    )

    parser.add_argument(
        "--lookahead",
        type=int,
        default=None,
        help="Initial lookahead window in bytes (default: $LP_LOOKAHEAD or 50)",
    )

    parser.add_argument(
        "--max-lookahead",
        type=int,
        default=None,
        help="Fail if no newline is found within this many bytes (default: unbounded)",
    )

    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Log the first line of every partition",
    )

    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the computed partitions against the file",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        settings = load_settings()
    except ValueError as exc:
        parser.error(str(exc))

    workers = settings.workers if args.workers is None else args.workers
    lookahead = settings.lookahead if args.lookahead is None else args.lookahead
    max_lookahead = (
        settings.max_lookahead if args.max_lookahead is None else args.max_lookahead
    )

    if workers < 1:
        parser.error(f"--workers must be at least 1, got {workers}")
    if lookahead < 1:
        parser.error(f"--lookahead must be at least 1, got {lookahead}")
    if max_lookahead is not None and max_lookahead < lookahead:
        parser.error(
            f"--max-lookahead must not be smaller than --lookahead ({lookahead}), "
            f"got {max_lookahead}"
        )

    try:
        with open_source(args.input_file) as source:
            partitions = find_partitions(
                source,
                workers,
                lookahead=lookahead,
                max_lookahead=max_lookahead,
            )
            if args.verify:
                verify_partitions(source, partitions)
            if args.inspect:
                describe_partitions(source, partitions)
    except (PartitionError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    for partition in partitions:
        print(f"{partition.offset},{partition.length}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
