"""Command line entry point: python -m feed_builder."""

import argparse
import sys

from .config import Config
from .logging_config import LOG_LEVELS, setup_structured_logging
from .pipeline import build_feed


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="feed-builder",
        description="Build an RSS feed from dated markdown documents.",
    )
    parser.add_argument("--root", help="Content root (overrides FEED_ROOT_DIR)")
    parser.add_argument("--output", help="Feed path (overrides FEED_OUTPUT_PATH)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (overrides LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Build the feed and return the process exit status."""
    args = parse_args(argv)
    try:
        config = Config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_structured_logging(args.log_level or config.log_level)

    if args.root:
        config.root_dir = args.root
    if args.output:
        config.output_path = args.output

    result = build_feed(config)
    if not result.success:
        print(result.error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
