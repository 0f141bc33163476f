"""
Print the lowest location an almanac sends its seeds to.

Usage:
    python -m rangemap almanac.txt [--ranges] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

from rangemap.model import ParseError
from rangemap.transform import parse_almanac

logger = logging.getLogger("rangemap")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rangemap",
        description="Map seeds through an almanac and report the lowest location.",
    )
    parser.add_argument("path", type=Path, help="Path to the almanac text")
    parser.add_argument(
        "--ranges",
        action="store_true",
        help="Also read the seeds line as start/length pairs",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log at debug level"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.path.exists():
        print(f"Error: almanac not found: {args.path}", file=sys.stderr)
        return 1

    try:
        text = args.path.read_text()
    except OSError as e:
        print(
            f"Error: cannot read almanac {args.path}: {e.strerror or e}",
            file=sys.stderr,
        )
        return 1

    try:
        almanac = parse_almanac(text)
        pipeline = almanac.pipeline()
        logger.info("Loaded %r", pipeline)
        print(pipeline.lowest(almanac.seeds))
        if args.ranges:
            print(pipeline.lowest_in_ranges(almanac.seed_ranges()))
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
