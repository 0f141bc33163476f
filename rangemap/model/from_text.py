import logging
import re
from typing import Optional

from .range import MappingRange

logger = logging.getLogger(__name__)

SEEDS_PREFIX = "seeds:"
HEADER_RE = re.compile(r"^(?P<source>[\w-]+?)-to-(?P<destination>[\w-]+) map:$")


class ParseError(ValueError):
    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


def parse_number(token: str, what: str, text: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ParseError(f"Failed to parse {what} from {text!r}")
    return int(token)


def parse_range(text: str, line: Optional[int] = None) -> MappingRange:
    """Read one ``destination source length`` line."""
    fields = text.split()
    if len(fields) < 3:
        raise ParseError(f"Expected three numbers in {text!r}", line)
    if len(fields) > 3:
        raise ParseError(f"Unexpected fields after first 3 numbers in {text!r}", line)
    try:
        destination, source, length = (
            parse_number(token, what, text)
            for token, what in zip(
                fields, ("destination start", "source start", "length")
            )
        )
        return MappingRange(destination, source, length)
    except ParseError as e:
        raise ParseError(e.args[0], line) from None
    except ValueError as e:
        raise ParseError(e.args[0], line) from e


def parse_seeds(text: str, line: Optional[int] = None) -> list[int]:
    if not text.startswith(SEEDS_PREFIX):
        raise ParseError(f"Expected a {SEEDS_PREFIX!r} line, got {text!r}", line)
    try:
        seeds = [
            parse_number(token, "seed", text)
            for token in text[len(SEEDS_PREFIX) :].split()
        ]
    except ParseError as e:
        raise ParseError(e.args[0], line) from None
    if not seeds:
        raise ParseError("No seeds listed", line)
    return seeds


class MapBlock:
    """One ``<source>-to-<destination> map:`` block and its ranges."""

    def __init__(
        self, source: str, destination: str, ranges: list[MappingRange], line: int
    ) -> None:
        self.source = source
        self.destination = destination
        self.ranges = ranges
        self.line = line

    def __repr__(self) -> str:
        return f"<MapBlock {self.source}-to-{self.destination}: {len(self.ranges)} ranges>"


def parse_blocks(text: str) -> tuple[list[int], list[MapBlock]]:
    """
    Read almanac text: a seeds line followed by blank-line separated blocks,
    each headed ``<source>-to-<destination> map:`` and holding one range
    per line.
    """
    lines = text.splitlines()
    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1
    if index == len(lines):
        raise ParseError("Empty almanac")
    seeds = parse_seeds(lines[index].strip(), index + 1)
    index += 1

    blocks: list[MapBlock] = []
    while index < len(lines):
        header = lines[index].strip()
        if not header:
            index += 1
            continue
        match = HEADER_RE.match(header)
        if match is None:
            raise ParseError(f"Expected a map header, got {header!r}", index + 1)
        header_line = index + 1
        index += 1
        ranges = []
        while index < len(lines) and lines[index].strip():
            ranges.append(parse_range(lines[index], index + 1))
            index += 1
        if not ranges:
            raise ParseError(f"Map {header!r} has no ranges", header_line)
        if blocks and blocks[-1].destination != match["source"]:
            logger.warning(
                "Map %r does not continue from %r",
                header,
                blocks[-1].destination,
            )
        blocks.append(
            MapBlock(match["source"], match["destination"], ranges, header_line)
        )

    logger.debug("Parsed %d seeds and %d maps", len(seeds), len(blocks))
    return seeds, blocks
