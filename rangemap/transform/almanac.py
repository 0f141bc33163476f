from rangemap.model import ParseError, parse_blocks

from .pipeline import Pipeline
from .table import MappingTable


class Almanac:
    def __init__(self, seeds: list[int], tables: list[MappingTable]) -> None:
        self.seeds = seeds
        self.tables = tables

    def seed_ranges(self) -> list[tuple[int, int]]:
        """The seeds line read as ``start length`` pairs."""
        if len(self.seeds) % 2:
            raise ParseError(
                f"Seed ranges need an even number of values, got {len(self.seeds)}"
            )
        pairs = list(zip(self.seeds[::2], self.seeds[1::2]))
        for start, length in pairs:
            if not length:
                raise ParseError(f"Seed range starting at {start} has no length")
        return pairs

    def pipeline(self) -> Pipeline:
        return Pipeline(self.tables)

    def __repr__(self) -> str:
        units = " -> ".join(self.pipeline().units)
        return f"<Almanac {len(self.seeds)} seeds, {units or 'no tables'}>"


def parse_almanac(text: str) -> Almanac:
    seeds, blocks = parse_blocks(text)
    return Almanac(
        seeds,
        [MappingTable(block.source, block.destination, block.ranges) for block in blocks],
    )
