import logging
from functools import reduce
from typing import Iterable, Optional, Sequence

from rangemap.model import MappingRange
from rangemap.model.range import source_key

from .table import MappingTable

logger = logging.getLogger(__name__)


def feed_forward(tables: Iterable[MappingTable], value: int) -> int:
    """
    Send ``value`` through every table in order. A table with no range
    for the current value leaves it unchanged.
    """
    for table in tables:
        mapped = table.map(value)
        if mapped is not None:
            value = mapped
    return value


class Pipeline:
    def __init__(
        self,
        tables: Optional[Sequence[MappingTable]] = None,
        from_: Optional[int] = None,
        to: Optional[int] = None,
    ) -> None:
        self.tables = list(tables or [])
        self.from_ = from_ or 0
        self.to = len(self.tables) if to is None else to

    @property
    def stages(self) -> list[MappingTable]:
        return self.tables[self.from_ : self.to]

    def slice(self, from_: int = 0, to: Optional[int] = None) -> "Pipeline":
        if to is None:
            to = len(self.tables)
        return Pipeline(self.tables, from_, to)

    def append_table(self, table: MappingTable) -> None:
        self.tables.append(table)
        self.to = len(self.tables)

    def map(self, value: int) -> int:
        return feed_forward(self.stages, value)

    def map_all(self, values: Iterable[int]) -> list[int]:
        return [self.map(value) for value in values]

    def lowest(self, values: Iterable[int]) -> int:
        return min(self.map_all(values))

    def map_range(self, start: int, length: int) -> list[MappingRange]:
        """
        The image of ``[start, start + length)`` as ranges whose sources are
        the input identifiers and whose destinations are the final ones.
        """
        if not length:
            return []
        pieces = [MappingRange.identity(start, length)]
        for table in self.stages:
            mapped = []
            for piece in pieces:
                current = MappingRange.identity(piece.destination_start, piece.length)
                for part in table.map_range(current):
                    mapped.append(
                        MappingRange(
                            part.destination_start,
                            part.source_start - piece.offset,
                            part.length,
                        )
                    )
            pieces = mapped
        pieces.sort(key=source_key)
        return pieces

    def lowest_in_ranges(self, ranges: Iterable[tuple[int, int]]) -> int:
        return min(
            piece.destination_start
            for start, length in ranges
            for piece in self.map_range(start, length)
        )

    def collapse(self) -> MappingTable:
        stages = self.stages
        if not stages:
            raise ValueError("Cannot collapse an empty pipeline")
        table = reduce(lambda a, b: a.then(b), stages)
        logger.debug(
            "Collapsed %d tables into %s with %d ranges",
            len(stages),
            table.name,
            len(table),
        )
        return table

    @property
    def units(self) -> list[str]:
        stages = self.stages
        if not stages:
            return []
        return [stages[0].source] + [t.destination for t in stages]

    def __len__(self) -> int:
        return self.to - self.from_

    def __repr__(self) -> str:
        return f"<Pipeline {' -> '.join(self.units)}>"
