import json
import logging
from typing import Iterable, Optional, cast

from typing_extensions import NotRequired, TypedDict

from rangemap.model import MappingRange, RangeTree
from rangemap.model.range import source_key
from rangemap.utils import JSONDict, Triple

logger = logging.getLogger(__name__)


class RangeSpec(TypedDict):
    destination: int
    source: int
    length: int


class TableSpec(TypedDict):
    source: str
    destination: str
    ranges: list[RangeSpec]
    name: NotRequired[str]


class MappingTable:
    """
    One stage of a pipeline: the ranges sending ``source`` identifiers to
    ``destination`` identifiers, indexed by a :class:`RangeTree`.
    """

    def __init__(
        self, source: str, destination: str, ranges: Iterable[MappingRange]
    ) -> None:
        self.source = source
        self.destination = destination
        self.ranges = list(ranges)
        self.tree = RangeTree.build(self.ranges)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built %s table: %d ranges, depth %d",
                self.name,
                len(self.ranges),
                self.tree.depth,
            )

    @classmethod
    def from_triples(
        cls, source: str, destination: str, triples: Iterable[Triple]
    ) -> "MappingTable":
        return cls(source, destination, map(MappingRange.from_triple, triples))

    @property
    def name(self) -> str:
        return f"{self.source}-to-{self.destination}"

    def map(self, value: int) -> Optional[int]:
        return self.tree.map(value)

    def apply(self, value: int) -> int:
        mapped = self.tree.map(value)
        return value if mapped is None else mapped

    def overlapping(self, query: MappingRange) -> list[MappingRange]:
        return self.tree.overlapping(query)

    def cover(self, query: MappingRange) -> list[tuple[MappingRange, bool]]:
        """
        Cut the source interval of ``query`` into consecutive pieces, each
        paired with whether a range of this table maps it. Unmapped pieces
        are identities. Where ranges overlap, the one starting first wins.
        """
        pieces = []
        for r in self.overlapping(query):
            for piece in r.split_against(query):
                if r.fully_contains(piece.source_start, piece.source_end):
                    pieces.append(piece)
        pieces.sort(key=source_key)

        result: list[tuple[MappingRange, bool]] = []
        cursor = query.source_start
        for piece in pieces:
            if piece.source_end <= cursor:
                continue
            if piece.source_start > cursor:
                gap = MappingRange.identity(cursor, piece.source_start - cursor)
                result.append((gap, False))
            elif piece.source_start < cursor:
                shift = cursor - piece.source_start
                piece = MappingRange(
                    piece.destination_start + shift, cursor, piece.length - shift
                )
            result.append((piece, True))
            cursor = piece.source_end
        if cursor < query.source_end:
            gap = MappingRange.identity(cursor, query.source_end - cursor)
            result.append((gap, False))
        return result

    def map_range(self, query: MappingRange) -> list[MappingRange]:
        return [piece for piece, _ in self.cover(query)]

    def gaps(self, query: MappingRange) -> list[MappingRange]:
        return [piece for piece, mapped in self.cover(query) if not mapped]

    def then(self, other: "MappingTable") -> "MappingTable":
        """A single table behaving like this one followed by ``other``."""
        ranges = []
        for r in self.ranges:
            image = MappingRange.identity(r.destination_start, r.length)
            for piece in other.map_range(image):
                ranges.append(
                    MappingRange(
                        piece.destination_start,
                        piece.source_start - r.offset,
                        piece.length,
                    )
                )
        # values this table leaves alone reach ``other`` unchanged
        for r in other.ranges:
            domain = MappingRange.identity(r.source_start, r.length)
            for piece in self.gaps(domain):
                ranges.append(
                    MappingRange(
                        r.map_point(piece.source_start),
                        piece.source_start,
                        piece.length,
                    )
                )
        ranges.sort(key=source_key)
        return MappingTable(self.source, other.destination, ranges)

    def to_json(self) -> JSONDict:
        return {
            "name": self.name,
            "source": self.source,
            "destination": self.destination,
            "ranges": [r.to_json() for r in self.ranges],
        }

    @classmethod
    def from_json(cls, json_data: JSONDict | str) -> "MappingTable":
        if isinstance(json_data, str):
            json_data = cast(JSONDict, json.loads(json_data))
        if not json_data or not isinstance(json_data.get("ranges"), list):
            raise ValueError("Invalid input for MappingTable.from_json")
        table_spec = cast(TableSpec, json_data)
        if "source" not in table_spec or "destination" not in table_spec:
            raise ValueError("MappingTable.from_json needs source and destination")
        return cls(
            table_spec["source"],
            table_spec["destination"],
            [MappingRange.from_json(cast(JSONDict, r)) for r in table_spec["ranges"]],
        )

    def __len__(self) -> int:
        return len(self.ranges)

    def __repr__(self) -> str:
        return f"<MappingTable {self.name}: {len(self.ranges)} ranges>"
