from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, cast

from rangemap.utils import JSONDict, Triple, is_natural

from . import arithmetic


@total_ordering
@dataclass(frozen=True)
class MappingRange:
    """
    A run of ``length`` source identifiers starting at ``source_start``,
    sent one-for-one onto identifiers starting at ``destination_start``.

    Fields follow the order of an almanac line. Ranges are half-open:
    ``source_end`` is the first identifier past the range.
    Ranges sort by source start, then length, then destination.
    """

    destination_start: int
    source_start: int
    length: int

    # range arithmetic exposed on the value type
    classify: ClassVar = arithmetic.classify
    map_point: ClassVar = arithmetic.map_point
    fully_contains: ClassVar = arithmetic.fully_contains
    intersects: ClassVar = arithmetic.intersects
    split_against: ClassVar = arithmetic.split_against

    def __post_init__(self) -> None:
        if not is_natural(self.destination_start) or not is_natural(
            self.source_start
        ):
            raise ValueError(
                "Range starts must be non-negative integers, got "
                f"{self.destination_start!r} and {self.source_start!r}"
            )
        if not is_natural(self.length) or not self.length:
            raise ValueError(
                f"Range length must be a positive integer, got {self.length!r}"
            )

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    @property
    def destination_end(self) -> int:
        return self.destination_start + self.length

    @property
    def offset(self) -> int:
        return self.destination_start - self.source_start

    @property
    def is_identity(self) -> bool:
        return self.destination_start == self.source_start

    @classmethod
    def from_triple(cls, triple: Triple) -> "MappingRange":
        destination_start, source_start, length = triple
        return cls(destination_start, source_start, length)

    @classmethod
    def identity(cls, start: int, length: int) -> "MappingRange":
        return cls(start, start, length)

    def to_triple(self) -> Triple:
        return (self.destination_start, self.source_start, self.length)

    def to_json(self) -> JSONDict:
        return {
            "destination": self.destination_start,
            "source": self.source_start,
            "length": self.length,
        }

    @classmethod
    def from_json(cls, json_data: JSONDict) -> "MappingRange":
        if not json_data or any(
            key not in json_data for key in ("destination", "source", "length")
        ):
            raise ValueError("Invalid input for MappingRange.from_json")
        return cls(
            cast(int, json_data["destination"]),
            cast(int, json_data["source"]),
            cast(int, json_data["length"]),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MappingRange):
            return NotImplemented
        return source_key(self) < source_key(other)

    def __repr__(self) -> str:
        return (
            f"<MappingRange [{self.source_start}, {self.source_end}) -> "
            f"{self.destination_start}>"
        )


def source_key(range: MappingRange) -> tuple[int, int, int]:
    return (range.source_start, range.length, range.destination_start)
