import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .range import MappingRange


class OutOfRangeError(ValueError):
    pass


class Relation(enum.Enum):
    # Named after where the range sits, seen from the point.
    LEFT_OF = "left_of"
    RIGHT_OF = "right_of"
    CONTAINS = "contains"


def classify(range: "MappingRange", point: int) -> Relation:
    if point < range.source_start:
        return Relation.RIGHT_OF
    if point >= range.source_end:
        return Relation.LEFT_OF
    return Relation.CONTAINS


def map_point(range: "MappingRange", point: int) -> int:
    if classify(range, point) is not Relation.CONTAINS:
        raise OutOfRangeError(f"Query {point} falls outside of range {range!r}")
    return range.destination_start + (point - range.source_start)


def fully_contains(range: "MappingRange", start: int, end: int) -> bool:
    """Whether the half-open window ``[start, end)`` lies inside ``range``."""
    return range.source_start <= start and end <= range.source_end


def intersects(range: "MappingRange", start: int, end: int) -> bool:
    return range.source_start < end and start < range.source_end


def split_against(
    range: "MappingRange", other: "MappingRange"
) -> list["MappingRange"]:
    """
    Cut ``other`` at every boundary of either range and send each piece
    through ``range``.

    Pieces inside ``range`` get its destination, the rest of ``other``
    passes through unchanged. When the two ranges do not touch there is
    nothing to split and the result is empty.
    """
    from .range import MappingRange

    if not intersects(range, other.source_start, other.source_end):
        return []
    critical_points = sorted(
        {
            0,
            range.source_start,
            range.source_end,
            other.source_start,
            other.source_end,
        }
    )
    pieces = []
    for start, end in zip(critical_points, critical_points[1:]):
        if end <= start or not fully_contains(other, start, end):
            continue
        if fully_contains(range, start, end):
            destination = map_point(range, start)
        else:
            destination = start
        pieces.append(MappingRange(destination, start, end - start))
    return pieces
