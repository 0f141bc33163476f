from .arithmetic import (
    OutOfRangeError,
    Relation,
    classify,
    fully_contains,
    intersects,
    map_point,
    split_against,
)
from .from_text import MapBlock, ParseError, parse_blocks, parse_range, parse_seeds
from .range import MappingRange
from .tree import RangeNode, RangeTree

__all__ = [
    "MapBlock",
    "MappingRange",
    "OutOfRangeError",
    "ParseError",
    "RangeNode",
    "RangeTree",
    "Relation",
    "classify",
    "fully_contains",
    "intersects",
    "map_point",
    "parse_blocks",
    "parse_range",
    "parse_seeds",
    "split_against",
]
