from .model import MappingRange, RangeTree
from .transform import Almanac, MappingTable, Pipeline, feed_forward, parse_almanac

__all__ = [
    "Almanac",
    "MappingRange",
    "MappingTable",
    "Pipeline",
    "RangeTree",
    "feed_forward",
    "parse_almanac",
]
