from .almanac import Almanac, parse_almanac
from .pipeline import Pipeline, feed_forward
from .table import MappingTable, RangeSpec, TableSpec

__all__ = [
    "Almanac",
    "MappingTable",
    "Pipeline",
    "RangeSpec",
    "TableSpec",
    "feed_forward",
    "parse_almanac",
]
