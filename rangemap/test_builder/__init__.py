# type: ignore

from rangemap.model import MappingRange
from rangemap.transform import MappingTable, parse_almanac

EXAMPLE_ALMANAC = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

# seed 79, 14, 55 and 13 end up at these locations
EXAMPLE_LOCATIONS = [82, 43, 86, 35]
EXAMPLE_LOWEST = 35
EXAMPLE_LOWEST_IN_RANGES = 46


def r(destination, source, length):
    return MappingRange(destination, source, length)


def table(*triples, source="a", destination="b"):
    return MappingTable.from_triples(source, destination, triples)


def example_almanac():
    return parse_almanac(EXAMPLE_ALMANAC)


def brute_force_map(ranges, point):
    for range in ranges:
        if range.source_start <= point < range.source_end:
            return range.destination_start + point - range.source_start
    return None
