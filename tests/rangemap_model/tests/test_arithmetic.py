import pytest

from rangemap.model import (
    OutOfRangeError,
    Relation,
    classify,
    fully_contains,
    intersects,
    map_point,
    split_against,
)
from rangemap.test_builder import r

seed_to_soil = r(52, 50, 48)


class TestClassify:
    @pytest.mark.parametrize(
        "point,relation",
        [
            (0, Relation.RIGHT_OF),
            (49, Relation.RIGHT_OF),
            (50, Relation.CONTAINS),
            (79, Relation.CONTAINS),
            (97, Relation.CONTAINS),
            (98, Relation.LEFT_OF),
            (1000, Relation.LEFT_OF),
        ],
    )
    def test_relation(self, point, relation):
        assert classify(seed_to_soil, point) is relation

    def test_every_point_inside_maps_by_offset(self):
        small = r(7, 3, 5)
        for point in [3, 4, 5, 6, 7]:
            assert classify(small, point) is Relation.CONTAINS
            assert map_point(small, point) == 7 + point - 3

    @pytest.mark.parametrize("point", [0, 1, 2, 8, 9, 100])
    def test_points_outside_are_not_contained(self, point):
        assert classify(r(7, 3, 5), point) is not Relation.CONTAINS


class TestMapPoint:
    def test_maps(self):
        assert map_point(seed_to_soil, 53) == 55
        assert map_point(seed_to_soil, 97) == 99

    @pytest.mark.parametrize("point", [10, 49, 98])
    def test_outside_raises(self, point):
        with pytest.raises(OutOfRangeError, match=str(point)):
            map_point(seed_to_soil, point)

    def test_is_value_error(self):
        assert issubclass(OutOfRangeError, ValueError)


class TestContainment:
    @pytest.mark.parametrize(
        "start,end,expected",
        [
            (50, 98, True),
            (50, 51, True),
            (97, 98, True),
            (49, 60, False),
            (60, 99, False),
            (0, 10, False),
        ],
    )
    def test_fully_contains(self, start, end, expected):
        assert fully_contains(seed_to_soil, start, end) is expected

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            (0, 50, False),
            (0, 51, True),
            (97, 120, True),
            (98, 120, False),
            (60, 70, True),
            (0, 1000, True),
        ],
    )
    def test_intersects(self, start, end, expected):
        assert intersects(seed_to_soil, start, end) is expected


class TestSplitAgainst:
    def test_against_itself(self):
        assert split_against(seed_to_soil, seed_to_soil) == [seed_to_soil]

    def test_identity_against_itself_is_mapped(self):
        query = r(50, 50, 48)
        assert split_against(seed_to_soil, query) == [seed_to_soil]

    @pytest.mark.parametrize(
        "a,b",
        [
            (r(0, 0, 10), r(0, 20, 10)),
            (r(0, 20, 10), r(0, 0, 10)),
            (r(5, 0, 10), r(5, 10, 10)),
        ],
    )
    def test_disjoint(self, a, b):
        assert split_against(a, b) == []

    def test_other_sticks_out_both_sides(self):
        assert split_against(r(100, 10, 5), r(0, 5, 20)) == [
            r(5, 5, 5),
            r(100, 10, 5),
            r(15, 15, 10),
        ]

    def test_other_inside(self):
        assert split_against(r(100, 10, 20), r(0, 15, 5)) == [r(105, 15, 5)]

    def test_partial_overlap_on_the_left(self):
        assert split_against(r(100, 10, 10), r(0, 15, 10)) == [
            r(105, 15, 5),
            r(20, 20, 5),
        ]

    def test_partial_overlap_on_the_right(self):
        assert split_against(r(100, 10, 10), r(0, 5, 10)) == [
            r(5, 5, 5),
            r(100, 10, 5),
        ]

    def test_starting_at_zero(self):
        assert split_against(r(7, 0, 3), r(0, 0, 5)) == [r(7, 0, 3), r(3, 3, 2)]

    def test_pieces_tile_other(self):
        other = r(0, 30, 50)
        pieces = split_against(r(500, 45, 10), other)
        assert pieces[0].source_start == other.source_start
        assert pieces[-1].source_end == other.source_end
        for before, after in zip(pieces, pieces[1:]):
            assert before.source_end == after.source_start
        assert all(piece.length > 0 for piece in pieces)
