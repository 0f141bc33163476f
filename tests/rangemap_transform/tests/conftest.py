import pydash
import pytest

from rangemap.model import MappingRange
from rangemap.test_builder import table
from rangemap.transform import Pipeline


@pytest.fixture
def test_points():
    def t_points(pipeline, *cases):
        collapsed = pipeline.collapse()
        for case in cases:
            value, expected, check_collapsed = [
                pydash.get(case, *param) for param in enumerate([None, None, True])
            ]
            assert pipeline.map(value) == expected
            if check_collapsed:
                assert collapsed.apply(value) == expected

    return t_points


@pytest.fixture
def test_cover():
    def t_cover(mapping_table, query, *expected):
        cover = mapping_table.cover(query)
        pieces = [piece for piece, _ in cover]
        if expected:
            assert pieces == list(expected)
        assert pieces[0].source_start == query.source_start
        assert pieces[-1].source_end == query.source_end
        for before, after in zip(pieces, pieces[1:]):
            assert before.source_end == after.source_start
        for piece, mapped in cover:
            for point in (piece.source_start, piece.source_end - 1):
                assert mapping_table.apply(point) == piece.map_point(point)
                assert (mapping_table.map(point) is not None) == mapped

    return t_cover


@pytest.fixture
def two_stage():
    return Pipeline(
        [
            table((100, 0, 10), source="a", destination="b"),
            table((200, 100, 5), source="b", destination="c"),
        ]
    )


@pytest.fixture
def identity():
    return MappingRange.identity
