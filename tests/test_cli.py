import pytest

from rangemap.__main__ import main
from rangemap.test_builder import (
    EXAMPLE_ALMANAC,
    EXAMPLE_LOWEST,
    EXAMPLE_LOWEST_IN_RANGES,
)


@pytest.fixture
def almanac_file(tmp_path):
    path = tmp_path / "almanac.txt"
    path.write_text(EXAMPLE_ALMANAC)
    return path


def test_lowest(almanac_file, capsys):
    assert main([str(almanac_file)]) == 0
    assert capsys.readouterr().out.split() == [str(EXAMPLE_LOWEST)]


def test_lowest_with_ranges(almanac_file, capsys):
    assert main([str(almanac_file), "--ranges"]) == 0
    assert capsys.readouterr().out.split() == [
        str(EXAMPLE_LOWEST),
        str(EXAMPLE_LOWEST_IN_RANGES),
    ]


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "almanac not found" in capsys.readouterr().err


def test_parse_error(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("seeds: 1\n\nseed-to-soil map:\n1 2\n")
    assert main([str(path)]) == 1
    assert "line 4" in capsys.readouterr().err


def test_unreadable_path(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "cannot read almanac" in capsys.readouterr().err


def test_zero_length_seed_range(tmp_path, capsys):
    path = tmp_path / "almanac.txt"
    path.write_text("seeds: 5 0 7 2\n\na-to-b map:\n1 2 3\n")
    assert main([str(path), "--ranges"]) == 1
    captured = capsys.readouterr()
    assert captured.out.split() == ["0"]
    assert "has no length" in captured.err
