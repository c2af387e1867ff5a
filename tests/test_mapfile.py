import pytest

from wirefdf.mapfile import (
    MapFileError,
    count_columns,
    load_map,
    parse_int_prefix,
    parse_map,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7", -7),
        ("+3", 3),
        ("\t\n 12", 12),
        ("10,0xFF", 10),
        ("abc", 0),
        ("--5", 0),
        ("", 0),
    ],
)
def test_parse_int_prefix(text, expected):
    assert parse_int_prefix(text) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("0 1 2\n", 3),
        ("  a   b  ", 2),
        ("", 0),
        ("\n", 0),
        ("1\t2 3", 2),
    ],
)
def test_count_columns(line, expected):
    assert count_columns(line) == expected


def test_parse_map_rows():
    assert parse_map("0 1\n2 3\n") == [[0, 1], [2, 3]]


def test_parse_map_without_trailing_newline():
    assert parse_map("0 1\n2 3") == parse_map("0 1\n2 3\n")


def test_parse_map_ignores_colour_suffix_and_extra_spaces():
    assert parse_map("5,0xFF   -2\n  1 0\n") == [[5, -2], [1, 0]]


def test_parse_map_rows_have_equal_width():
    rows = parse_map("1 2 3\n4 5 6\n7 8 9\n")
    assert len(rows) == 3
    assert all(len(row) == 3 for row in rows)


def test_parse_map_inconsistent_lines():
    with pytest.raises(MapFileError):
        parse_map("0 1 2\n0 1\n")


def test_parse_map_empty():
    with pytest.raises(MapFileError):
        parse_map("")


def test_parse_map_only_blank_lines():
    with pytest.raises(MapFileError):
        parse_map("\n\n")


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 0 1\n0 2 0\n")
    assert load_map(path) == [[0, 0, 1], [0, 2, 0]]


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapFileError):
        load_map(tmp_path / "absent.fdf")