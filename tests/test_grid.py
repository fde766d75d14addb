import pytest

from raycube.grid import (
    is_line_empty,
    is_player_char,
    is_valid_map_char,
    pad_grid,
    parse_map_grid,
    validate_map_line,
)
from raycube.model import MAX_MAP_HEIGHT, Map, MapError


@pytest.mark.parametrize("c", list("NSEW"))
def test_player_chars(c):
    assert is_player_char(c) is True
    assert is_valid_map_char(c) is True


@pytest.mark.parametrize("c", ["0", "1", " ", "X", "n"])
def test_non_player_chars(c):
    assert is_player_char(c) is False


@pytest.mark.parametrize("c,expected", [("0", True), ("1", True), (" ", False), ("2", False)])
def test_is_valid_map_char(c, expected):
    assert is_valid_map_char(c) is expected


@pytest.mark.parametrize("line,expected", [("", True), (" \t\r\n", True), (" 1 \n", False)])
def test_is_line_empty(line, expected):
    assert is_line_empty(line) is expected


def test_validate_map_line_strips_newline():
    assert validate_map_line("1 0N1\n") == "1 0N1"


def test_validate_map_line_keeps_tabs():
    assert validate_map_line("1\t1") == "1\t1"


def test_validate_map_line_rejects_bad_char():
    with pytest.raises(MapError, match="invalid character 'X' in map"):
        validate_map_line("10X1\n")


def test_pad_grid_makes_rows_same_width():
    rows = ["1", "111", "11"]
    padded = pad_grid(rows, 4)
    assert all(len(row) == 4 for row in padded)
    assert [row.rstrip(" ") for row in padded] == rows


def test_parse_map_grid_basic():
    cub_map = parse_map_grid(Map(), "111\n", ["1N1\n", "111\n"])
    assert cub_map.height == 3
    assert cub_map.width == 3
    assert cub_map.grid == ["111", "1N1", "111"]
    assert (cub_map.player_x, cub_map.player_y, cub_map.player_dir) == (1, 1, "N")


def test_parse_map_grid_ragged_rows_padded():
    cub_map = parse_map_grid(Map(), "11111\n", ["1E1\n", "111"])
    assert cub_map.width == len("11111")
    assert all(len(row) == cub_map.width for row in cub_map.grid)
    assert cub_map.grid[1].rstrip() == "1E1"
    assert cub_map.player_dir == "E"


def test_parse_map_grid_trailing_blank_lines_allowed():
    cub_map = parse_map_grid(Map(), "111\n", ["1S1\n", "111\n", "\n", "  \n"])
    assert cub_map.height == 3


def test_parse_map_grid_rejects_content_after_blank_line():
    with pytest.raises(MapError, match="empty line found on map"):
        parse_map_grid(Map(), "111\n", ["1W1\n", "\n", "111\n"])


def test_parse_map_grid_rejects_two_players():
    with pytest.raises(MapError, match="multiple player start positions"):
        parse_map_grid(Map(), "111\n", ["1NS1\n", "111\n"])


def test_parse_map_grid_rejects_invalid_char():
    with pytest.raises(MapError, match="invalid character"):
        parse_map_grid(Map(), "111\n", ["1Q1\n"])


def test_parse_map_grid_without_first_line():
    cub_map = parse_map_grid(Map(), None, [])
    assert cub_map.height == 0
    assert cub_map.width == 0
    assert cub_map.grid == []


def test_parse_map_grid_too_tall():
    lines = ["1\n"] * MAX_MAP_HEIGHT
    with pytest.raises(MapError):
        parse_map_grid(Map(), "1\n", lines)