import pytest

from raycube.grid import pad_grid
from raycube.model import Map, MapError
from raycube.validator import (
    check_column_closed,
    check_map_dimensions,
    check_row_closed,
    flood_fill,
    verify_map,
)


def make_map(rows, player=None):
    width = max(len(row) for row in rows)
    cub_map = Map(grid=pad_grid(rows, width), width=width, height=len(rows))
    if player is not None:
        cub_map.player_x, cub_map.player_y = player
        cub_map.player_dir = cub_map.grid[player[1]][player[0]]
    return cub_map


def test_check_row_closed_returns_wall_ends():
    row = "  1001  "
    start, end = check_row_closed(row, len(row))
    assert row[start] == "1" and row[end] == "1"
    assert row[:start].strip() == "" and row[end + 1:].strip() == ""


@pytest.mark.parametrize("row", ["0111", "1110", "    ", " 10 "])
def test_check_row_closed_rejects_open_rows(row):
    with pytest.raises(MapError, match="map is not surrounded by walls"):
        check_row_closed(row, len(row))


def test_check_column_closed_returns_wall_ends():
    grid = [" 1", "10", "11", "  "]
    start, end = check_column_closed(grid, 1)
    assert grid[start][1] == "1" and grid[end][1] == "1"


def test_check_column_closed_rejects_open_column():
    with pytest.raises(MapError, match="map is not surrounded by walls"):
        check_column_closed(["1", "0", "1", "0"], 0)


def test_check_map_dimensions_empty():
    with pytest.raises(MapError, match="empty or poorly defined map"):
        check_map_dimensions(Map())


def test_check_map_dimensions_too_small():
    with pytest.raises(MapError, match="very small map"):
        check_map_dimensions(make_map(["11", "11"]))


def test_flood_fill_single_cell():
    cub_map = make_map(["111", "1N1", "111"], player=(1, 1))
    assert flood_fill(cub_map, 1, 1) == {(1, 1)}


def test_flood_fill_reaches_every_open_cell():
    rows = ["111111", "1N0001", "101101", "100001", "111111"]
    cub_map = make_map(rows, player=(1, 1))
    visited = flood_fill(cub_map, 1, 1)
    open_cells = {
        (x, y) for y, row in enumerate(rows) for x, c in enumerate(row) if c != "1"
    }
    assert visited == open_cells
    assert all(cub_map.grid[y][x] != "1" for x, y in visited)


def test_flood_fill_does_not_cross_walls():
    rows = ["11111", "1N101", "11111"]
    cub_map = make_map(rows, player=(1, 1))
    visited = flood_fill(cub_map, 1, 1)
    assert (3, 1) not in visited
    assert (1, 1) in visited


def test_flood_fill_rejects_hole():
    cub_map = make_map(["11111", "1N0 1", "11111"], player=(1, 1))
    with pytest.raises(MapError, match="Empty space found inside map"):
        flood_fill(cub_map, 1, 1)


def test_flood_fill_rejects_leaving_grid():
    cub_map = make_map(["111", "N01", "111"], player=(0, 1))
    with pytest.raises(MapError):
        flood_fill(cub_map, 0, 1)


def test_verify_map_valid():
    cub_map = make_map([" 111 ", "11N01", "10001", "11111"], player=(2, 1))
    visited = verify_map(cub_map)
    assert (cub_map.player_x, cub_map.player_y) in visited
    assert all(cub_map.grid[y][x] in "0N" for x, y in visited)


def test_verify_map_open_edge():
    cub_map = make_map(["1111", "1N00", "1111"], player=(1, 1))
    with pytest.raises(MapError, match="map is not surrounded by walls"):
        verify_map(cub_map)


def test_verify_map_inner_space():
    cub_map = make_map(["11111", "1N0 1", "11111"], player=(1, 1))
    with pytest.raises(MapError, match="Empty space found inside map"):
        verify_map(cub_map)


def test_verify_map_too_small():
    with pytest.raises(MapError, match="minimum 3x3"):
        verify_map(make_map(["11", "1N", "11"], player=(1, 1)))