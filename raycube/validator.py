"""Checks that a parsed map is closed by walls and has no holes."""

from __future__ import annotations

from collections.abc import Sequence

from .model import Map, MapError

_BLANK = " \t"
_NOT_CLOSED = "map is not surrounded by walls"


def _closed_span(cells: Sequence[str]) -> tuple[int, int]:
    start = 0
    end = len(cells) - 1
    while start < len(cells) and cells[start] in _BLANK:
        start += 1
    while end >= 0 and cells[end] in _BLANK:
        end -= 1
    if start > end or cells[start] != "1" or cells[end] != "1":
        raise MapError(_NOT_CLOSED)
    return start, end


def check_row_closed(row: str, width: int) -> tuple[int, int]:
    """Check that the first and last non-blank cells of a row are walls.

    Returns the indices of those two cells.
    """
    return _closed_span(row[:width].ljust(width))


def check_column_closed(grid: Sequence[str], col: int) -> tuple[int, int]:
    """Check that the top and bottom non-blank cells of a column are walls.

    Returns the row indices of those two cells.
    """
    column = [row[col] if col < len(row) else " " for row in grid]
    return _closed_span(column)


def check_map_dimensions(cub_map: Map) -> None:
    """Reject an empty map or one smaller than 3x3."""
    if not cub_map.grid or cub_map.height == 0 or cub_map.width == 0:
        raise MapError("empty or poorly defined map")
    if cub_map.height < 3 or cub_map.width < 3:
        raise MapError("very small map (minimum 3x3)")


def flood_fill(cub_map: Map, start_x: int, start_y: int) -> frozenset[tuple[int, int]]:
    """Visit every cell reachable from the start without crossing walls.

    Returns the visited (x, y) cells. Reaching a blank cell, or leaving
    the grid, means the map is open and raises MapError.
    """
    visited: set[tuple[int, int]] = set()
    pending = [(start_x, start_y)]
    while pending:
        x, y = pending.pop()
        if (x, y) in visited:
            continue
        if not cub_map.in_bounds(x, y):
            raise MapError(_NOT_CLOSED)
        row = cub_map.grid[y]
        cell = row[x] if x < len(row) else " "
        if cell == "1":
            continue
        if cell in _BLANK:
            raise MapError("Empty space found inside map")
        visited.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return frozenset(visited)


def verify_map(cub_map: Map) -> frozenset[tuple[int, int]]:
    """Run every map check and return the cells reachable by the player."""
    check_map_dimensions(cub_map)
    for row in cub_map.grid:
        check_row_closed(row, cub_map.width)
    for col in range(cub_map.width):
        check_column_closed(cub_map.grid, col)
    return flood_fill(cub_map, cub_map.player_x, cub_map.player_y)