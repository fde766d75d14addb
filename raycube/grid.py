"""Reading and checking the map grid that follows the configuration lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .model import MAX_MAP_HEIGHT, Map, MapError

PLAYER_CHARS = frozenset("NSEW")
_MAP_CHARS = frozenset("01") | PLAYER_CHARS
_BLANK_CHARS = frozenset(" \t")
_EMPTY_LINE_CHARS = frozenset(" \t\n\r")


def is_player_char(c: str) -> bool:
    """Whether c marks the player's start position and facing."""
    return c in PLAYER_CHARS


def is_valid_map_char(c: str) -> bool:
    """Whether c is a floor, wall or player cell."""
    return c in _MAP_CHARS


def is_line_empty(line: str) -> bool:
    """Whether the line holds nothing but whitespace."""
    return all(c in _EMPTY_LINE_CHARS for c in line)


def validate_map_line(line: str) -> str:
    """Check a map row and return it without its trailing newline."""
    if line.endswith("\n"):
        line = line[:-1]
    for c in line:
        if not is_valid_map_char(c) and c not in _BLANK_CHARS:
            raise MapError(f"invalid character '{c}' in map")
    return line


def pad_grid(rows: Iterable[str], width: int) -> list[str]:
    """Pad every row with spaces up to width."""
    return [row.ljust(width) for row in rows]


def _record_player(cub_map: Map, row: str, y: int) -> None:
    for x, c in enumerate(row):
        if not is_player_char(c):
            continue
        if cub_map.player_dir is not None:
            raise MapError("multiple player start positions")
        cub_map.player_x = x
        cub_map.player_y = y
        cub_map.player_dir = c


def _ensure_rest_empty(remaining: Iterator[str]) -> None:
    if any(not is_line_empty(line) for line in remaining):
        raise MapError("empty line found on map")


def parse_map_grid(
    cub_map: Map, first_line: str | None, lines: Iterable[str]
) -> Map:
    """Read the map rows into cub_map, starting with first_line.

    The grid ends at the first blank line; only blank lines may follow it.
    Rows are padded with spaces to the width of the longest one.
    """
    rows: list[str] = []

    def add_row(row: str) -> None:
        if len(rows) >= MAX_MAP_HEIGHT:
            raise MapError(f"map is taller than {MAX_MAP_HEIGHT} rows")
        rows.append(row)
        _record_player(cub_map, row, len(rows) - 1)

    if first_line is not None:
        row = validate_map_line(first_line)
        if row:
            add_row(row)

    remaining = iter(lines)
    for line in remaining:
        if is_line_empty(line):
            _ensure_rest_empty(remaining)
            break
        add_row(validate_map_line(line))

    width = max((len(row) for row in rows), default=0)
    cub_map.height = len(rows)
    cub_map.width = width
    cub_map.grid = pad_grid(rows, width)
    return cub_map