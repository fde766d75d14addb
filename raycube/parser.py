"""Reading a whole .cub scene file: configuration, map grid and checks."""

from __future__ import annotations

import io
import os
from collections.abc import Iterable, Iterator

from .config import parse_config_line, validate_texture_paths
from .grid import parse_map_grid
from .model import Map, MapError
from .validator import verify_map

CONFIG_LINE_COUNT = 6


def skip_empty_lines(lines: Iterable[str]) -> str | None:
    """Return the next line that is not a bare newline, or None at the end."""
    for line in lines:
        if line and not line.startswith("\n"):
            return line
    return None


def parse_config_section(cub_map: Map, lines: Iterable[str]) -> str | None:
    """Read the six configuration lines into cub_map.

    Bare newlines between them are skipped. Returns the first line after
    the configuration that is not a bare newline, or None if the input
    ends first. Pass an iterator to continue reading from where this
    function stopped.
    """
    remaining: Iterator[str] = iter(lines)
    config_count = 0
    if config_count < CONFIG_LINE_COUNT:
        for line in remaining:
            if not line or line.startswith("\n"):
                continue
            parse_config_line(cub_map, line)
            config_count += 1
            if config_count >= CONFIG_LINE_COUNT:
                break
    return skip_empty_lines(remaining)


def check_config_complete(cub_map: Map) -> None:
    """Require both the floor and the ceiling colour to be set."""
    if not cub_map.has_floor or not cub_map.has_ceiling:
        raise MapError("wrong configuration")


def _parse_lines(lines: Iterable[str]) -> Map:
    remaining = iter(lines)
    cub_map = Map()
    first_line = parse_config_section(cub_map, remaining)
    check_config_complete(cub_map)
    parse_map_grid(cub_map, first_line, remaining)
    validate_texture_paths(cub_map)
    verify_map(cub_map)
    return cub_map


def parse_map_text(text: str) -> Map:
    """Parse and validate the contents of a .cub file."""
    return _parse_lines(io.StringIO(text, newline="\n"))


def parse_map(path: str | os.PathLike[str]) -> Map:
    """Parse and validate the .cub file at path."""
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise MapError(f"cannot open file {os.fspath(path)}") from exc
    with handle:
        return _parse_lines(handle)