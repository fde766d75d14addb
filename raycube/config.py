"""Parsing of the configuration lines at the top of a .cub file."""

from __future__ import annotations

import re

from .model import TEXTURE_LABELS, Map, MapError

_RGB_ERROR = "extra characters in RGB config"
_TEXTURE_ERROR = "extra characters in texture config"

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_PATH_WORD = re.compile(r"[^ \n]*")

_TEXTURE_KEYS = {
    "NO ": "no_path",
    "SO ": "so_path",
    "WE ": "we_path",
    "EA ": "ea_path",
}


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def check_rgb_value(value: int) -> int:
    """Return value if it is a valid colour channel (0-255), else raise MapError."""
    if value < 0 or value > 255:
        raise MapError(f"RGB value out of range: {value}")
    return value


def store_rgb_value(text: str) -> int:
    """Parse one comma-separated colour component."""
    rest = text.lstrip(" ")
    value = _atoi(rest)
    rest = rest.lstrip("0123456789").lstrip(" ")
    if rest and rest[0] not in ",\n":
        raise MapError(f"invalid RGB component: {text!r}")
    return check_rgb_value(value)


def _parse_color_values(text: str) -> tuple[int, int, int]:
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise MapError(f"expected 3 RGB components, got {len(parts)}")
    red, green, blue = (store_rgb_value(part) for part in parts)
    return red, green, blue


def parse_color(line: str) -> tuple[int, int, int]:
    """Parse an ``F`` or ``C`` line into an (r, g, b) tuple."""
    rest = line.lstrip(" ")[2:].lstrip(" ")
    try:
        color = _parse_color_values(rest)
    except MapError as exc:
        raise MapError(_RGB_ERROR) from exc
    _, _, after = rest.partition("\n")
    if after.lstrip(" \n"):
        raise MapError(_RGB_ERROR)
    return color


def store_texture_path(text: str) -> str:
    """Extract a texture path, rejecting anything after it on the line."""
    rest = text.lstrip(" ")
    path = rest.rstrip(" \n")
    word_end = _PATH_WORD.match(rest).end()
    if rest[word_end:].lstrip(" \n"):
        raise MapError(_TEXTURE_ERROR)
    return path


def parse_config_line(cub_map: Map, line: str) -> str | None:
    """Apply one configuration line to the map.

    Returns the identifier that was recognised, or None for a line that
    holds no known identifier (such lines are ignored).
    """
    line = line.lstrip(" ")
    for prefix, attribute in _TEXTURE_KEYS.items():
        if line.startswith(prefix):
            setattr(cub_map, attribute, store_texture_path(line[3:]))
            return prefix.strip()
    if line.startswith("F "):
        cub_map.floor_color = parse_color(line)
        cub_map.has_floor = True
        return "F"
    if line.startswith("C "):
        cub_map.ceiling_color = parse_color(line)
        cub_map.has_ceiling = True
        return "C"
    return None


def validate_texture_paths(cub_map: Map) -> dict[str, str]:
    """Ensure all four texture paths are set and return them by identifier."""
    paths = cub_map.texture_paths
    for label in TEXTURE_LABELS:
        if paths[label] is None:
            raise MapError(f"missing texture path for {label}")
    return {label: paths[label] for label in TEXTURE_LABELS}