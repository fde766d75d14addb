"""Command-line entry point: check the arguments, load the scene, open the window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .game import Game
from .model import MapError
from .parser import parse_map
from .player import place_player

PROG = "raycube"
_EXTENSION = ".cub"


def has_cub_extension(filename: str) -> bool:
    """Whether the name ends in .cub and has something before it."""
    return len(filename) > len(_EXTENSION) and filename.endswith(_EXTENSION)


def is_file_readable(filename: str) -> bool:
    """Whether the file can be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


def validate_arguments(argv: Sequence[str]) -> str:
    """Return the single scene file named on the command line."""
    if len(argv) < 1:
        raise ValueError("no .cub file provided")
    if len(argv) > 1:
        raise ValueError("too many arguments")
    return argv[0]


def _validate_file(filename: str) -> None:
    if not has_cub_extension(filename):
        raise ValueError("file must have .cub extension")
    if not is_file_readable(filename):
        raise ValueError(f"could not open file {filename}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the .cub file given in argv; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        filename = validate_arguments(list(argv))
    except ValueError as exc:
        print(f"Error: {exc}")
        print(f"Usage: {PROG} <map.cub>")
        return 1
    try:
        _validate_file(filename)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    try:
        cub_map = parse_map(filename)
        player = place_player(cub_map)
        Game(cub_map, player).run()
    except MapError as exc:
        print(f"Error: {exc}")
        return 1
    except RuntimeError:
        print("Error: failed to initialize window")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())