"""Core data model for a parsed .cub scene description."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_MAP_HEIGHT = 1024
ROTATION_SPEED = 0.03
MOVE_SPEED = 0.03
WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900

UNSET_COLOR: tuple[int, int, int] = (-1, -1, -1)
TEXTURE_LABELS: tuple[str, ...] = ("NO", "SO", "WE", "EA")


class MapError(ValueError):
    """Raised when a scene file or its map is invalid."""


@dataclass
class Map:
    """Scene configuration and grid read from a .cub file."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    player_x: int = 0
    player_y: int = 0
    player_dir: str | None = None
    no_path: str | None = None
    so_path: str | None = None
    we_path: str | None = None
    ea_path: str | None = None
    floor_color: tuple[int, int, int] = UNSET_COLOR
    ceiling_color: tuple[int, int, int] = UNSET_COLOR
    has_floor: bool = False
    has_ceiling: bool = False

    @property
    def texture_paths(self) -> dict[str, str | None]:
        """Texture paths keyed by their identifier, in NO, SO, WE, EA order."""
        return {
            "NO": self.no_path,
            "SO": self.so_path,
            "WE": self.we_path,
            "EA": self.ea_path,
        }

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether the cell (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        """Whether the cell (x, y) is inside the grid and holds a wall."""
        if not self.in_bounds(x, y):
            return False
        row = self.grid[y]
        return x < len(row) and row[x] == "1"