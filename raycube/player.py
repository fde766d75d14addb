"""Player position, facing, camera rotation and movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .model import MOVE_SPEED, ROTATION_SPEED, Map, MapError

_DIRECTIONS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


def direction_vectors(direction: str) -> tuple[float, float, float, float]:
    """Return (dir_x, dir_y, plane_x, plane_y) for a compass letter."""
    try:
        return _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown direction: {direction!r}") from None


def check_collision(cub_map: Map, x: float, y: float) -> bool:
    """Whether the point (x, y) lies outside the map or inside a wall."""
    map_x = int(x)
    map_y = int(y)
    return not cub_map.in_bounds(map_x, map_y) or cub_map.is_wall(map_x, map_y)


@dataclass
class Player:
    """The viewer: position, facing direction and camera plane."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66

    def set_direction(self, direction: str) -> None:
        """Face N, S, E or W; any other value leaves the facing unchanged."""
        if direction not in _DIRECTIONS:
            return
        self.dir_x, self.dir_y, self.plane_x, self.plane_y = direction_vectors(
            direction
        )

    def rotate(self, direction: int) -> None:
        """Turn the camera one step; 1 turns left, -1 turns right."""
        angle = -ROTATION_SPEED * direction
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def move(
        self,
        cub_map: Map,
        forward: bool = False,
        backward: bool = False,
        strafe_left: bool = False,
        strafe_right: bool = False,
    ) -> bool:
        """Step according to the held movement keys unless a wall is in the way.

        Returns whether the position was updated.
        """
        new_x = self.x
        new_y = self.y
        if forward:
            new_x += self.dir_x * MOVE_SPEED
            new_y += self.dir_y * MOVE_SPEED
        if backward:
            new_x -= self.dir_x * MOVE_SPEED
            new_y -= self.dir_y * MOVE_SPEED
        strafe_x = -self.dir_y
        strafe_y = self.dir_x
        if strafe_right:
            new_x += strafe_x * MOVE_SPEED
            new_y += strafe_y * MOVE_SPEED
        if strafe_left:
            new_x -= strafe_x * MOVE_SPEED
            new_y -= strafe_y * MOVE_SPEED
        if check_collision(cub_map, new_x, new_y):
            return False
        self.x = new_x
        self.y = new_y
        return True


def place_player(cub_map: Map) -> Player:
    """Find the start cell, turn it into floor and return the player there."""
    for y, row in enumerate(cub_map.grid[: cub_map.height]):
        for x, cell in enumerate(row[: cub_map.width]):
            if cell not in _DIRECTIONS:
                continue
            cub_map.player_x = x
            cub_map.player_y = y
            cub_map.player_dir = cell
            player = Player(x=x + 0.5, y=y + 0.5)
            player.set_direction(cell)
            cub_map.grid[y] = row[:x] + "0" + row[x + 1 :]
            return player
    raise MapError("No player found in map")