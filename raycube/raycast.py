"""Casting one ray per screen column through the map grid (DDA)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .model import Map
from .player import Player


@dataclass
class Ray:
    """State of a single ray walked through the grid."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side: int = 0


@dataclass
class Wall:
    """Projected wall slice for one screen column."""

    perp_dist: float = 0.0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


def init_ray(player: Player, x: int, win_width: int) -> Ray:
    """Build the ray for screen column x of a window win_width pixels wide."""
    if win_width < 2:
        raise ValueError(f"window width must be at least 2, got {win_width}")
    camera_x = 2 * x / (win_width - 1) - 1
    return Ray(
        camera_x=camera_x,
        dir_x=player.dir_x + player.plane_x * camera_x,
        dir_y=player.dir_y + player.plane_y * camera_x,
        map_x=int(player.x),
        map_y=int(player.y),
    )


def calc_step_and_dist(ray: Ray, player: Player) -> bool:
    """Set the ray's step directions and initial side distances.

    Returns False for a ray parallel to an axis, which is not cast.
    """
    if ray.dir_x == 0 or ray.dir_y == 0:
        return False
    ray.delta_dist_x = abs(1 / ray.dir_x)
    ray.delta_dist_y = abs(1 / ray.dir_y)
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.x) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.y) * ray.delta_dist_y
    return True


def perform_dda(ray: Ray, cub_map: Map) -> bool:
    """Walk the ray cell by cell until it hits a wall.

    Returns False if the ray leaves the grid first.
    """
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if not cub_map.in_bounds(ray.map_x, ray.map_y):
            return False
        if cub_map.is_wall(ray.map_x, ray.map_y):
            return True


def calc_wall(ray: Ray, player: Player, win_height: int) -> Wall | None:
    """Project the wall the ray hit; None if it lies at or behind the camera."""
    if ray.side == 0:
        perp_dist = (ray.map_x - player.x + (1 - ray.step_x) // 2) / ray.dir_x
    else:
        perp_dist = (ray.map_y - player.y + (1 - ray.step_y) // 2) / ray.dir_y
    if perp_dist <= 0:
        return None
    line_height = int(win_height / perp_dist)
    half = win_height // 2
    draw_start = max(-(line_height // 2) + half, 0)
    draw_end = min(line_height // 2 + half, win_height - 1)
    return Wall(
        perp_dist=perp_dist,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
    )


def cast_ray(
    player: Player, cub_map: Map, x: int, win_width: int, win_height: int
) -> tuple[Ray, Wall] | None:
    """Cast the ray for column x; None when nothing drawable was hit."""
    if not cub_map.grid:
        return None
    ray = init_ray(player, x, win_width)
    if not calc_step_and_dist(ray, player):
        return None
    if not perform_dda(ray, cub_map):
        return None
    wall = calc_wall(ray, player, win_height)
    if wall is None:
        return None
    return ray, wall


def get_tex_x(player: Player, ray: Ray, wall: Wall, tex_width: int) -> int:
    """Column of the texture that the ray hit."""
    if ray.side == 0:
        wall_x = player.y + wall.perp_dist * ray.dir_y
    else:
        wall_x = player.x + wall.perp_dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * float(tex_width))
    if (ray.side == 0 and ray.dir_x < 0) or (ray.side == 1 and ray.dir_y > 0):
        tex_x = tex_width - tex_x - 1
    return tex_x