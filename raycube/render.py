"""Drawing a frame: ceiling and floor, then textured wall columns."""

from __future__ import annotations

import logging

import numpy as np

from .debug import format_all
from .model import Map
from .player import Player
from .raycast import Ray, Wall, cast_ray, get_tex_x
from .textures import Texture, TextureSet

_log = logging.getLogger(__name__)


def create_trgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into a 0xRRGGBB value."""
    return (r << 16) | (g << 8) | b


def new_frame(width: int, height: int) -> np.ndarray:
    """A black frame of 0xRRGGBB pixels, indexed [row, column]."""
    return np.zeros((height, width), dtype=np.uint32)


def draw_background(frame: np.ndarray, cub_map: Map) -> np.ndarray:
    """Fill the upper half with the ceiling colour and the rest with the floor."""
    height = frame.shape[0]
    half = height // 2
    frame[:half, :] = create_trgb(*cub_map.ceiling_color) & 0xFFFFFFFF
    frame[half:, :] = create_trgb(*cub_map.floor_color) & 0xFFFFFFFF
    return frame


def draw_texture_column(
    frame: np.ndarray,
    texture: Texture,
    player: Player,
    ray: Ray,
    wall: Wall,
    x: int,
) -> np.ndarray:
    """Draw the textured wall slice for screen column x."""
    if wall.line_height <= 0 or wall.draw_end < wall.draw_start:
        return frame
    win_height = frame.shape[0]
    tex_x = get_tex_x(player, ray, wall, texture.width)
    step = texture.height / wall.line_height
    tex_pos = (wall.draw_start - win_height // 2 + wall.line_height // 2) * step
    count = wall.draw_end - wall.draw_start + 1
    positions = tex_pos + step * np.arange(count)
    tex_y = positions.astype(np.int64) % texture.height
    frame[wall.draw_start : wall.draw_end + 1, x] = texture.pixels[tex_y, tex_x]
    return frame


def draw_walls(
    frame: np.ndarray, player: Player, cub_map: Map, textures: TextureSet
) -> np.ndarray:
    """Cast one ray per column and draw the wall each one hits."""
    height, width = frame.shape
    if not cub_map.grid or width < 2:
        return frame
    for x in range(width):
        hit = cast_ray(player, cub_map, x, width, height)
        if hit is None:
            if x == 0:
                _log.debug(format_all(player, cub_map, width, height))
            continue
        ray, wall = hit
        draw_texture_column(frame, textures.for_ray(ray), player, ray, wall, x)
    return frame