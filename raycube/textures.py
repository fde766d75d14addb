"""Wall textures: loading image files and choosing one per ray."""

from __future__ import annotations

import os
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .config import validate_texture_paths
from .model import Map, MapError
from .raycast import Ray


@dataclass(frozen=True, eq=False)
class Texture:
    """An image as a (height, width) array of 0xRRGGBB values."""

    pixels: np.ndarray
    path: str | None = None

    def __post_init__(self) -> None:
        shape = self.pixels.shape
        if self.pixels.ndim != 2 or shape[0] <= 0 or shape[1] <= 0:
            raise ValueError(f"invalid texture dimensions: {shape}")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> int:
        """Colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return int(self.pixels[y, x])


@dataclass(frozen=True)
class TextureSet:
    """The four wall textures, one per facing."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture

    def for_ray(self, ray: Ray) -> Texture:
        """Texture for the wall face the ray hit."""
        if ray.side == 0 and ray.dir_x > 0:
            return self.east
        if ray.side == 0 and ray.dir_x < 0:
            return self.west
        if ray.side == 1 and ray.dir_y > 0:
            return self.south
        return self.north


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Read an image file (XPM or any format Pillow knows) as a texture."""
    name = os.fspath(path)
    try:
        with Image.open(name) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    except (OSError, ValueError) as exc:
        raise MapError(f"failed to load texture '{name}'") from exc
    pixels = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    try:
        return Texture(pixels, name)
    except ValueError as exc:
        raise MapError(f"texture with invalid dimensions: {name}") from exc


def load_textures(cub_map: Map) -> TextureSet:
    """Load the NO, SO, WE and EA textures named in the map."""
    paths = validate_texture_paths(cub_map)
    return TextureSet(
        north=load_texture(paths["NO"]),
        south=load_texture(paths["SO"]),
        west=load_texture(paths["WE"]),
        east=load_texture(paths["EA"]),
    )