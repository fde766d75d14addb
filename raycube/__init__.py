"""Textured raycasting maze explorer for .cub scene files."""

__version__ = "0.1.0"