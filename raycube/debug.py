"""Human-readable dumps of the scene, player, ray and wall state."""

from __future__ import annotations

from .model import Map
from .player import Player
from .raycast import Ray, Wall


def format_map(cub_map: Map) -> str:
    """Describe texture paths, colours, player start and the grid."""
    lines = ["===== TEXTURE PATHS ====="]
    for label, path in cub_map.texture_paths.items():
        lines.append(f"{label}: {path if path is not None else 'NULL'}")
    floor = cub_map.floor_color
    ceiling = cub_map.ceiling_color
    lines += [
        "\n===== COLORS =====",
        f"Floor:   R:{floor[0]} G:{floor[1]} B:{floor[2]}",
        f"Ceiling: R:{ceiling[0]} G:{ceiling[1]} B:{ceiling[2]}",
        "\n===== PLAYER INFO =====",
        f"Position: ({cub_map.player_x}, {cub_map.player_y})",
        f"Direction: {cub_map.player_dir or ''}",
        "\n===== MAP GRID =====",
        f"Width: {cub_map.width}, Height: {cub_map.height}",
    ]
    if cub_map.grid and cub_map.height > 0:
        for i in range(cub_map.height):
            row = cub_map.grid[i] if i < len(cub_map.grid) else "NULL"
            lines.append(f"[{i:2d}]: {row}")
    else:
        lines.append("Map grid not loaded.")
    return "\n".join(lines) + "\n"


def format_player(player: Player) -> str:
    """Describe the player's position, direction and camera plane."""
    return (
        "===== PLAYER STRUCT =====\n"
        f"Position: x={player.x:.2f}, y={player.y:.2f}\n"
        f"Direction: dir_x={player.dir_x:.2f}, dir_y={player.dir_y:.2f}\n"
        f"Camera Plane: plane_x={player.plane_x:.2f}, plane_y={player.plane_y:.2f}\n"
    )


def format_ray(ray: Ray) -> str:
    """Describe every field of a ray."""
    axis = "X" if ray.side == 0 else "Y"
    return (
        "===== RAY STRUCT =====\n"
        f"Camera X: {ray.camera_x:.2f}\n"
        f"Direction: dir_x={ray.dir_x:.2f}, dir_y={ray.dir_y:.2f}\n"
        f"Map Position: map_x={ray.map_x}, map_y={ray.map_y}\n"
        f"Delta Dist: delta_dist_x={ray.delta_dist_x:.2f}, "
        f"delta_dist_y={ray.delta_dist_y:.2f}\n"
        f"Side Dist: side_dist_x={ray.side_dist_x:.2f}, "
        f"side_dist_y={ray.side_dist_y:.2f}\n"
        f"Step: step_x={ray.step_x}, step_y={ray.step_y}\n"
        f"Side: {ray.side} ({axis})\n"
    )


def format_wall(wall: Wall) -> str:
    """Describe a projected wall slice."""
    return (
        "===== WALL STRUCT =====\n"
        f"Perpendicular Distance: {wall.perp_dist:.2f}\n"
        f"Line Height: {wall.line_height}\n"
        f"Draw Start: {wall.draw_start}\n"
        f"Draw End: {wall.draw_end}\n"
    )


def format_all(
    player: Player,
    cub_map: Map | None,
    win_width: int,
    win_height: int,
    ray: Ray | None = None,
    wall: Wall | None = None,
) -> str:
    """Describe the whole game state, with the ray and wall if given."""
    parts = [
        "\n===== DEBUG ALL STRUCTS =====\n",
        "===== GAME STRUCT =====\n",
        f"Window Size: width={win_width}, height={win_height}\n",
        "\n===== PLAYER =====\n",
        format_player(player),
        "\n===== MAP =====\n",
        format_map(cub_map) if cub_map is not None else "Map not initialized.\n",
    ]
    if ray is not None:
        parts += ["\n", format_ray(ray)]
    if wall is not None:
        parts += ["\n", format_wall(wall)]
    parts.append("============================\n\n")
    return "".join(parts)