"""Grid raycasting (DDA) from the player's point of view."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .state import Player, WallOrientation


@dataclass(frozen=True)
class RayHit:
    """Where a screen column's ray met a wall, and how tall that wall strip is."""

    orientation: WallOrientation
    east_west: bool
    perp_wall_dist: float
    wall_x: float
    wall_height: float
    wall_id: int
    map_x: int
    map_y: int


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1.0 / value)


def _tile(grid: Sequence[Sequence[int]], x: int, y: int) -> int:
    if y < 0 or x < 0 or y >= len(grid) or x >= len(grid[y]):
        raise ValueError(f"ray left the map at tile ({x}, {y})")
    return grid[y][x]


def cast_ray(
    player: Player,
    grid: Sequence[Sequence[int]],
    column: int,
    width: int,
    height: int,
) -> RayHit:
    """Cast the ray for screen ``column`` and return the first wall it hits.

    Any tile with a value above zero stops the ray. A ray that leaves the
    grid raises ValueError.
    """
    camera = 2 * column / width - 1
    ray_x = player.dir_x + player.plane_x * camera
    ray_y = player.dir_y + player.plane_y * camera
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _inverse_abs(ray_x)
    delta_y = _inverse_abs(ray_y)

    if ray_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            east_west = True
            orientation = WallOrientation.WEST if ray_x < 0 else WallOrientation.EAST
        else:
            side_y += delta_y
            map_y += step_y
            east_west = False
            orientation = WallOrientation.NORTH if ray_y < 0 else WallOrientation.SOUTH
        wall_id = _tile(grid, map_x, map_y)
        if wall_id > 0:
            break

    if east_west:
        perp = side_x - delta_x
        wall_x = player.pos_y + perp * ray_y
    else:
        perp = side_y - delta_y
        wall_x = player.pos_x + perp * ray_x
    wall_height = math.inf if perp == 0 else height / perp
    wall_x -= math.floor(wall_x)

    return RayHit(
        orientation=orientation,
        east_west=east_west,
        perp_wall_dist=perp,
        wall_x=wall_x,
        wall_height=wall_height,
        wall_id=wall_id,
        map_x=map_x,
        map_y=map_y,
    )


def cast_view(
    player: Player,
    grid: Sequence[Sequence[int]],
    width: int,
    height: int,
) -> list[RayHit]:
    """Cast one ray per screen column, left to right."""
    return [cast_ray(player, grid, column, width, height) for column in range(width)]