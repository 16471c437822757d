"""Drawing textured wall columns with ceiling and floor."""

from __future__ import annotations

import math

from .image import Image
from .raycast import RayHit
from .state import (
    ID_DOOR,
    ID_GRIDS,
    ID_HIDDEN,
    ID_METAL,
    ID_METAL2,
    ID_PIPE,
    ID_SCAFFOLD,
    ID_WALL,
    WallOrientation,
)

_ORIENTATION_KEYS = {
    WallOrientation.NORTH: "north",
    WallOrientation.SOUTH: "south",
    WallOrientation.EAST: "east",
    WallOrientation.WEST: "west",
}

_BONUS_KEYS = {
    ID_WALL: "wall",
    ID_HIDDEN: "wall",
    ID_DOOR: "door",
    ID_METAL: "metal",
    ID_METAL2: "metal2",
    ID_GRIDS: "grid",
    ID_SCAFFOLD: "scaffold",
    ID_PIPE: "pipe",
}

_ALPHA = 0xFF000000
_RGB = 0x00FFFFFF


def wall_texture_key(orientation: WallOrientation) -> str:
    """Name of the texture used for a wall facing ``orientation``."""
    return _ORIENTATION_KEYS.get(orientation, "north")


def bonus_texture_key(wall_id: int, revealing: bool) -> str:
    """Name of the texture for a tile type; hidden doors show while revealing."""
    if wall_id == ID_HIDDEN and revealing:
        return "door"
    return _BONUS_KEYS.get(wall_id, "wall")


def draw_column(
    screen: Image,
    column: int,
    hit: RayHit,
    texture: Image,
    floor: int,
    ceiling: int,
    mirror: bool,
) -> None:
    """Draw one screen column: ceiling, then the textured wall strip, then floor.

    ``mirror`` flips the texture horizontally, as done for south and west faces.
    Wall pixels replace only the RGB part of the screen pixel.
    """
    height = screen.height
    centre = height // 2
    wall_height = hit.wall_height
    half = int(wall_height) // 2 if math.isfinite(wall_height) else height

    sky_end = centre - wall_height / 2
    y = 0
    while y < sky_end and y < height:
        screen.put(column, y, ceiling)
        y += 1

    start = max(centre - half, 0)
    end = min(centre + half, height)
    offset = centre - half

    fraction = 1 - hit.wall_x if mirror else hit.wall_x
    tex_x = min(max(int(fraction * texture.width), 0), texture.width - 1)

    for y in range(start, end):
        tex_y = int((y - offset) * texture.height / wall_height)
        tex_y = min(max(tex_y, 0), texture.height - 1)
        colour = texture.get(tex_x, tex_y) & _RGB
        if 0 <= column < screen.width:
            current = screen.get(column, y)
            screen.put(column, y, (current & _ALPHA) | colour)

    for y in range(max(end, start), height):
        screen.put(column, y, floor)