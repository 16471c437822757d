"""The corner minimap and the full-screen map view."""

from __future__ import annotations

from collections.abc import Sequence

from .animation import MarkerRing
from .image import Image
from .state import (
    C_BLACK,
    C_DARK_GREY,
    C_DEEP_RED,
    C_GREY,
    FOC_SIZE,
    ID_DOOR,
    ID_FLOOR,
    ID_GRIDS,
    ID_HIDDEN,
    ID_METAL,
    ID_METAL2,
    ID_PIPE,
    ID_SCAFFOLD,
    ID_WALL,
    MAP_ORIGIN_X,
    MAP_ORIGIN_Y,
    MAX_M_H,
    MAX_M_W,
    MINI_H,
    MINI_SIZE,
    MINI_W,
    PADDING,
    WIN_H,
    WIN_W,
    MapLayout,
    Player,
)

_WALLS = frozenset({ID_WALL, ID_METAL, ID_METAL2, ID_GRIDS, ID_SCAFFOLD, ID_PIPE})


def tile_color(value: int) -> int:
    """Map colour of a tile type."""
    if value in _WALLS:
        return C_DARK_GREY
    if value == ID_FLOOR:
        return C_GREY
    if value == ID_DOOR:
        return C_DEEP_RED
    return C_BLACK


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _cell(grid: Sequence[Sequence[int]], x: int, y: int) -> int | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def draw_minimap(
    screen: Image,
    grid: Sequence[Sequence[int]],
    player: Player,
    ring: MarkerRing,
) -> None:
    """Draw the map around the player in the top-left corner, with the direction marker."""
    start_x = player.pos_x * MINI_SIZE - MINI_W / 2
    start_y = player.pos_y * MINI_SIZE - MINI_H / 2
    for i in range(MINI_H):
        py = start_y + i
        y = _trunc_div(int(py), MINI_SIZE)
        row_visible = 0 <= py <= MINI_SIZE * MINI_H
        for j in range(MINI_W):
            px = start_x + j
            x = _trunc_div(int(px), MINI_SIZE)
            color = C_BLACK
            if row_visible and 0 <= px <= MINI_SIZE * MINI_W:
                value = _cell(grid, x, y)
                if value is not None:
                    color = tile_color(value)
            screen.put(j + PADDING, i + PADDING, color)
    frame = ring.find(player.dir_x, player.dir_y).frame
    screen.blit(
        frame,
        MINI_W // 2 + PADDING - frame.width // 2,
        MINI_H // 2 + PADDING - frame.height // 2,
    )


def render_focus_map(
    canvas: Image,
    grid: Sequence[Sequence[int]],
    player: Player,
    layout: MapLayout,
) -> None:
    """Paint the whole map onto ``canvas``, centred on the player if it scrolls."""
    canvas.fill_rect(0, 0, MAX_M_W, MAX_M_H, C_BLACK)
    if layout.dynamic:
        origin_x = MAX_M_W // 2 - int(player.pos_x) * FOC_SIZE
        origin_y = MAX_M_H // 2 - int(player.pos_y) * FOC_SIZE
    else:
        origin_x, origin_y = layout.focus_x, layout.focus_y
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            canvas.fill_rect(
                origin_x + x * FOC_SIZE,
                origin_y + y * FOC_SIZE,
                FOC_SIZE,
                FOC_SIZE,
                tile_color(value),
            )
    layout.focus_rendered = True


def draw_map_screen(
    screen: Image,
    background: Image,
    canvas: Image,
    grid: Sequence[Sequence[int]],
    player: Player,
    layout: MapLayout,
    ring: MarkerRing,
) -> None:
    """Draw the full-screen map view with the player's marker on it."""
    if not layout.focus_rendered:
        render_focus_map(canvas, grid, player, layout)
    screen.blit(background, 0, 0)
    screen.blit(canvas, MAP_ORIGIN_X, MAP_ORIGIN_Y)
    frame = ring.markers[ring.current].frame
    if layout.dynamic:
        screen.blit(frame, WIN_W // 2 - frame.width // 2, WIN_H // 2 - frame.height // 2)
    else:
        screen.blit(
            frame,
            layout.start_x + player.pos_x * FOC_SIZE - frame.width // 2,
            layout.start_y + player.pos_y * FOC_SIZE - frame.height // 2,
        )