"""Keyboard and mouse input: held keys, movement, rotation, doors and screen toggles."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence

from .state import (
    ID_DOOR,
    ID_FLOOR,
    ID_HIDDEN,
    RANGE,
    ST,
    WIN_W,
    GameState,
    Keys,
    MapLayout,
    Player,
)

MOUSE_ROTATION_DIVISOR = 3.5

_KEY_FIELDS = {
    "w": "w",
    "s": "s",
    "a": "a",
    "d": "d",
    "Left": "left",
    "left": "left",
    "Right": "right",
    "right": "right",
    "e": "e",
    "Return": "enter",
    "enter": "enter",
    "space": "space",
    "Tab": "tab",
    "tab": "tab",
    "m": "m",
    "Escape": "esc",
    "esc": "esc",
}

_MOUSE_FIELDS = {1: "mouse_1", 2: "mouse_2", 3: "mouse_3"}


def _set_key(keys: Keys, name: str, down: bool) -> None:
    field_name = _KEY_FIELDS.get(name)
    if field_name is not None:
        setattr(keys, field_name, down)


def key_press(keys: Keys, name: str) -> None:
    """Mark the key called ``name`` as held; unknown keys are ignored."""
    _set_key(keys, name, True)


def key_release(keys: Keys, name: str) -> None:
    """Mark the key called ``name`` as released; unknown keys are ignored."""
    _set_key(keys, name, False)


def _set_button(keys: Keys, state: GameState, button: int, down: bool) -> None:
    if state is not GameState.GAME_SCREEN:
        return
    field_name = _MOUSE_FIELDS.get(button)
    if field_name is not None:
        setattr(keys, field_name, down)


def mouse_press(keys: Keys, state: GameState, button: int) -> None:
    """Record a mouse button going down; only counts while playing."""
    _set_button(keys, state, button, True)


def mouse_release(keys: Keys, state: GameState, button: int) -> None:
    """Record a mouse button going up; only counts while playing."""
    _set_button(keys, state, button, False)


def rotate(player: Player, left: bool, speed: float) -> None:
    """Turn the view direction and camera plane by ``speed`` radians."""
    if left:
        speed = -speed
    cos_s, sin_s = math.cos(speed), math.sin(speed)
    dir_x, dir_y = player.dir_x, player.dir_y
    player.dir_x = dir_x * cos_s - dir_y * sin_s
    player.dir_y = dir_x * sin_s + dir_y * cos_s
    plane_x, plane_y = player.plane_x, player.plane_y
    player.plane_x = plane_x * cos_s - plane_y * sin_s
    player.plane_y = plane_x * sin_s + plane_y * cos_s


def mouse_move(player: Player, state: GameState, x: int) -> None:
    """Turn the player towards the side of the window the pointer moved to."""
    if state is not GameState.GAME_SCREEN:
        return
    speed = player.rot_speed / MOUSE_ROTATION_DIVISOR
    centre = WIN_W // 2
    if x < centre:
        rotate(player, True, speed)
    elif x > centre:
        rotate(player, False, speed)


def _is_floor(grid: Sequence[Sequence[int]], x: float, y: float) -> bool:
    col, row = int(x), int(y)
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return False
    return grid[row][col] == ID_FLOOR


def move(player: Player, grid: Sequence[Sequence[int]], dx: float, dy: float) -> None:
    """Move the player by (dx, dy), each axis separately, stopping at anything but floor."""
    new_x = player.pos_x + dx
    new_y = player.pos_y + dy
    if _is_floor(grid, player.pos_x, new_y + ST) and _is_floor(grid, player.pos_x, new_y - ST):
        player.pos_y = new_y
    if _is_floor(grid, new_x + ST, player.pos_y) and _is_floor(grid, new_x - ST, player.pos_y):
        player.pos_x = new_x


def _open_at(grid: Sequence[MutableSequence[int]], x: float, y: float) -> tuple[int, int] | None:
    col, row = int(x), int(y)
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return None
    if grid[row][col] in (ID_DOOR, ID_HIDDEN):
        grid[row][col] = ID_FLOOR
        return col, row
    return None


def open_door(player: Player, grid: Sequence[MutableSequence[int]]) -> list[tuple[int, int]]:
    """Open doors and hidden doors in front of the player; return the (x, y) tiles opened."""
    angle = math.degrees(math.atan2(player.dir_y, player.dir_x))
    if angle < 0:
        angle += 360
    px, py = player.pos_x, player.pos_y
    targets: list[tuple[float, float]] = []
    if 45 <= angle < 135:
        targets.append((px, py + player.dir_y + RANGE))
    elif 135 <= angle < 225:
        targets.append((px + player.dir_x - RANGE, py))
    if 225 <= angle < 315:
        targets.append((px, py + player.dir_y - RANGE))
    else:
        targets.append((px + player.dir_x + RANGE, py))
    opened = []
    for x, y in targets:
        tile = _open_at(grid, x, y)
        if tile is not None:
            opened.append(tile)
    return opened


def step_movement(keys: Keys, player: Player, grid: Sequence[MutableSequence[int]]) -> None:
    """Apply one tick of the held turning, walking, strafing and door keys."""
    if keys.left:
        rotate(player, True, player.rot_speed)
    if keys.right:
        rotate(player, False, player.rot_speed)
    speed = player.speed
    if keys.w:
        move(player, grid, player.dir_x * speed, player.dir_y * speed)
    if keys.s:
        move(player, grid, -player.dir_x * speed, -player.dir_y * speed)
    if keys.a:
        move(player, grid, -player.plane_x * speed, -player.plane_y * speed)
    if keys.d:
        move(player, grid, player.plane_x * speed, player.plane_y * speed)
    if keys.e or keys.mouse_1:
        open_door(player, grid)


def toggle_tab(keys: Keys, state: GameState) -> GameState:
    """Switch between the game and the inventory once per Tab press."""
    if keys.tab and not keys.tab_pressed:
        keys.tab_pressed = True
        if state is GameState.GAME_SCREEN:
            return GameState.INVENTORY
        if state is GameState.INVENTORY:
            return GameState.GAME_SCREEN
    elif not keys.tab:
        keys.tab_pressed = False
    return state


def toggle_menu(keys: Keys, state: GameState) -> GameState:
    """Switch between the game and the menu once per M press."""
    if keys.m and not keys.m_pressed:
        keys.m_pressed = True
        if state is GameState.GAME_SCREEN:
            return GameState.MENU
        if state is GameState.MENU:
            return GameState.GAME_SCREEN
    elif not keys.m:
        keys.m_pressed = False
    return state


def toggle_map(keys: Keys, state: GameState, layout: MapLayout) -> GameState:
    """Switch between the game and the map view once per Space press."""
    if keys.space and not keys.space_pressed:
        keys.space_pressed = True
        if state is GameState.GAME_SCREEN:
            return GameState.MAP_FOCUS
        if state is GameState.MAP_FOCUS:
            layout.focus_rendered = False
            return GameState.GAME_SCREEN
    elif not keys.space:
        keys.space_pressed = False
    return state


def press_enter(keys: Keys, state: GameState) -> GameState:
    """Leave the home screen for the game while Enter is held."""
    if keys.enter and state is GameState.HOME_SCREEN:
        return GameState.GAME_SCREEN
    return state