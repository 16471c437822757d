"""Game constants and the plain state records shared by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto

TITLE = "(: Edou ------ Cub3D ------ Johnny :)"
WIN_W = 1200
WIN_H = 600
FPS = 42

C_BLACK = 0x1A1A1A
C_DARK_RED = 0x311F1F
C_DEEP_RED = 0x8C2B36
C_RED = 0xF53F39
C_DARK_GREY = 0x2E2E2E
C_GREY = 0xABABAB
C_TRANSPARENT = 0xFF000000

ST = 0.05
RANGE = 0.04

PADDING = 10
MINI_SIZE = 20
FOC_SIZE = 20
MINI_H = 150
MINI_W = 150
MAX_M_W = 1008
MAX_M_H = 402
MAP_ORIGIN_X = 96
MAP_ORIGIN_Y = 99

ID_FLOOR = 0
ID_WALL = 1
ID_HIDDEN = 2
ID_DOOR = 3
ID_METAL = 4
ID_METAL2 = 5
ID_GRIDS = 6
ID_SCAFFOLD = 7
ID_PIPE = 8
ID_OUT_OF_BOUND = -1

H_DELAY = 5
H_FRAMES = 34
H_W = 420
H_H = 236
H_X = 390
H_Y = 364

PLANE = 0.66


class GameState(Enum):
    HOME_SCREEN = auto()
    GAME_SCREEN = auto()
    GAME_OVER = auto()
    MENU = auto()
    MAP_FOCUS = auto()
    INVENTORY = auto()


class WallOrientation(Enum):
    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()


@dataclass
class Keys:
    """Held-down state of every input the game reacts to."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False
    e: bool = False
    m: bool = False
    tab: bool = False
    esc: bool = False
    enter: bool = False
    space: bool = False
    m_pressed: bool = False
    tab_pressed: bool = False
    enter_pressed: bool = False
    space_pressed: bool = False
    mouse_left: bool = False
    mouse_right: bool = False
    mouse_1: bool = False
    mouse_2: bool = False
    mouse_3: bool = False

    def reset(self) -> None:
        """Release every key and button."""
        for f in fields(self):
            setattr(self, f.name, False)


@dataclass
class Player:
    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    speed: float = 0.1
    rot_speed: float = 0.1
    plane_x: float = 0.0
    plane_y: float = 0.0


@dataclass
class ParseData:
    """What the scene-description parser yields for the engine."""

    map: list[list[int]] = field(default_factory=list)
    map_w: int = 0
    map_h: int = 0
    start_x: int = 0
    start_y: int = 0
    start_dir: str = ""
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: int = 0
    ceiling: int = 0


@dataclass
class MapLayout:
    """Placement of the full-screen map view."""

    width: int
    height: int
    dynamic: bool
    start_x: int
    start_y: int
    focus_x: int = 0
    focus_y: int = 0
    focus_rendered: bool = False


_DIRECTIONS = {
    "N": (0.0, -1.0, PLANE, 0.0),
    "S": (0.0, 1.0, -PLANE, 0.0),
    "E": (1.0, 0.0, 0.0, PLANE),
    "W": (-1.0, 0.0, 0.0, -PLANE),
}


def spawn_player(x: int, y: int, direction: str) -> Player:
    """Place a player in the middle of tile (x, y) facing N, S, E or W."""
    try:
        dir_x, dir_y, plane_x, plane_y = _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown start direction {direction!r}") from None
    return Player(
        pos_x=x + 0.5,
        pos_y=y + 0.5,
        dir_x=dir_x,
        dir_y=dir_y,
        plane_x=plane_x,
        plane_y=plane_y,
    )


def layout_map(grid: list[list[int]], win_w: int = WIN_W, win_h: int = WIN_H) -> MapLayout:
    """Work out where the map view goes; maps too large to fit scroll with the player."""
    height = len(grid)
    width = max((len(row) for row in grid), default=0)
    dynamic = height * FOC_SIZE > MAX_M_H or width * FOC_SIZE > MAX_M_W
    if dynamic:
        return MapLayout(width, height, True, MAP_ORIGIN_X, MAP_ORIGIN_Y)
    return MapLayout(
        width,
        height,
        False,
        start_x=(win_w - width * FOC_SIZE) // 2,
        start_y=(win_h - height * FOC_SIZE) // 2,
        focus_x=MAX_M_W // 2 - (width * FOC_SIZE) // 2,
        focus_y=MAX_M_H // 2 - (height * FOC_SIZE) // 2,
    )