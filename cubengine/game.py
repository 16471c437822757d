"""The game object: owns the state, reacts to input and renders frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import controls
from .animation import HandPair, MarkerRing
from .display import bonus_texture_key, draw_column, wall_texture_key
from .image import Image
from .minimap import draw_map_screen, draw_minimap
from .raycast import cast_ray
from .state import (
    FPS,
    MAX_M_H,
    MAX_M_W,
    WIN_H,
    WIN_W,
    GameState,
    Keys,
    MapLayout,
    ParseData,
    Player,
    WallOrientation,
    layout_map,
    spawn_player,
)

SCREEN_IMAGES = ("home_screen", "game_over", "menu", "map_focus", "inventory")
FACE_TEXTURES = ("north", "south", "east", "west")
TILE_TEXTURES = ("wall", "door", "grid", "pipe", "scaffold", "metal", "metal2")
IMAGE_NAMES = SCREEN_IMAGES + FACE_TEXTURES + TILE_TEXTURES

_STATIC_SCREENS = {
    GameState.INVENTORY: "inventory",
    GameState.MENU: "menu",
    GameState.GAME_OVER: "game_over",
}

_MIRRORED = frozenset({WallOrientation.SOUTH, WallOrientation.WEST})


@dataclass
class Game:
    """A running game built from parsed scene data and its loaded images.

    ``images`` maps every name in IMAGE_NAMES to an image. With ``bonus`` set,
    walls are textured by tile type instead of by the side they face.
    """

    data: ParseData
    images: dict[str, Image]
    ring: MarkerRing
    hand: HandPair
    bonus: bool = False
    width: int = WIN_W
    height: int = WIN_H
    fps: int = FPS
    updated_at: int = 0
    screen: Image = field(init=False)
    canvas: Image = field(init=False)
    layout: MapLayout = field(init=False)
    player: Player = field(init=False)
    keys: Keys = field(init=False)
    state: GameState = field(init=False)
    closed: bool = field(init=False)

    def __post_init__(self) -> None:
        missing = [name for name in IMAGE_NAMES if name not in self.images]
        if missing:
            raise ValueError(f"missing images: {', '.join(missing)}")
        if self.fps <= 0:
            raise ValueError(f"invalid frame rate {self.fps}")
        self.screen = Image(self.width, self.height)
        self.canvas = Image(MAX_M_W, MAX_M_H)
        self.layout = layout_map(self.data.map, self.width, self.height)
        self.player = spawn_player(self.data.start_x, self.data.start_y, self.data.start_dir)
        self.keys = Keys()
        self.state = GameState.HOME_SCREEN
        self.closed = False

    @property
    def grid(self) -> list[list[int]]:
        return self.data.map

    def handle_keys(self) -> None:
        """Apply the held keys for one tick: quitting, screen changes and movement."""
        if self.keys.esc:
            self.closed = True
            return
        self.state = controls.press_enter(self.keys, self.state)
        if self.state is GameState.HOME_SCREEN:
            return
        self.state = controls.toggle_tab(self.keys, self.state)
        self.state = controls.toggle_map(self.keys, self.state, self.layout)
        self.state = controls.toggle_menu(self.keys, self.state)
        if self.state is GameState.GAME_SCREEN:
            controls.step_movement(self.keys, self.player, self.grid)

    def update(self, now: int) -> bool:
        """Run one tick if a frame interval has passed since the last; return whether it rendered.

        ``now`` is a timestamp in milliseconds.
        """
        if now - self.updated_at < 1000 // self.fps:
            return False
        self.updated_at = now
        self.handle_keys()
        if self.closed or self.state is GameState.HOME_SCREEN:
            return False
        self.render()
        return True

    def _draw_world(self) -> None:
        revealing = self.keys.e or self.keys.mouse_1
        for column in range(self.width):
            hit = cast_ray(self.player, self.grid, column, self.width, self.height)
            if self.bonus:
                texture = self.images[bonus_texture_key(hit.wall_id, revealing)]
                mirror = False
            else:
                texture = self.images[wall_texture_key(hit.orientation)]
                mirror = hit.orientation in _MIRRORED
            draw_column(
                self.screen, column, hit, texture, self.data.floor, self.data.ceiling, mirror
            )

    def _draw_hand(self) -> None:
        keys = self.keys
        self.hand.update(keys.w or keys.a or keys.s or keys.d)
        image, x, y = self.hand.frame(keys.e or keys.mouse_1)
        self.screen.blit(image, x, y)

    def render(self) -> Image:
        """Draw the current screen for the game state and return it."""
        if self.state is GameState.GAME_SCREEN:
            self._draw_world()
            draw_minimap(self.screen, self.grid, self.player, self.ring)
            self._draw_hand()
        elif self.state is GameState.MAP_FOCUS:
            draw_map_screen(
                self.screen,
                self.images["map_focus"],
                self.canvas,
                self.grid,
                self.player,
                self.layout,
                self.ring,
            )
        elif self.state in _STATIC_SCREENS:
            self.screen.blit(self.images[_STATIC_SCREENS[self.state]], 0, 0)
        return self.screen

    def on_expose(self) -> Image:
        """Redraw the home screen when the window becomes visible."""
        self.screen.blit(self.images["home_screen"], 0, 0)
        return self.screen

    def key_press(self, name: str) -> None:
        controls.key_press(self.keys, name)

    def key_release(self, name: str) -> None:
        controls.key_release(self.keys, name)

    def mouse_press(self, button: int) -> None:
        controls.mouse_press(self.keys, self.state, button)

    def mouse_release(self, button: int) -> None:
        controls.mouse_release(self.keys, self.state, button)

    def mouse_move(self, x: int, y: int) -> None:
        controls.mouse_move(self.player, self.state, x)