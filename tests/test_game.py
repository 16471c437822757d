import math

import pytest

from cubengine.animation import HandAnimation, HandPair, build_marker_ring
from cubengine.game import IMAGE_NAMES, Game
from cubengine.image import Image
from cubengine.state import ID_DOOR, ID_FLOOR, GameState, ParseData

FLOOR = 0x00AA00
CEILING = 0x0000BB
WIDTH = 200
HEIGHT = 100


def _colours():
    return {name: 0x010101 * (index + 1) for index, name in enumerate(IMAGE_NAMES)}


def _images():
    return {name: Image(4, 4, [colour] * 16) for name, colour in _colours().items()}


def _grid():
    return [
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ]


def _make(bonus=False, images=None):
    data = ParseData(
        map=_grid(), map_w=5, map_h=5, start_x=2, start_y=2, start_dir="N",
        floor=FLOOR, ceiling=CEILING,
    )
    hand = HandPair(
        HandAnimation([Image(2, 2) for _ in range(3)]),
        HandAnimation([Image(2, 2) for _ in range(3)]),
    )
    return Game(
        data=data,
        images=_images() if images is None else images,
        ring=build_marker_ring(Image(32 * 24, 32)),
        hand=hand,
        bonus=bonus,
        width=WIDTH,
        height=HEIGHT,
    )


def _start(game, now=100):
    game.key_press("Return")
    assert game.update(now) is True
    game.key_release("Return")
    return now


def test_initial_state():
    game = _make()
    assert game.state is GameState.HOME_SCREEN
    assert (game.player.pos_x, game.player.pos_y) == (2.5, 2.5)
    assert game.closed is False


def test_missing_image_raises():
    images = _images()
    del images["menu"]
    with pytest.raises(ValueError):
        _make(images=images)


def test_on_expose_draws_home_screen():
    game = _make()
    screen = game.on_expose()
    assert screen.get(0, 0) == _colours()["home_screen"]


def test_update_waits_for_frame_interval():
    game = _make()
    game.key_press("Return")
    assert game.update(10) is False
    assert game.state is GameState.HOME_SCREEN


def test_update_stays_on_home_without_enter():
    game = _make()
    assert game.update(100) is False
    assert game.state is GameState.HOME_SCREEN
    assert game.updated_at == 100


def test_enter_starts_game_and_renders_column():
    game = _make()
    _start(game)
    assert game.state is GameState.GAME_SCREEN
    assert game.screen.get(180, 0) == CEILING
    assert game.screen.get(180, HEIGHT - 1) == FLOOR
    assert game.screen.get(180, HEIGHT // 2) == _colours()["north"]


def test_bonus_mode_uses_tile_texture():
    game = _make(bonus=True)
    _start(game)
    assert game.screen.get(180, HEIGHT // 2) == _colours()["wall"]


@pytest.mark.parametrize(
    "key, state, image",
    [("Tab", GameState.INVENTORY, "inventory"), ("m", GameState.MENU, "menu")],
)
def test_toggle_static_screens(key, state, image):
    game = _make()
    now = _start(game)
    game.key_press(key)
    assert game.update(now + 100) is True
    assert game.state is state
    assert game.screen.get(0, 0) == _colours()[image]
    game.key_release(key)
    game.update(now + 200)
    game.key_press(key)
    game.update(now + 300)
    assert game.state is GameState.GAME_SCREEN


def test_game_over_screen_render():
    game = _make()
    game.state = GameState.GAME_OVER
    screen = game.render()
    assert screen.get(1, 1) == _colours()["game_over"]


def test_space_opens_map_view():
    game = _make()
    now = _start(game)
    game.key_press("space")
    game.update(now + 100)
    assert game.state is GameState.MAP_FOCUS
    assert game.layout.focus_rendered is True
    game.key_release("space")
    game.update(now + 200)
    game.key_press("space")
    game.update(now + 300)
    assert game.state is GameState.GAME_SCREEN
    assert game.layout.focus_rendered is False


def test_walking_forward_moves_north():
    game = _make()
    now = _start(game)
    before = game.player.pos_y
    game.key_press("w")
    game.update(now + 100)
    assert game.player.pos_y < before
    assert game.player.pos_x == 2.5


def test_escape_closes_game():
    game = _make()
    game.key_press("Escape")
    assert game.update(100) is False
    assert game.closed is True


def test_e_opens_door_ahead():
    game = _make()
    game.grid[1][2] = ID_DOOR
    now = _start(game)
    game.key_press("e")
    game.update(now + 100)
    assert game.grid[1][2] == ID_FLOOR


def test_mouse_buttons_only_count_in_game():
    game = _make()
    game.mouse_press(1)
    assert game.keys.mouse_1 is False
    _start(game)
    game.mouse_press(1)
    assert game.keys.mouse_1 is True
    game.mouse_release(1)
    assert game.keys.mouse_1 is False


def test_mouse_move_turns_player():
    game = _make()
    game.mouse_move(0, 0)
    assert game.player.dir_x == 0.0
    _start(game)
    game.mouse_move(0, 0)
    assert game.player.dir_x < 0
    assert math.isclose(math.hypot(game.player.dir_x, game.player.dir_y), 1.0)


def test_hand_animates_while_walking():
    game = _make()
    now = _start(game)
    game.key_press("w")
    for tick in range(1, 21):
        game.update(now + tick * 100)
    assert game.hand.plain.current > 0
    assert game.hand.plain.current == game.hand.light.current


def test_bad_start_direction_raises():
    data = ParseData(map=_grid(), start_x=2, start_y=2, start_dir="Q")
    with pytest.raises(ValueError):
        Game(
            data=data,
            images=_images(),
            ring=build_marker_ring(Image(32 * 24, 32)),
            hand=HandPair(HandAnimation([Image(1, 1)]), HandAnimation([Image(1, 1)])),
        )