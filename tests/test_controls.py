import math

import pytest

from cubengine.controls import (
    key_press,
    key_release,
    mouse_move,
    mouse_press,
    mouse_release,
    move,
    open_door,
    press_enter,
    rotate,
    step_movement,
    toggle_map,
    toggle_menu,
    toggle_tab,
)
from cubengine.state import (
    ID_DOOR,
    ID_FLOOR,
    ID_HIDDEN,
    ID_WALL,
    WIN_W,
    GameState,
    Keys,
    Player,
    layout_map,
    spawn_player,
)


def make_grid():
    return [
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ]


@pytest.mark.parametrize(
    "name, attr",
    [("w", "w"), ("Left", "left"), ("Return", "enter"), ("Tab", "tab"), ("Escape", "esc"), ("space", "space")],
)
def test_key_press_and_release(name, attr):
    keys = Keys()
    key_press(keys, name)
    assert getattr(keys, attr) is True
    key_release(keys, name)
    assert getattr(keys, attr) is False


def test_unknown_key_ignored():
    keys = Keys()
    key_press(keys, "F12")
    assert keys == Keys()


def test_mouse_press_only_in_game():
    keys = Keys()
    mouse_press(keys, GameState.HOME_SCREEN, 1)
    assert keys.mouse_1 is False
    mouse_press(keys, GameState.GAME_SCREEN, 1)
    mouse_press(keys, GameState.GAME_SCREEN, 3)
    assert keys.mouse_1 and keys.mouse_3 and not keys.mouse_2
    mouse_release(keys, GameState.GAME_SCREEN, 1)
    assert keys.mouse_1 is False


def test_rotate_preserves_length_and_reverses():
    player = spawn_player(2, 2, "N")
    rotate(player, False, 0.3)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    rotate(player, True, 0.3)
    assert player.dir_x == pytest.approx(0.0, abs=1e-12)
    assert player.dir_y == pytest.approx(-1.0)


def test_rotate_quarter_turn_right_from_north_faces_east():
    player = spawn_player(2, 2, "N")
    rotate(player, False, math.pi / 2)
    east = spawn_player(2, 2, "E")
    assert player.dir_x == pytest.approx(east.dir_x)
    assert player.dir_y == pytest.approx(east.dir_y, abs=1e-12)
    assert player.plane_y == pytest.approx(east.plane_y)


def test_mouse_move_matches_scaled_rotation():
    moved = spawn_player(2, 2, "N")
    expected = spawn_player(2, 2, "N")
    mouse_move(moved, GameState.GAME_SCREEN, 0)
    rotate(expected, True, expected.rot_speed / 3.5)
    assert moved == expected


def test_mouse_move_centre_and_other_states_do_nothing():
    player = spawn_player(2, 2, "N")
    mouse_move(player, GameState.GAME_SCREEN, WIN_W // 2)
    mouse_move(player, GameState.MENU, 0)
    assert player == spawn_player(2, 2, "N")


def test_move_in_free_space():
    grid = make_grid()
    player = spawn_player(2, 2, "N")
    move(player, grid, 0.2, -0.3)
    assert player.pos_x == pytest.approx(2.7)
    assert player.pos_y == pytest.approx(2.2)


def test_move_blocked_by_wall():
    grid = make_grid()
    player = Player(pos_x=1.5, pos_y=1.1)
    move(player, grid, 0.0, -0.1)
    assert player.pos_y == pytest.approx(1.1)


def test_move_blocked_by_door():
    grid = make_grid()
    grid[1][2] = ID_DOOR
    player = Player(pos_x=2.5, pos_y=2.1)
    move(player, grid, 0.0, -0.1)
    assert player.pos_y == pytest.approx(2.1)


def test_walk_forward_then_back_returns():
    grid = make_grid()
    player = spawn_player(2, 2, "N")
    keys = Keys(w=True)
    step_movement(keys, player, grid)
    assert player.pos_y == pytest.approx(2.5 - player.speed)
    keys = Keys(s=True)
    step_movement(keys, player, grid)
    assert player.pos_y == pytest.approx(2.5)
    assert player.pos_x == pytest.approx(2.5)


def test_strafe_left_and_right_cancel():
    grid = make_grid()
    player = spawn_player(2, 2, "E")
    step_movement(Keys(a=True), player, grid)
    assert player.pos_y < 2.5
    step_movement(Keys(d=True), player, grid)
    assert player.pos_y == pytest.approx(2.5)


def test_step_movement_e_opens_door():
    grid = make_grid()
    grid[1][2] = ID_DOOR
    player = spawn_player(2, 2, "N")
    step_movement(Keys(e=True), player, grid)
    assert grid[1][2] == ID_FLOOR


@pytest.mark.parametrize(
    "direction, tile",
    [("N", (2, 1)), ("S", (2, 3)), ("E", (3, 2)), ("W", (1, 2))],
)
def test_open_door_in_front(direction, tile):
    grid = make_grid()
    x, y = tile
    grid[y][x] = ID_DOOR
    opened = open_door(spawn_player(2, 2, direction), grid)
    assert opened == [tile]
    assert grid[y][x] == ID_FLOOR


def test_open_hidden_door():
    grid = make_grid()
    grid[1][2] = ID_HIDDEN
    assert open_door(spawn_player(2, 2, "N"), grid) == [(2, 1)]
    assert grid[1][2] == ID_FLOOR


def test_open_door_leaves_walls():
    grid = make_grid()
    grid[1][2] = ID_WALL
    assert open_door(spawn_player(2, 2, "N"), grid) == []
    assert grid[1][2] == ID_WALL


def test_toggle_tab_is_edge_triggered():
    keys = Keys(tab=True)
    state = toggle_tab(keys, GameState.GAME_SCREEN)
    assert state is GameState.INVENTORY
    assert toggle_tab(keys, state) is GameState.INVENTORY
    keys.tab = False
    assert toggle_tab(keys, state) is GameState.INVENTORY
    assert keys.tab_pressed is False
    keys.tab = True
    assert toggle_tab(keys, state) is GameState.GAME_SCREEN


def test_toggle_menu_round_trip():
    keys = Keys(m=True)
    state = toggle_menu(keys, GameState.GAME_SCREEN)
    assert state is GameState.MENU
    keys.m = False
    toggle_menu(keys, state)
    keys.m = True
    assert toggle_menu(keys, state) is GameState.GAME_SCREEN


def test_toggle_menu_ignored_elsewhere():
    keys = Keys(m=True)
    assert toggle_menu(keys, GameState.INVENTORY) is GameState.INVENTORY


def test_toggle_map_resets_rendering_on_leave():
    layout = layout_map(make_grid())
    layout.focus_rendered = True
    keys = Keys(space=True)
    state = toggle_map(keys, GameState.GAME_SCREEN, layout)
    assert state is GameState.MAP_FOCUS
    assert layout.focus_rendered is True
    keys.space = False
    toggle_map(keys, state, layout)
    keys.space = True
    assert toggle_map(keys, state, layout) is GameState.GAME_SCREEN
    assert layout.focus_rendered is False


def test_press_enter():
    assert press_enter(Keys(enter=True), GameState.HOME_SCREEN) is GameState.GAME_SCREEN
    assert press_enter(Keys(), GameState.HOME_SCREEN) is GameState.HOME_SCREEN
    assert press_enter(Keys(enter=True), GameState.MENU) is GameState.MENU