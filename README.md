# cubengine

A small raycasting game engine for tile maps, in the style of classic
grid-based first-person games. It needs nothing outside the standard library.
It does not tie you to a windowing system. You pass in input events and
millisecond timestamps, and it draws into in-memory images that you can show
with any display library you like.

## Modules

- `cubengine.image`: `Image`, a `width` x `height` grid of integer colours
  (`0xAARRGGBB`) with these methods:
  - `get` raises `IndexError` outside the image.
  - `put` ignores points outside the image.
  - `fill_rect` fills a rectangle.
  - `blit` copies another image and skips pixels equal to `TRANSPARENT`
    (`0xFF000000`).
  - `crop` copies out a region.
- `cubengine.state`: the game constants, plus the following:
  - the enums `GameState` and `WallOrientation`;
  - the records `Keys` (with `reset()`), `Player`, `ParseData` and `MapLayout`;
  - `spawn_player(x, y, direction)`, which centres the player on a tile and
    faces `"N"`, `"S"`, `"E"` or `"W"`. Any other direction raises `ValueError`;
  - `layout_map(grid, win_w, win_h)`, which decides where the full map view
    goes. A map that is too large to fit becomes "dynamic" and scrolls with
    the player.
- `cubengine.linereader.read_lines(stream)`: yields the lines of a text
  stream without their newlines. The text after the last newline always
  comes out as a final line.
- `cubengine.raycast`: `cast_ray(player, grid, column, width, height)` and
  `cast_view(player, grid, width, height)` walk the grid (DDA) and return
  `RayHit` records. A record holds the wall orientation, the perpendicular
  distance, the texture coordinate `wall_x`, the wall height on screen, the
  wall id and the tile. Any tile above `0` stops a ray. A ray that leaves the
  grid raises `ValueError`.
- `cubengine.display`:
  - `draw_column(screen, column, hit, texture, floor, ceiling, mirror)` draws
    the ceiling, the textured wall strip and the floor for one column.
  - `wall_texture_key(orientation)` picks a texture name by the side of the
    wall that was hit.
  - `bonus_texture_key(wall_id, revealing)` picks a texture name by tile type.
- `cubengine.animation`:
  - `slice_sprite(sheet, width, height, frames)` cuts frames from a sheet.
  - `build_marker_ring(sheet)` builds a `MarkerRing` of 24 direction arrows
    of 32x32 pixels, one per 15° sector. `MarkerRing.find(dir_x, dir_y)`
    selects the arrow for a direction.
  - `HandAnimation` and `HandPair` animate the player's hand, plain and lit.
    `HandPair.update(moving)` advances it and `HandPair.frame(lit)` gives the
    image to draw.
- `cubengine.minimap`:
  - `tile_color(value)` gives the colour of a tile.
  - `draw_minimap(screen, grid, player, ring)` draws the corner minimap.
  - `render_focus_map(canvas, grid, player, layout)` and
    `draw_map_screen(...)` draw the full-screen map view.
- `cubengine.controls`:
  - `key_press` / `key_release` by key name, and `mouse_press` /
    `mouse_release` for buttons 1–3, which only count while playing.
  - `mouse_move`, `rotate` and `move`, where `move` checks for collisions per
    axis.
  - `step_movement` and `open_door`.
  - the screen toggles `toggle_tab`, `toggle_menu`, `toggle_map` and
    `press_enter`.
- `cubengine.game`: `Game` ties everything together.

## Map cells

Grid values are integers:

| Value | Tile |
| --- | --- |
| `0` | floor |
| `1` | wall |
| `2` | hidden door |
| `3` | door |
| `4` | metal |
| `5` | metal2 |
| `6` | grid |
| `7` | scaffold |
| `8` | pipe |

The player can only walk on `0`. While `e` or mouse button 1 is held during
play, `open_door` turns a door or hidden door in front of the player into
floor. The grid must be enclosed by walls, because rays must not leave it.

## Keys and screens

Key names accepted by `key_press` / `key_release`:

- `w`, `a`, `s`, `d`: move and strafe.
- `Left`, `Right`: turn.
- `e`: open doors.
- `Return`: Enter.
- `space`: Space.
- `Tab`: Tab.
- `m`: M.
- `Escape`: quit.

The lower-case forms `left`, `right`, `enter`, `tab` and `esc` are also
accepted. Unknown names are ignored.

A game starts on the home screen. Enter starts play. Tab toggles the
inventory, `m` toggles the menu, and Space toggles the full map. Escape sets
`Game.closed`. Moving the mouse left or right of the window centre turns the
player.

## Using `Game`

```python
from cubengine.animation import HandAnimation, HandPair, build_marker_ring
from cubengine.game import IMAGE_NAMES, Game
from cubengine.image import Image
from cubengine.state import ParseData

grid = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 3, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]
data = ParseData(map=grid, map_w=5, map_h=4, start_x=1, start_y=2,
                 start_dir="N", floor=0x444444, ceiling=0x8888FF)
images = {name: Image(64, 64) for name in IMAGE_NAMES}
ring = build_marker_ring(Image(32 * 24, 32))
hand = HandPair(HandAnimation([Image(4, 4)]), HandAnimation([Image(4, 4)]))

game = Game(data, images, ring, hand, width=320, height=200)
game.on_expose()            # draws the home screen
game.key_press("Return")
game.update(now=1000)       # milliseconds; returns True when a frame was drawn
frame = game.screen         # an Image of width x height
```

`Game` needs an image for every name in `cubengine.game.IMAGE_NAMES`. If one
is missing, it raises `ValueError`.

- With `bonus=False`, walls use the `north`/`south`/`east`/`west` textures.
- With `bonus=True`, walls are textured by tile type. Hidden doors show the
  `door` texture while `e` or mouse button 1 is held.

`update(now)` runs at most one tick per `1000 // fps` milliseconds.

## What this package does not do

- It does not open a window or read input devices. Your program forwards
  events to `Game` and displays `Game.screen`.
- It does not load image files. Every texture, screen image and sprite sheet
  must be given as an `Image`.
- It does not parse scene description files into a `ParseData`. You fill in
  the map, spawn point, textures and colours yourself. `read_lines` only
  splits a stream into lines.
- It has no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```