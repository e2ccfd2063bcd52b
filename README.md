# raycub

`raycub` holds the game state of a grid-based raycasting engine. It tracks the
player's position, view direction and camera plane, turns key presses into
movement, and moves the player across a wall map with collision checks. It also
ships a few small text utilities.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The game model

`raycub.model` defines the data the engine works on:

- `Vec2`: an immutable 2D vector (`x`, `y`).
- `Color`: an immutable RGB colour (`r`, `g`, `b`).
- `WallFace`: the side of a wall that a ray hit (`NORTH`, `SOUTH`, `EAST`, `WEST`).
- `Key`: the X11 key codes the engine responds to (`W`, `A`, `S`, `D`, `ESC`,
  `LEFT`, `RIGHT`).
- `GameMap`: a grid of row strings. `GameMap.from_lines(rows)` builds one, with
  the width taken from the longest row. `GameMap.row(y)` returns a row, or
  `None` when `y` lies outside the map.
- `Player`: position, view direction and camera plane, each a `Vec2`.
- `KeyState`: which control keys are currently held down.
- `GameState`: the map, the player, the held keys, floor and ceiling colours,
  the movement and rotation speeds (both `0.03` by default) and the window size
  (1024 × 768 by default).

In the map, `'1'` marks a wall. Every other character can be walked through.

## Movement

`raycub.movement` turns key events into player motion:

```python
from raycub.model import GameMap, GameState, Key, Player, Vec2
from raycub.movement import key_press, key_release, update_player_movement

game_map = GameMap.from_lines([
    "11111",
    "10001",
    "10001",
    "11111",
])
player = Player(pos=Vec2(2.5, 2.5), dir=Vec2(0.0, -1.0), plane=Vec2(0.66, 0.0))
state = GameState(game_map=game_map, player=player)

key_press(state, Key.W)
update_player_movement(state)          # call once per frame
key_release(state, Key.W)
```

- `key_press(state, keycode)` and `key_release(state, keycode)` set or clear a
  held key; other key codes are ignored. Pressing Escape raises
  `QuitRequested`.
- `movement_vector(state)` adds up the forward, backward and strafe directions
  of the held W, A, S and D keys and returns `(move_x, move_y)`.
- `move_player(state, move_x, move_y)` scales the move by `move_speed` and
  checks each axis for collisions on its own, so the player slides along walls.
- `rotate_player(state, direction)` turns the view direction and the camera
  plane together by `rot_speed × direction` (`-1` turns left, `1` turns right).
- `update_player_movement(state)` applies one frame: the move from the held
  keys, then the rotation from Left and Right.
- `is_valid_position(game_map, x, y)` tells whether the cell holding the point
  exists in the map and is not a wall.

## Text utilities

- `raycub.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower` (each takes a one-character string or an integer
  code), `atoi` (leading integer of a string, 0 if there is none), `itoa`, and
  `check_base` (the radix of a digit alphabet, or 0 if it is unusable).
- `raycub.strings`: `split` (on a single character, dropping empty pieces),
  `trim`, `substring`, `join`, `map_indexed` and `iter_indexed`.
- `raycub.search`: `find_char`, `rfind_char`, `find_bounded`, `compare_n`,
  `bounded_copy`, `bounded_concat`, `find_byte` and `compare_bytes`. The
  searches return an index or `None`; the bounded copies return the text and
  the length the full result would have had.
- `raycub.printf`: `render(fmt, *args)` expands the `%c %s %p %d %i %u %x %X %%`
  conversions and returns the text; `%d`, `%u`, `%x` and `%X` wrap to 32 bits,
  `%s` of `None` gives `(null)`, `%p` of `None` or 0 gives `(nil)`, and missing
  arguments raise `TypeError`. `printf(fmt, *args, stream=None)` writes the
  result (to stdout by default) and returns its length. `put_char`, `put_str`,
  `put_endl` and `put_nbr` write single values.
- `raycub.lines`: `LineReader(stream, buffer_size=128)` reads lines, newline
  included, from a text or binary stream, through `read_line()` (which returns
  `None` at the end) or by iterating over it. `get_next_line(stream)` keeps a
  reader per stream between calls; `get_next_line(None)` discards all buffered
  data.

## What this package does not do

`raycub` has no map-file reader: maps are built from rows you supply, and the
player is not placed from a marker in the map. It does no raycasting or
drawing, opens no window, loads no textures and has no command to start a
game. It covers the state, the input handling and the movement that a game
loop would drive.