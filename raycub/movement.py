"""Keyboard handling and player movement with wall collision."""

from __future__ import annotations

import math

from raycub.model import GameMap, GameState, Key, Vec2

_KEY_FIELDS = {
    Key.W: "w",
    Key.A: "a",
    Key.S: "s",
    Key.D: "d",
    Key.LEFT: "left",
    Key.RIGHT: "right",
}


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


def _field_for(keycode: int) -> str | None:
    try:
        return _KEY_FIELDS.get(Key(keycode))
    except ValueError:
        return None


def key_press(state: GameState, keycode: int) -> None:
    """Record a pressed key; Escape raises QuitRequested."""
    if keycode == Key.ESC:
        raise QuitRequested
    name = _field_for(keycode)
    if name is not None:
        setattr(state.keys, name, True)


def key_release(state: GameState, keycode: int) -> None:
    """Record a released key."""
    name = _field_for(keycode)
    if name is not None:
        setattr(state.keys, name, False)


def is_valid_position(game_map: GameMap, x: float, y: float) -> bool:
    """Tell whether the grid cell holding (x, y) exists and is not a wall."""
    map_x = int(x)
    map_y = int(y)
    if map_x < 0 or map_y < 0:
        return False
    row = game_map.row(map_y)
    if row is None or map_x >= len(row):
        return False
    return row[map_x] != "1"


def _rotate(vec: Vec2, cos_a: float, sin_a: float) -> Vec2:
    return Vec2(vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a)


def rotate_player(state: GameState, direction: int) -> None:
    """Turn the view and camera plane by rot_speed times direction."""
    angle = state.rot_speed * direction
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    player = state.player
    player.dir = _rotate(player.dir, cos_a, sin_a)
    player.plane = _rotate(player.plane, cos_a, sin_a)


def move_player(state: GameState, move_x: float, move_y: float) -> None:
    """Move the player, testing each axis separately so walls can be slid along."""
    player = state.player
    new_x = player.pos.x + move_x * state.move_speed
    new_y = player.pos.y + move_y * state.move_speed
    if is_valid_position(state.game_map, new_x, player.pos.y):
        player.pos = Vec2(new_x, player.pos.y)
    if is_valid_position(state.game_map, player.pos.x, new_y):
        player.pos = Vec2(player.pos.x, new_y)


def movement_vector(state: GameState) -> tuple[float, float]:
    """Sum the moves asked for by the held W, A, S and D keys."""
    keys = state.keys
    direction = state.player.dir
    move_x = 0.0
    move_y = 0.0
    if keys.w:
        move_x += direction.x
        move_y += direction.y
    if keys.s:
        move_x -= direction.x
        move_y -= direction.y
    if keys.a:
        move_x += direction.y
        move_y -= direction.x
    if keys.d:
        move_x -= direction.y
        move_y += direction.x
    return move_x, move_y


def update_player_movement(state: GameState) -> None:
    """Apply one frame of movement and rotation from the held keys."""
    move_x, move_y = movement_vector(state)
    if move_x != 0 or move_y != 0:
        move_player(state, move_x, move_y)
    if state.keys.left:
        rotate_player(state, -1)
    if state.keys.right:
        rotate_player(state, 1)