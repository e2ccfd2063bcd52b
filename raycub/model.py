"""Core data types: vectors, colours, the map grid and the game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional

DEFAULT_WIN_WIDTH = 1024
DEFAULT_WIN_HEIGHT = 768

MINIMAP_SCALE = 10
MINIMAP_OFFSET_X = 25
MINIMAP_OFFSET_Y = 25
MINIMAP_RAY_COUNT = 20
MINIMAP_RAY_LENGTH = 50

COLOR_WALL = 0xFFFFFF
COLOR_FLOOR = 0x404040
COLOR_PLAYER = 0xFF0000
COLOR_BORDER = 0x808080
COLOR_RAY = 0x00FF00

MOVE_SPEED = 0.03
ROT_SPEED = 0.03


@dataclass(frozen=True)
class Vec2:
    """A 2D point or direction with floating point components."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in the range 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0


class WallFace(IntEnum):
    """The face of a wall block that a ray hit."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


class Key(IntEnum):
    """X11 key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307
    LEFT = 65361
    RIGHT = 65363


@dataclass
class GameMap:
    """A grid of map rows; '1' is a wall, anything else can be walked on."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from its rows; the width is that of the longest row."""
        grid = list(lines)
        width = max((len(row) for row in grid), default=0)
        return cls(grid=grid, width=width, height=len(grid))

    def row(self, y: int) -> Optional[str]:
        """Return row ``y``, or None when it lies outside the map."""
        if 0 <= y < min(self.height, len(self.grid)):
            return self.grid[y]
        return None


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos: Vec2 = field(default_factory=Vec2)
    dir: Vec2 = field(default_factory=Vec2)
    plane: Vec2 = field(default_factory=Vec2)


@dataclass
class KeyState:
    """Which of the control keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False


@dataclass
class GameState:
    """Everything the game loop needs to update the player each frame."""

    game_map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)
    keys: KeyState = field(default_factory=KeyState)
    floor: Color = field(default_factory=Color)
    ceiling: Color = field(default_factory=Color)
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED
    width: int = DEFAULT_WIN_WIDTH
    height: int = DEFAULT_WIN_HEIGHT