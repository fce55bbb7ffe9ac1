"""Shared constants, enumerations and the geometry used by every game object."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, IntEnum

WIDTH = 1600
HEIGHT = 900
FPS = 60
SCALE = (2.0, 2.0)

TILE = 16
TILE_SIZE = (TILE, TILE)

WEAPON_TILE = TILE * 3
WEAPON_TILE_SIZE = (WEAPON_TILE, WEAPON_TILE)

UI_TILE = TILE // 2
UI_TILE_SIZE = (UI_TILE, UI_TILE)

BACKGROUND = (88, 68, 34)


class WallID(IntEnum):
    """Tile kinds used by the room layouts for walls and grounds."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 3
    RIGHT = 4
    TOP_LEFT_1 = 5
    TOP_RIGHT_1 = 6
    BOTTOM_LEFT_1 = 7
    BOTTOM_RIGHT_1 = 8
    TOP_LEFT_2 = 9
    TOP_RIGHT_2 = 10
    BOTTOM_LEFT_2 = 11
    BOTTOM_RIGHT_2 = 12
    GROUND = 13
    DOOR = 14
    HALL_VERTICAL = 15
    HALL_HORIZONTAL = 16
    HALL_TOP = 17
    HALL_BOTTOM = 18
    HALL_LEFT = 19
    HALL_RIGHT = 20
    LEFT_AND_TR = 21
    BOTTOM_AND_TL = 22
    LEFT_GRIDLOCK = 23


class Material(Enum):
    BRICK = 0
    STONE = 1


class ClumpRare(IntEnum):
    NOTHING = 0
    COMMON = 1
    UNCOMMON = 2
    RARE = 3
    EPIC = 4
    LEGENDARY = 5


class UIMode(Enum):
    BASE = 0
    SETTINGS = 1
    UPGRADER = 2
    MUSEUM = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span(self) -> tuple[float, float, float, float]:
        return (
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share an area of positive size."""
        a_left, a_top, a_right, a_bottom = self._span()
        b_left, b_top, b_right, b_bottom = other._span()
        return max(a_left, b_left) < min(a_right, b_right) and max(a_top, b_top) < min(
            a_bottom, b_bottom
        )

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        left, top, right, bottom = self._span()
        return left <= x < right and top <= y < bottom

    def moved(self, dx: float, dy: float) -> Rect:
        return replace(self, left=self.left + dx, top=self.top + dy)


@dataclass
class Sprite:
    """A textured quad placed in the world: a region of a texture with a transform."""

    texture: str | None = None
    texture_rect: Rect = Rect()
    position: tuple[float, float] = (0.0, 0.0)
    origin: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)
    rotation: float = 0.0

    def global_bounds(self) -> Rect:
        """Bounding rectangle of the transformed sprite in world coordinates."""
        width = abs(self.texture_rect.width)
        height = abs(self.texture_rect.height)
        ox, oy = self.origin
        sx, sy = self.scale
        px, py = self.position
        angle = math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)

        xs, ys = [], []
        for lx, ly in ((0.0, 0.0), (width, 0.0), (0.0, height), (width, height)):
            x = (lx - ox) * sx
            y = (ly - oy) * sy
            xs.append(x * cos - y * sin + px)
            ys.append(x * sin + y * cos + py)
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))