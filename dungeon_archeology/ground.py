"""Ground tiles of the laboratory and the cave."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from .core import SCALE, TILE, Material, Rect, Sprite, WallID

GROUND_TEXTURE = "assets/SGQ_Dungeon/grounds_and_walls/grounds.png"


def _tile(column: int, row: int) -> Rect:
    return Rect(TILE * column, TILE * row, TILE, TILE)


GROUND_TILES: tuple[Rect, ...] = (
    _tile(9, 2),
    _tile(10, 0), _tile(9, 3),  # top and bottom
    _tile(8, 1), _tile(11, 2),  # left and right
    _tile(8, 0), _tile(11, 0),  # top outer corners
    _tile(8, 3), _tile(11, 3),  # bottom outer corners
    _tile(6, 2), _tile(5, 2),  # top inner corners
    _tile(6, 1), _tile(5, 1),  # bottom inner corners
    _tile(12, 1), Rect(),
    _tile(0, 1), _tile(2, 3),
    _tile(9, 0), _tile(10, 3),
    _tile(8, 1), _tile(11, 1),
    _tile(4, 1), _tile(5, 3),
    _tile(1, 3),
)

STONE_DECOR = _tile(12, 12)


def ground_texture_rect(tile_type: WallID | int, material: Material, rng: Any = random) -> Rect:
    """Region of the ground sheet; plain stone floor is sometimes swapped for decoration."""
    kind = WallID(tile_type)
    rect = GROUND_TILES[int(kind)]
    if material is Material.STONE:
        if kind is WallID.NONE:
            if rng.randrange(100) < 40:
                rect = STONE_DECOR
        else:
            rect = rect.moved(0, TILE * 12)
    return rect


@dataclass
class Ground:
    tile_type: WallID
    material: Material
    position: tuple[float, float]
    rng: Any = field(default=random, repr=False, compare=False)
    sprite: Sprite = field(init=False)

    def __post_init__(self) -> None:
        x, y = self.position
        self.sprite = Sprite(
            texture=GROUND_TEXTURE,
            texture_rect=ground_texture_rect(self.tile_type, self.material, self.rng),
            position=(x * SCALE[0], y * SCALE[0]),
            origin=(TILE / 2, TILE / 2),
            scale=SCALE,
        )

    def drawables(self) -> list[Sprite]:
        return [self.sprite]