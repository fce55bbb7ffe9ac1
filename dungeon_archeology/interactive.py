"""Objects in the lab the player can use with the interact key."""

from __future__ import annotations

from typing import Any

from .core import SCALE, TILE, Rect, Sprite, UIMode

PROPS_TEXTURE = "assets/SGQ_Dungeon/props/props.png"
RAILS_TEXTURE = "assets/SGQ_Dungeon/props/minecart_and_rails.png"


class Interactive:
    """A prop that opens an interface when the player stands on it."""

    interface = UIMode.BASE

    def __init__(self) -> None:
        self.sprite = Sprite()

    def _touches(self, player: Any) -> bool:
        return self.sprite.global_bounds().intersects(player.bounds())

    def interact(self, gui: Any, player: Any) -> None:
        """Switch ``gui`` to this prop's interface if the player overlaps it."""
        if self._touches(player):
            gui.mode = self.interface

    def drawables(self) -> list[Sprite]:
        return [self.sprite]


class Upgrader(Interactive):
    """The workbench that opens the upgrade menu."""

    interface = UIMode.UPGRADER

    def __init__(self) -> None:
        super().__init__()
        self.sprite = Sprite(
            texture=PROPS_TEXTURE,
            texture_rect=Rect(TILE * 12, 0, TILE * 2, TILE * 2),
            position=(TILE * 15, TILE * 4.5),
            scale=SCALE,
        )


class Updater(Interactive):
    """The lever that rebuilds the cave."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite = Sprite(
            texture=PROPS_TEXTURE,
            texture_rect=Rect(TILE * 14, 0, TILE * 2, TILE * 2),
            position=(TILE * 7 * SCALE[0], TILE * 10.5 * SCALE[1]),
            scale=SCALE,
            rotation=-90,
        )

    def interact(self, gui: Any, player: Any) -> None:
        if self._touches(player):
            gui.call_rebuild()


_RAIL_PIECES: tuple[tuple[tuple[int, int], tuple[float, float]], ...] = (
    ((0, 6), (0, 4)),
    ((1, 6), (1, 4)),
    ((2, 6), (2, 4)),
    ((0, 0), (1, 3)),
    ((2, 0), (2, 3)),
    ((1, 1), (3, 3)),
    ((2, 1), (3, 2)),
    ((2, 1), (3, 1)),
    ((3, 0), (3, 0)),
    ((2, 4), (2.75, 2.75)),
    ((1, 4), (3, 1)),
)


class Museum(Interactive):
    """Rails and minecarts leading to the crystal museum."""

    interface = UIMode.MUSEUM
    area_size = (4 * TILE * SCALE[0], 5 * TILE * SCALE[1])
    area_position = (11.5 * TILE * SCALE[0], 6.5 * TILE * SCALE[0])

    def __init__(self) -> None:
        super().__init__()
        ox, oy = self.area_position
        self.sprite = Sprite(
            texture_rect=Rect(0, 0, *self.area_size),
            position=self.area_position,
        )
        self.pieces = [
            Sprite(
                texture=RAILS_TEXTURE,
                texture_rect=Rect(col * TILE, row * TILE, TILE, TILE),
                position=(ox + x * TILE * SCALE[0], oy + y * TILE * SCALE[0]),
                scale=SCALE,
            )
            for (col, row), (x, y) in _RAIL_PIECES
        ]

    def drawables(self) -> list[Sprite]:
        return list(self.pieces)