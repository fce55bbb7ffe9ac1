"""Wall tiles: their sprites and collision against the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core import SCALE, TILE, Material, Rect, Sprite, WallID

WALL_TEXTURE = "assets/SGQ_Dungeon/grounds_and_walls/walls.png"


def _tile(column: int, row: int) -> Rect:
    return Rect(TILE * column, TILE * row, TILE, TILE)


WALL_TILES: tuple[Rect, ...] = (
    Rect(),
    _tile(3, 0), _tile(1, 2),  # top and bottom
    _tile(1, 0), _tile(3, 2),  # left and right
    _tile(1, 3), _tile(0, 0),  # top outer corners
    _tile(0, 2), _tile(3, 3),  # bottom outer corners
    _tile(3, 1), _tile(2, 2),  # top inner corners
    _tile(2, 0), _tile(1, 1),  # bottom inner corners
    _tile(4, 0), _tile(13, 1),
    _tile(13, 0), _tile(13, 2),
)


def wall_texture_rect(wall_type: WallID | int, material: Material) -> Rect:
    """Region of the wall sheet for a tile kind; stone walls sit ten rows lower."""
    index = int(WallID(wall_type))
    if index >= len(WALL_TILES):
        raise ValueError(f"no wall tile for {WallID(index).name}")
    rect = WALL_TILES[index]
    if material is Material.STONE:
        rect = rect.moved(0, TILE * 10)
    return rect


@dataclass
class Wall:
    wall_type: WallID
    material: Material
    position: tuple[float, float]
    sprite: Sprite = field(init=False)

    def __post_init__(self) -> None:
        x, y = self.position
        self.sprite = Sprite(
            texture=WALL_TEXTURE,
            texture_rect=wall_texture_rect(self.wall_type, self.material),
            position=(x * SCALE[0], y * SCALE[0]),
            origin=(TILE / 2, TILE / 2),
            scale=SCALE,
        )

    def bounds(self) -> Rect:
        """Collision box: the sprite bounds shrunk towards their lower part."""
        box = self.sprite.global_bounds()
        return Rect(
            box.left + TILE * 0.5,
            box.top + TILE * 0.25,
            box.width - TILE,
            box.height - TILE,
        )

    def check_collision(self, player_bounds: Rect) -> bool:
        return self.bounds().intersects(player_bounds)

    def resolve_collision(self, player: Sprite) -> None:
        """Push the player sprite out of the wall along the axis of least overlap."""
        player_box = player.global_bounds()
        px, py = player.position
        box = self.bounds()

        overlap_left = player_box.left + player_box.width - box.left
        overlap_right = box.left + box.width - player_box.left
        overlap_top = player_box.top + player_box.height - box.top
        overlap_bottom = box.top + box.height - player_box.top
        smallest = min(overlap_left, overlap_right, overlap_top, overlap_bottom)

        if smallest == overlap_left:
            player.position = (box.left - player_box.width / 2, py)
        elif smallest == overlap_right:
            player.position = (box.left + box.width + player_box.width / 2, py)
        elif smallest == overlap_top:
            player.position = (px, box.top - player_box.height / 2)
        else:
            player.position = (px, box.top + box.height + player_box.height / 2)

    def drawables(self) -> list[Sprite]:
        return [self.sprite]