import pytest

from dungeon_archeology.core import SCALE, TILE, Material, Rect, Sprite, WallID
from dungeon_archeology.wall import WALL_TILES, Wall, wall_texture_rect


def make_player(x, y):
    return Sprite(
        texture_rect=Rect(0, 0, TILE, TILE),
        position=(x, y),
        origin=(TILE / 2, TILE / 2),
        scale=SCALE,
    )


def test_brick_top_tile_from_sheet():
    assert wall_texture_rect(WallID.TOP, Material.BRICK) == Rect(TILE * 3, 0, TILE, TILE)


@pytest.mark.parametrize("wall_type", list(WallID)[: len(WALL_TILES)])
def test_stone_is_ten_rows_below_brick(wall_type):
    brick = wall_texture_rect(wall_type, Material.BRICK)
    stone = wall_texture_rect(wall_type, Material.STONE)
    assert stone.top == brick.top + TILE * 10
    assert (stone.left, stone.width, stone.height) == (brick.left, brick.width, brick.height)


@pytest.mark.parametrize("wall_type", [WallID.HALL_TOP, WallID.LEFT_GRIDLOCK, 99])
def test_unknown_wall_type_raises(wall_type):
    with pytest.raises(ValueError):
        wall_texture_rect(wall_type, Material.BRICK)


def test_wall_sprite_is_scaled_into_world():
    wall = Wall(WallID.LEFT, Material.BRICK, (50, 50))
    assert wall.sprite.position == (50 * SCALE[0], 50 * SCALE[0])
    assert wall.drawables() == [wall.sprite]


def test_bounds_shrink_by_one_tile():
    wall = Wall(WallID.TOP, Material.STONE, (50, 50))
    full = wall.sprite.global_bounds()
    box = wall.bounds()
    assert box.width == full.width - TILE
    assert box.height == full.height - TILE
    assert box.left == full.left + TILE / 2


def test_collision_detected_and_resolved_to_left():
    wall = Wall(WallID.TOP, Material.BRICK, (50, 50))
    player = make_player(80, 96)
    assert wall.check_collision(player.global_bounds())
    wall.resolve_collision(player)
    assert player.position[1] == 96
    assert player.position[0] < 80
    assert not wall.check_collision(player.global_bounds())


def test_collision_resolved_downwards():
    wall = Wall(WallID.TOP, Material.BRICK, (50, 50))
    box = wall.bounds()
    player = make_player(box.left + box.width / 2, box.bottom + 10)
    assert wall.check_collision(player.global_bounds())
    wall.resolve_collision(player)
    assert player.position[0] == box.left + box.width / 2
    assert not wall.check_collision(player.global_bounds())
    assert player.global_bounds().top == pytest.approx(box.bottom)


def test_far_player_does_not_collide():
    wall = Wall(WallID.TOP, Material.BRICK, (50, 50))
    assert not wall.check_collision(make_player(500, 500).global_bounds())