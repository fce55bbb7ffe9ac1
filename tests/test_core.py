import pytest

from dungeon_archeology.core import (
    SCALE,
    TILE,
    ClumpRare,
    Rect,
    Sprite,
    WallID,
)


def test_enum_values_fixed_by_layout_format():
    assert WallID(23) is WallID.LEFT_GRIDLOCK
    assert WallID(14) is WallID.DOOR
    assert ClumpRare(5) is ClumpRare.LEGENDARY
    with pytest.raises(ValueError):
        WallID(24)
    with pytest.raises(ValueError):
        ClumpRare(6)


def test_rect_overlap_intersects():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)


def test_rect_contains_edges():
    r = Rect(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(9.9, 9.9)
    assert not r.contains(10, 5)
    assert not r.contains(5, 10)


def test_rect_negative_size_is_normalised():
    r = Rect(10, 10, -10, -10)
    assert r.contains(5, 5)
    assert r.intersects(Rect(2, 2, 4, 4))


def test_rect_moved_keeps_size():
    r = Rect(1, 2, 3, 4)
    moved = r.moved(5, -2)
    assert (moved.width, moved.height) == (r.width, r.height)
    assert (moved.left, moved.top) == (r.left + 5, r.top - 2)
    assert moved.right == r.right + 5


def test_sprite_bounds_with_origin_and_scale():
    sprite = Sprite(
        texture_rect=Rect(0, 0, TILE, TILE),
        position=(100, 100),
        origin=(TILE / 2, TILE / 2),
        scale=SCALE,
    )
    assert sprite.global_bounds() == Rect(84, 84, 32, 32)


def test_sprite_bounds_without_transform_match_rect_size():
    sprite = Sprite(texture_rect=Rect(3, 4, 7, 9), position=(20, 30))
    bounds = sprite.global_bounds()
    assert (bounds.left, bounds.top) == (20, 30)
    assert (bounds.width, bounds.height) == (7, 9)


def test_sprite_rotation_swaps_extent():
    sprite = Sprite(texture_rect=Rect(0, 0, 32, 16), position=(0, 0), rotation=-90)
    bounds = sprite.global_bounds()
    assert bounds.width == pytest.approx(16)
    assert bounds.height == pytest.approx(32)