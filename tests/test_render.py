import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from dungeon_archeology.core import Rect, Sprite
from dungeon_archeology.render import Assets, draw_sprite

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def assets(tmp_path):
    image = pygame.Surface((4, 4))
    image.fill(RED)
    pygame.image.save(image, str(tmp_path / "red.png"))
    return Assets(tmp_path)


def test_texture_is_loaded_and_cached(assets):
    first = assets.texture("red.png")
    assert first.get_size() == (4, 4)
    assert assets.texture("red.png") is first


def test_missing_texture_raises(assets):
    with pytest.raises(FileNotFoundError):
        assets.texture("missing.png")


def test_missing_font_raises(assets):
    with pytest.raises(FileNotFoundError):
        assets.font("missing.ttf", 12)


def test_default_font_is_cached(assets):
    font = assets.font(None, 20)
    assert assets.font(None, 20) is font
    assert assets.font(None, 30) is not font


def test_draw_sprite_scales_region(assets):
    surface = pygame.Surface((32, 32))
    surface.fill(BLACK)
    sprite = Sprite(texture="red.png", texture_rect=Rect(0, 0, 4, 4), position=(10, 10), scale=(2, 2))
    area = draw_sprite(surface, assets, sprite)
    assert area.size == (8, 8)
    assert surface.get_at((10, 10))[:3] == RED
    assert surface.get_at((17, 17))[:3] == RED
    assert surface.get_at((18, 18))[:3] == BLACK
    assert surface.get_at((9, 9))[:3] == BLACK


def test_draw_sprite_without_texture_draws_nothing(assets):
    surface = pygame.Surface((8, 8))
    surface.fill(BLACK)
    assert draw_sprite(surface, assets, Sprite(texture_rect=Rect(0, 0, 4, 4))) is None
    assert surface.get_at((0, 0))[:3] == BLACK