"""Texture and font loading and sprite drawing on pygame surfaces."""

from __future__ import annotations

from pathlib import Path

import pygame

from .core import Sprite


class Assets:
    """Loads textures and fonts relative to a root directory and caches them."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[tuple[str | None, int], pygame.font.Font] = {}

    def _resolve(self, path: str) -> Path:
        full = self.root / path
        if not full.is_file():
            raise FileNotFoundError(f"asset not found: {full}")
        return full

    def texture(self, path: str) -> pygame.Surface:
        if path not in self._textures:
            self._textures[path] = pygame.image.load(str(self._resolve(path)))
        return self._textures[path]

    def font(self, path: str | None, size: int) -> pygame.font.Font:
        """Return the font at ``path`` (the pygame default when None) in the given size."""
        key = (path, size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            source = None if path is None else str(self._resolve(path))
            self._fonts[key] = pygame.font.Font(source, size)
        return self._fonts[key]


def draw_sprite(surface: pygame.Surface, assets: Assets, sprite: Sprite) -> pygame.Rect | None:
    """Blit a sprite onto the surface; returns the touched area, or None if nothing was drawn."""
    if sprite.texture is None:
        return None
    rect = sprite.texture_rect
    width, height = int(abs(rect.width)), int(abs(rect.height))
    if width == 0 or height == 0:
        return None

    texture = assets.texture(sprite.texture)
    image = pygame.Surface((width, height), pygame.SRCALPHA)
    image.blit(texture, (0, 0), pygame.Rect(int(rect.left), int(rect.top), width, height))

    sx, sy = sprite.scale
    size = (max(1, round(width * abs(sx))), max(1, round(height * abs(sy))))
    image = pygame.transform.scale(image, size)
    if sx < 0 or sy < 0:
        image = pygame.transform.flip(image, sx < 0, sy < 0)
    if sprite.rotation:
        image = pygame.transform.rotate(image, -sprite.rotation)

    bounds = sprite.global_bounds()
    return surface.blit(image, (round(bounds.left), round(bounds.top)))