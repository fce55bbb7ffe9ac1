"""Crystal clumps that the player breaks with the pickaxe."""

from __future__ import annotations

import math
import random
import string
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .core import SCALE, TILE, ClumpRare, Rect, Sprite

PROPS_TEXTURE = "assets/SGQ_Dungeon/props/props.png"

# Sheet position of each appeal, from COMMON to LEGENDARY.
CLUMP_FRAMES: tuple[tuple[int, int], ...] = (
    (TILE * 0, TILE * 4),
    (TILE * 2, TILE * 4),
    (TILE * 1, TILE * 4),
    (TILE * 3, TILE * 4),
    (TILE * 0, TILE * 5),
)

MAX_REACH = 40


@dataclass
class ClumpItem:
    """Outcome of a pickaxe hit; a crystal when ``message`` is "OK"."""

    message: str
    name: str = ""
    cost_mod: float = 0.0
    rare: ClumpRare = ClumpRare.NOTHING
    tex_rare: ClumpRare = ClumpRare.NOTHING
    is_sold: bool = False


def random_name(rng: Any = random) -> str:
    """Between 4 and 12 random capital letters."""
    length = 4 + rng.randrange(9)
    return "".join(string.ascii_uppercase[rng.randrange(26)] for _ in range(length))


def pick_rarity(roll: int, chances: Sequence[int]) -> ClumpRare:
    """Rarity for a roll in 0..99 given ascending thresholds starting at NOTHING."""
    for rarity, threshold in zip(ClumpRare, chances):
        if roll < threshold:
            return rarity
    return ClumpRare.LEGENDARY


def pick_appeal(roll: int, chances: Sequence[int]) -> ClumpRare:
    """Appearance rarity for a roll in 0..99; never NOTHING."""
    for rarity, threshold in zip(list(ClumpRare)[1:], chances):
        if roll < threshold:
            return rarity
    return ClumpRare.LEGENDARY


class Clump(ABC):
    """A breakable clump with a random name, rarity and appearance."""

    rare_chances: tuple[int, ...] = (0, 0, 0, 0, 0)
    tex_chances: tuple[int, ...] = (0, 0, 0, 0)

    def __init__(self, position: tuple[float, float], rng: Any = random) -> None:
        self.rng = rng
        self.name = random_name(rng)
        x, y = position
        self.sprite = Sprite(
            texture=PROPS_TEXTURE,
            position=(x * SCALE[0], y * SCALE[0]),
            origin=(TILE / 2, TILE / 2),
            scale=SCALE,
        )
        self.rare = pick_rarity(rng.randrange(100), self.rare_chances)
        self.texture_rare = pick_appeal(rng.randrange(100), self.tex_chances)
        left, top = CLUMP_FRAMES[self.texture_rare - 1]
        self.sprite.texture_rect = Rect(left, top, TILE, TILE)

    @abstractmethod
    def try_destroy(self, click_pos: tuple[float, float], player: Any) -> ClumpItem:
        """Hit the clump at ``click_pos`` on behalf of ``player``."""

    def drawables(self) -> list[Sprite]:
        return [self.sprite]


class DefaultClump(Clump):
    """The ordinary cave clump."""

    rare_chances = (65, 80, 90, 96, 99)
    tex_chances = (65, 85, 95, 99)

    def try_destroy(self, click_pos: tuple[float, float], player: Any) -> ClumpItem:
        """Break the clump if it was clicked and is in reach.

        ``player`` provides ``position`` and ``bonus_value``; the pickaxe bonus may
        raise the rarity by one step and add to the cost modifier.
        """
        if not self.sprite.global_bounds().contains(*click_pos):
            return ClumpItem("It's not a clump!")

        px, py = player.position
        sx, sy = self.sprite.position
        if math.hypot(px - sx, py - sy) > MAX_REACH:
            return ClumpItem("Clump too far!")

        cost_mod = 1.0
        roll = -50 + self.rng.randrange(52) + player.bonus_value
        if roll > 5 and self.rare is not ClumpRare.LEGENDARY:
            self.rare = ClumpRare(self.rare + 1)
        if roll > 10:
            cost_mod += self.rng.randrange(roll - 10) / 10
        return ClumpItem("OK", self.name, cost_mod, self.rare, self.texture_rare)