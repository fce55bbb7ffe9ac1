"""The player character: movement, walk animation and the pickaxe."""

from __future__ import annotations

import math
from collections.abc import Collection, Iterable
from enum import Enum, IntEnum, auto
from typing import Any

from .core import SCALE, TILE, WEAPON_TILE, Rect, Sprite

CHARACTER_TEXTURE = "assets/SGQ_Dungeon/characters/main/elf.png"
WEAPON_TEXTURE = "assets/SGQ_Dungeon/weapons_and_projectiles/weapons_animated.png"

# (upgrade cost, bonus value) for each pickaxe level.
PICKAXE_UPGRADES: tuple[tuple[int, int], ...] = (
    (500, 2),
    (800, 5),
    (1200, 8),
    (2100, 13),
    (3400, 15),
    (6900, 18),
)
MAX_LEVEL = 5

SPEED = 200.0
SPRINT_SCALE = 1.5


class Move(Enum):
    """Inputs that steer the player."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPRINT = auto()


class _Anim(IntEnum):
    IDLE_R = 0
    IDLE_L = 1
    RUN_R = 2
    RUN_L = 3


_FRAME_COUNT = {_Anim.IDLE_R: 3, _Anim.IDLE_L: 3, _Anim.RUN_R: 4, _Anim.RUN_L: 4}


class Player:
    """The researcher walking around the lab and swinging the pickaxe."""

    animation_speed = 0.2
    attack_anim_speed = 0.2
    attack_frame_count = 5

    def __init__(self) -> None:
        self.sprite = Sprite(
            texture=CHARACTER_TEXTURE,
            texture_rect=Rect(0, 0, TILE, TILE),
            origin=(TILE / 2, TILE / 2),
            scale=SCALE,
        )
        self.weapon_sprite = Sprite(
            texture=WEAPON_TEXTURE,
            texture_rect=Rect(0, WEAPON_TILE * 12, WEAPON_TILE, WEAPON_TILE),
            origin=(WEAPON_TILE / 2, WEAPON_TILE / 2),
            scale=SCALE,
        )
        self._animation = _Anim.IDLE_R
        self._animation_time = 0.0
        self._attack_time = 0.0
        self._current_level = 0
        self.attacking = False

    def set_position(self, new_pos: tuple[float, float]) -> None:
        """Place the player at a world position given in unscaled units."""
        x, y = new_pos
        self.sprite.position = (x * SCALE[0], y * SCALE[0])
        self.weapon_sprite.position = self.sprite.position

    @property
    def position(self) -> tuple[float, float]:
        return self.sprite.position

    def level_up(self) -> None:
        if self._current_level < MAX_LEVEL:
            self._current_level += 1

    @property
    def level(self) -> int:
        return self._current_level

    @property
    def level_cost(self) -> int:
        """Coins needed for the next pickaxe level; 0 at the top level."""
        if self._current_level == MAX_LEVEL:
            return 0
        return PICKAXE_UPGRADES[self._current_level][0]

    @property
    def bonus_value(self) -> int:
        return PICKAXE_UPGRADES[self._current_level][1]

    def update(self, delta: float, pressed: Collection[Move] = frozenset()) -> None:
        """Advance movement and animations by ``delta`` seconds."""
        dx = float((Move.RIGHT in pressed) - (Move.LEFT in pressed))
        dy = float((Move.DOWN in pressed) - (Move.UP in pressed))
        speed_scale = SPRINT_SCALE if Move.SPRINT in pressed else 1.0

        if self.attacking:
            dx = dy = 0.0
        if dx or dy:
            length = math.hypot(dx, dy)
            dx, dy = dx / length, dy / length

        step = SPEED * speed_scale * delta
        px, py = self.sprite.position
        self.sprite.position = (px + dx * step, py + dy * step)
        self.weapon_sprite.position = self.sprite.position

        still = dx == 0 and dy == 0
        if dx > 0 or self._animation is _Anim.IDLE_R:
            self._animation = _Anim.RUN_R
        if dx < 0 or self._animation is _Anim.IDLE_L:
            self._animation = _Anim.RUN_L
        if still and self._animation is _Anim.RUN_R:
            self._animation = _Anim.IDLE_R
        if still and self._animation is _Anim.RUN_L:
            self._animation = _Anim.IDLE_L

        self._animation_time += delta
        if self._animation_time >= self.animation_speed:
            self._animation_time = 0.0
            frame = self.sprite.texture_rect
            left = (frame.left + TILE) % (_FRAME_COUNT[self._animation] * TILE)
            self.sprite.texture_rect = Rect(left, TILE * self._animation, TILE, TILE)

        if self.attacking:
            self._attack_time += delta
        if self._attack_time >= self.attack_anim_speed:
            self._attack_time = 0.0
            frame = self.weapon_sprite.texture_rect
            left = (frame.left + WEAPON_TILE) % (self.attack_frame_count * WEAPON_TILE)
            self.weapon_sprite.texture_rect = Rect(left, frame.top, frame.width, frame.height)
            if left == 0:
                self.attacking = False

    def click(self, position: tuple[float, float]) -> None:
        """Start a pickaxe swing facing the clicked screen position."""
        self.attacking = True
        px, py = self.sprite.position
        angle = math.degrees(math.atan2(position[1] - py, position[0] - px))
        if -135 < angle <= -45:
            row = 15
        elif -45 < angle <= 45:
            row = 14
        elif 45 < angle <= 135:
            row = 13
        else:
            row = 12
        frame = self.weapon_sprite.texture_rect
        self.weapon_sprite.texture_rect = Rect(
            frame.left, WEAPON_TILE * row, frame.width, frame.height
        )

    def check_bounds(self, walls: Iterable[Any]) -> None:
        """Push the player out of every wall it overlaps."""
        player_bounds = self.sprite.global_bounds()
        for wall in walls:
            if wall.check_collision(player_bounds):
                wall.resolve_collision(self.sprite)

    def bounds(self) -> Rect:
        return self.sprite.global_bounds()

    def drawables(self) -> list[Sprite]:
        if self.attacking:
            return [self.sprite, self.weapon_sprite]
        return [self.sprite]