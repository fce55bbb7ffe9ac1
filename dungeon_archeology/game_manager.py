"""The game itself: room layouts, the coin economy and the main loop."""

from __future__ import annotations

import argparse
import itertools
import math
import random
import tomllib
from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from .clump import Clump, ClumpItem, DefaultClump
from .core import (
    BACKGROUND,
    FPS,
    HEIGHT,
    TILE,
    WIDTH,
    ClumpRare,
    Material,
    UIMode,
    WallID,
)
from .ground import Ground
from .interactive import Interactive, Museum, Updater, Upgrader
from .player import Move, Player
from .render import Assets, draw_sprite
from .user_interface import UserInterface
from .wall import Wall

ROOMS_FILE = "assets/rooms.toml"
TITLE = "Dungeon Archeology"
START_COINS = 110
REBUILD_COST = 10
CLUMP_CHANCE = 40
REMOVE_DELAY = 1.0


@dataclass(frozen=True)
class RoomLayout:
    """A rectangular room: its size in tiles, its offset in tiles and its tile grids.

    ``walls`` and ``grounds`` are indexed as ``grid[y][x]``.
    """

    size: tuple[int, int]
    delta: tuple[float, float]
    walls: tuple[tuple[int, ...], ...]
    grounds: tuple[tuple[int, ...], ...]


def _lookup(table: Any, *keys: str) -> Any:
    node = table
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            raise ValueError(f"room data lacks {'.'.join(keys)}")
        node = node[key]
    return node


def _int(table: Any, *keys: str) -> int:
    value = _lookup(table, *keys)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{'.'.join(keys)} must be an integer")
    return value


def _float(table: Any, *keys: str) -> float:
    value = _lookup(table, *keys)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{'.'.join(keys)} must be a number")
    return float(value)


def _grid(table: Any, key: str, size: tuple[int, int], room: str) -> tuple[tuple[int, ...], ...]:
    width, height = size
    rows = _lookup(table, key)
    if not isinstance(rows, list) or len(rows) < height:
        raise ValueError(f"{room}.{key} needs at least {height} rows")
    grid = []
    for row in rows[:height]:
        if not isinstance(row, list) or len(row) < width:
            raise ValueError(f"{room}.{key} rows need at least {width} cells")
        cells = row[:width]
        if any(isinstance(cell, bool) or not isinstance(cell, int) for cell in cells):
            raise ValueError(f"{room}.{key} cells must be integers")
        grid.append(tuple(cells))
    return tuple(grid)


def _parse_layout(data: dict[str, Any], room: str) -> RoomLayout:
    table = _lookup(data, room)
    size = (_int(table, "size", "x"), _int(table, "size", "y"))
    if size[0] < 0 or size[1] < 0:
        raise ValueError(f"{room}.size must not be negative")
    delta = (_float(table, "delta", "x"), _float(table, "delta", "y"))
    return RoomLayout(
        size=size,
        delta=delta,
        walls=_grid(table, "walls", size, room),
        grounds=_grid(table, "grounds", size, room),
    )


def load_rooms(path: str | Path) -> tuple[RoomLayout, RoomLayout, tuple[float, float]]:
    """Read the laboratory, the cave and the player spawn (in tiles) from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    laboratory = _parse_layout(data, "laboratory")
    cave = _parse_layout(data, "cave")
    spawn = (_float(data, "player_spawn", "x"), _float(data, "player_spawn", "y"))
    return laboratory, cave, spawn


def _cells(layout: RoomLayout) -> Iterator[tuple[tuple[float, float], WallID, WallID]]:
    """World position, wall kind and ground kind of every cell, column by column."""
    dx, dy = layout.delta[0] * TILE, layout.delta[1] * TILE
    width, height = layout.size
    for x, y in itertools.product(range(width), range(height)):
        position = (dx + TILE * x, dy + TILE * y)
        yield position, WallID(layout.walls[y][x]), WallID(layout.grounds[y][x])


def rare_to_cost(rare: ClumpRare | int, tex_rare: ClumpRare | int, mod: float) -> int:
    """Selling price of a crystal, truncated to whole coins."""
    return int(math.pow(int(tex_rare) * 3, int(rare)) * 10 * mod)


_KEY_MOVES: tuple[tuple[int, Move], ...] = (
    (pygame.K_a, Move.LEFT),
    (pygame.K_d, Move.RIGHT),
    (pygame.K_w, Move.UP),
    (pygame.K_s, Move.DOWN),
    (pygame.K_LSHIFT, Move.SPRINT),
    (pygame.K_RSHIFT, Move.SPRINT),
)


def _held_moves(keys: Sequence[bool]) -> frozenset[Move]:
    return frozenset(move for key, move in _KEY_MOVES if keys[key])


class GameManager:
    """Owns the rooms, the player, the inventory and the coins, and runs the game."""

    def __init__(self, root: str | Path = ".", rng: Any = None) -> None:
        self.root = Path(root)
        self.rng = rng if rng is not None else random.Random()
        self.laboratory, self.cave, self.player_spawn = load_rooms(self.root / ROOMS_FILE)

        self._coins = START_COINS
        self.rebuild_cost = REBUILD_COST
        self.player = Player()
        self.gui = UserInterface(self)
        self.actions: list[Interactive] = [Upgrader(), Museum(), Updater()]

        self.inventory: list[ClumpItem] = []
        self.clumps: list[Clump] = []
        self._lab_walls: list[Wall] = []
        self._lab_grounds: list[Ground] = []
        self._cave_walls: list[Wall] = []
        self._cave_grounds: list[Ground] = []
        self._removal: tuple[Clump, float] | None = None

        self.build_laboratory()
        self.generate_cave()

    # -- world -----------------------------------------------------------

    @property
    def walls(self) -> list[Wall]:
        return self._lab_walls + self._cave_walls

    @property
    def grounds(self) -> list[Ground]:
        return self._lab_grounds + self._cave_grounds

    def build_laboratory(self) -> None:
        """Lay out the laboratory tiles and put the player on the spawn point."""
        layout = self.laboratory
        dx, dy = layout.delta[0] * TILE, layout.delta[1] * TILE
        sx, sy = self.player_spawn
        self.player.set_position((dx + sx * TILE, dy + sy * TILE))

        self._lab_walls = []
        self._lab_grounds = []
        for position, wall_type, ground_type in _cells(layout):
            self._lab_grounds.append(Ground(ground_type, Material.BRICK, position, self.rng))
            if wall_type is not WallID.NONE:
                self._lab_walls.append(Wall(wall_type, Material.STONE if False else Material.BRICK, position))

    def generate_cave(self) -> None:
        """Pay for and dig a fresh cave with newly scattered clumps."""
        self._coins -= self.rebuild_cost
        self.clumps = []
        self._removal = None
        self._cave_walls = []
        self._cave_grounds = []
        for position, wall_type, ground_type in _cells(self.cave):
            self._cave_grounds.append(Ground(ground_type, Material.STONE, position, self.rng))
            if ground_type is WallID.NONE and self.rng.randrange(100) < CLUMP_CHANCE:
                self.clumps.append(DefaultClump(position, self.rng))
            if wall_type is not WallID.NONE:
                self._cave_walls.append(Wall(wall_type, Material.STONE, position))

    # -- economy ---------------------------------------------------------

    @property
    def coins(self) -> int:
        return self._coins

    def remove_coins(self, count: int) -> None:
        self._coins -= count

    def add_coins(self, count: int) -> None:
        self._coins += count

    @property
    def crystal_count(self) -> int:
        return len(self.inventory)

    @property
    def crystals(self) -> list[ClumpItem]:
        return list(self.inventory)

    def sell_crystal(self, index: int) -> None:
        self.inventory[index].is_sold = True

    def rare_to_cost(self, rare: ClumpRare | int, tex_rare: ClumpRare | int, mod: float) -> int:
        return rare_to_cost(rare, tex_rare, mod)

    # -- input and simulation ---------------------------------------------

    def toggle_pause(self) -> None:
        """Open the pause menu from the game, or close whatever menu is open."""
        if self.gui.mode is UIMode.BASE:
            self.gui.mode = UIMode.SETTINGS
        else:
            self.gui.mode = UIMode.BASE

    def interact(self) -> None:
        """Use every prop the player is standing on."""
        for action in self.actions:
            action.interact(self.gui, self.player)

    def step(
        self,
        dt: float,
        pressed: Collection[Move] = frozenset(),
        mouse_pos: tuple[float, float] | None = None,
    ) -> None:
        """Advance the game by ``dt`` seconds; ``mouse_pos`` is set while the left button is held."""
        if mouse_pos is not None:
            self.gui.click(mouse_pos)

        if self.gui.mode is UIMode.BASE:
            if mouse_pos is not None and self._removal is None:
                self.player.click(mouse_pos)
                for clump in self.clumps:
                    item = clump.try_destroy(mouse_pos, self.player)
                    if item.message == "OK":
                        self._removal = (clump, REMOVE_DELAY)
                        if item.rare > ClumpRare.NOTHING:
                            self.inventory.append(item)
                        break

            if self._removal is not None:
                clump, remaining = self._removal
                remaining -= dt
                if remaining <= 0:
                    if clump in self.clumps:
                        self.clumps.remove(clump)
                    self._removal = None
                else:
                    self._removal = (clump, remaining)

            self.player.update(dt, pressed)
            self.player.check_bounds(self.walls)

        self.gui.update_anims(dt)

    # -- window ------------------------------------------------------------

    def _render(self, screen: pygame.Surface, assets: Assets) -> None:
        screen.fill(BACKGROUND)
        for thing in itertools.chain(self.grounds, self.walls, self.clumps, self.actions, [self.player]):
            for sprite in thing.drawables():
                draw_sprite(screen, assets, sprite)
        self.gui.draw(screen, assets)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            assets = Assets(self.root)
            clock = pygame.time.Clock()
            running = True
            while running:
                dt = clock.tick(FPS) / 1000
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            self.toggle_pause()
                        elif event.key == pygame.K_e:
                            self.interact()
                mouse = pygame.mouse.get_pos() if pygame.mouse.get_pressed()[0] else None
                self.step(dt, _held_moves(pygame.key.get_pressed()), mouse)
                self._render(screen, assets)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dungeon-archeology",
        description="You're a researcher who locked yourself in an underground lab "
        "to study ancient crystals.",
    )
    parser.add_argument(
        "--root", default=".", help="directory that holds the assets folder (default: .)"
    )
    args = parser.parse_args(argv)
    GameManager(args.root).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())