"""On-screen interface: the HUD, pause menu, upgrade shop and crystal museum."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any

import pygame

from .clump import ClumpItem
from .core import (
    HEIGHT,
    SCALE,
    TILE,
    UI_TILE,
    WEAPON_TILE,
    WIDTH,
    ClumpRare,
    Rect,
    Sprite,
    UIMode,
)
from .render import Assets, draw_sprite

FONT_PATH = "assets/Pixeloid_Font_0_5/TrueType/PixeloidSans.ttf"
HUD_TEXTURE = "assets/SGQ_ui/game_ui/hud.png"
UI_TEXTURE = "assets/SGQ_ui/game_ui/ui_elements.png"
PROPS_TEXTURE = "assets/SGQ_Dungeon/props/props.png"
ANIM_PROPS_TEXTURE = "assets/SGQ_Dungeon/props/animated_props.png"
WEAPONS_TEXTURE = "assets/SGQ_Dungeon/weapons_and_projectiles/weapons_animated.png"

TEXT_COLOR = (212, 210, 155)
SHADE = (0, 0, 0, 160)
CLICK_COOLDOWN = 0.5

PICKAXE_ANIM_SPEED = 0.2
PICKAXE_FRAME_COUNT = 5
DUNGEON_ANIM_SPEED = 0.4
DUNGEON_FRAME_COUNT = 3

RARITY_NAMES: dict[ClumpRare, str] = {
    ClumpRare.NOTHING: "",
    ClumpRare.COMMON: "common",
    ClumpRare.UNCOMMON: "uncommon",
    ClumpRare.RARE: "rare",
    ClumpRare.EPIC: "epic",
    ClumpRare.LEGENDARY: "legendary",
}

# Sheet cell (column, row) of the crystal picture for each appeal.
CRYSTAL_CELLS: dict[ClumpRare, tuple[int, int]] = {
    ClumpRare.COMMON: (0, 4),
    ClumpRare.UNCOMMON: (1, 4),
    ClumpRare.RARE: (2, 4),
    ClumpRare.EPIC: (3, 4),
    ClumpRare.LEGENDARY: (0, 5),
}

PICKAXE_TITLE = "UPGRADE PICKAXE"
PICKAXE_DESCRIPTION = (
    "An ancient dwarf technique allows you to\n"
    "improve your pickaxe, increasing your\n"
    "chances of finding something interesting."
)
DUNGEON_TITLE = "CHANGE DUNGEON"
DUNGEON_DESCRIPTION = (
    "If I've got it right, with books I can\n"
    "get more valuable resources from\n"
    "this cave. That's very interesting..."
)
DUNGEON_COST = "not yet"
EMPTY_MUSEUM = "There is no crystals yet..."

_ICON_SCALE = (SCALE[0] * 1.5, SCALE[1] * 1.5)
_ANIM_SCALE = (SCALE[0] * 3, SCALE[1] * 3)


def nine_slice_tile(x: int, y: int, size: tuple[int, int]) -> tuple[int, int]:
    """Sheet offset (column, row) of the piece at row ``x``, column ``y`` of a (rows, columns) panel."""
    rows, cols = size
    last_x, last_y = rows - 1, cols - 1
    inner_x = x not in (0, last_x)
    inner_y = y not in (0, last_y)
    if x == 0 and y == 0:
        return (0, 0)
    if inner_x and y == 0:
        return (0, 1)
    if x == last_x and y == 0:
        return (0, 2)
    if x == 0 and inner_y:
        return (1, 0)
    if x == last_x and inner_y:
        return (1, 2)
    if x == 0 and y == last_y:
        return (2, 0)
    if inner_x and y == last_y:
        return (2, 1)
    if x == last_x and y == last_y:
        return (2, 2)
    return (1, 1)


def pieces_to_rect(
    assets: Assets, texture_path: str, coord: tuple[int, int], size: tuple[int, int]
) -> pygame.Surface:
    """Assemble a scaled nine-slice panel of ``size`` (rows, columns) from the sheet cells at ``coord``."""
    rows, cols = size
    step_x = UI_TILE * SCALE[0]
    step_y = UI_TILE * SCALE[1]
    result = pygame.Surface((int(cols * step_x), int(rows * step_y)), pygame.SRCALPHA)
    sheet = assets.texture(texture_path)
    pieces: dict[tuple[int, int], pygame.Surface] = {}

    for x, y in itertools.product(range(rows), range(cols)):
        offset = nine_slice_tile(x, y, size)
        piece = pieces.get(offset)
        if piece is None:
            cell = pygame.Surface((UI_TILE, UI_TILE), pygame.SRCALPHA)
            area = pygame.Rect(
                (coord[0] + offset[0]) * UI_TILE,
                (coord[1] + offset[1]) * UI_TILE,
                UI_TILE,
                UI_TILE,
            )
            cell.blit(sheet, (0, 0), area)
            piece = pygame.transform.scale(cell, (int(step_x), int(step_y)))
            pieces[offset] = piece
        result.blit(piece, (int(y * step_x), int(x * step_y)))
    return result


def describe_crystal(item: ClumpItem, cost: int) -> str:
    """The three-line museum description of a crystal."""
    return (
        f"Rare: {RARITY_NAMES[ClumpRare(item.rare)]}\n"
        f"Appeal: {RARITY_NAMES[ClumpRare(item.tex_rare)]}\n"
        f"Cost: {cost}"
    )


@dataclass(frozen=True)
class _Panel:
    texture_coord: tuple[int, int]
    size: tuple[int, int]
    position: tuple[float, float]

    @property
    def bounds(self) -> Rect:
        rows, cols = self.size
        return Rect(*self.position, cols * UI_TILE * SCALE[0], rows * UI_TILE * SCALE[1])


def _center(rect: Rect) -> tuple[float, float]:
    return (rect.left + rect.width / 2, rect.top + rect.height / 2)


class UserInterface:
    """Menus drawn over the game, driven by a game object.

    ``parent`` provides ``coins``, ``crystal_count``, ``crystals`` and ``player``
    attributes and the methods ``add_coins``, ``remove_coins``, ``sell_crystal``,
    ``rare_to_cost`` and ``generate_cave``.
    """

    def __init__(self, parent: Any, font_path: str | None = FONT_PATH) -> None:
        self.parent = parent
        self.font_path = font_path
        self._mode = UIMode.BASE
        self._click_cd = 0.0
        self._pickaxe_anim_time = 0.0
        self._dungeon_anim_time = 0.0
        self.current_crystal = 0
        self._panel_cache: dict[_Panel, pygame.Surface] = {}
        self._cache_owner: Assets | None = None

        # Base HUD
        self.coin_icon = Sprite(
            HUD_TEXTURE, Rect(0, TILE, TILE, TILE), position=(TILE, TILE * 3), scale=_ICON_SCALE
        )
        self._coin_label = (TILE * 4, TILE * 3.5)
        self.crystal_icon = Sprite(
            HUD_TEXTURE, Rect(TILE, TILE, TILE, TILE), position=(TILE, TILE * 6), scale=_ICON_SCALE
        )
        self._crystal_label = (TILE * 4, TILE * 6.5)

        # Menu frame
        self.menu_brick = _Panel(
            (0, 0),
            (35, 50),
            ((WIDTH - UI_TILE * 50 * SCALE[0]) / 2, (HEIGHT - UI_TILE * 35 * SCALE[1]) / 2),
        )
        mb = self.menu_brick.bounds
        self._menu = mb
        self.title_brick = _Panel(
            (0, 5),
            (3, 12),
            ((WIDTH - UI_TILE * 12 * SCALE[0]) / 2, mb.top - UI_TILE * 1.5 * SCALE[0]),
        )
        self._title_y = mb.top - UI_TILE * SCALE[1]

        # Upgrader
        self.upgrader_coins = _Panel((8, 3), (4, 18), (mb.left + 4 * UI_TILE, mb.top + 2 * UI_TILE))
        self.pickaxe_level = _Panel(
            (8, 3),
            (4, 18),
            (mb.right - UI_TILE * 18 * SCALE[0] - UI_TILE * 4, mb.top + 2 * UI_TILE),
        )
        uc = self.upgrader_coins.bounds
        pl = self.pickaxe_level.bounds
        self.up_coins_icon = Sprite(
            HUD_TEXTURE,
            Rect(0, TILE, TILE, TILE),
            position=(uc.left + 2 * UI_TILE, uc.top + UI_TILE),
            scale=_ICON_SCALE,
        )
        self._up_coins_label = (uc.left + 9 * UI_TILE, uc.top + 1.6 * UI_TILE)
        self.pickaxe_icon = Sprite(
            PROPS_TEXTURE,
            Rect(TILE * 2, TILE * 5, TILE, TILE),
            position=(pl.left + 2 * UI_TILE, pl.top + UI_TILE),
            scale=_ICON_SCALE,
        )
        self._pickaxe_label = (pl.left + 9 * UI_TILE, pl.top + 1.6 * UI_TILE)

        self.pickaxe_field = _Panel(
            (0, 32), (10, 48), (mb.left + UI_TILE * SCALE[0], mb.top + 6 * UI_TILE * SCALE[0])
        )
        pf = self.pickaxe_field.bounds
        self.pickaxe_anim = Sprite(
            WEAPONS_TEXTURE,
            Rect(0, WEAPON_TILE * 12, WEAPON_TILE, WEAPON_TILE),
            position=(pf.left + TILE * SCALE[0], pf.top - TILE * SCALE[1]),
            scale=_ANIM_SCALE,
        )
        self.pickaxe_button = self._offer_button(pf)

        self.dungeon_field = _Panel(
            (0, 32), (10, 48), (mb.left + UI_TILE * SCALE[0], mb.top + 16 * UI_TILE * SCALE[0])
        )
        df = self.dungeon_field.bounds
        self.dungeon_anim = Sprite(
            ANIM_PROPS_TEXTURE,
            Rect(0, 0, TILE, TILE),
            position=(df.left + TILE * SCALE[0], df.top + TILE * SCALE[1]),
            scale=_ANIM_SCALE,
        )
        self.dungeon_button = self._offer_button(df)

        # Museum
        self.crystal_museum_icon = Sprite(
            HUD_TEXTURE,
            Rect(TILE, TILE, TILE, TILE),
            position=(pl.left + 2 * UI_TILE, pl.top + UI_TILE),
            scale=_ICON_SCALE,
        )
        self.crystal_view = _Panel(
            (0, 32), (25, 48), (mb.left + UI_TILE * SCALE[0], mb.top + UI_TILE * 5 * SCALE[1])
        )
        self.button_left = _Panel(
            (0, 26), (4, 4), (mb.left + UI_TILE * 2 * SCALE[0], mb.top + UI_TILE * 25 * SCALE[1])
        )
        self._left_label = (mb.left + UI_TILE * 3.5 * SCALE[0], mb.top + UI_TILE * 26 * SCALE[1])
        self.button_right = _Panel(
            (0, 26), (4, 4), (mb.left + UI_TILE * 44 * SCALE[0], mb.top + UI_TILE * 25 * SCALE[1])
        )
        self._right_label = (mb.left + UI_TILE * 45.5 * SCALE[0], mb.top + UI_TILE * 26 * SCALE[1])
        self._crystal_title_y = mb.top + UI_TILE * 6 * SCALE[1]
        self.crystal_image = Sprite(
            PROPS_TEXTURE,
            Rect(0, 4 * TILE, TILE, TILE),
            position=(WIDTH / 2 - TILE * 4, mb.top + UI_TILE * 13 * SCALE[1]),
            scale=(SCALE[0] * 4, SCALE[1] * 4),
        )
        self._crystal_description_y = mb.top + UI_TILE * 22 * SCALE[1]
        self.sell_button = _Panel(
            (0, 26), (4, 10), (mb.left + UI_TILE * 2 * SCALE[0], mb.top + UI_TILE * 6 * SCALE[1])
        )
        self.sold_label = _Panel(
            (8, 0), (4, 10), (mb.left + UI_TILE * 2 * SCALE[0], mb.top + UI_TILE * 6 * SCALE[1])
        )
        self._sell_text = (mb.left + UI_TILE * 4 * SCALE[0], mb.top + UI_TILE * 7 * SCALE[1])

    @staticmethod
    def _offer_button(field: Rect) -> _Panel:
        return _Panel(
            (0, 26),
            (4, 12),
            (field.left + 17.6 * TILE * SCALE[0], field.top + 2.5 * TILE * SCALE[1]),
        )

    @property
    def mode(self) -> UIMode:
        return self._mode

    @mode.setter
    def mode(self, new_mode: UIMode) -> None:
        self._mode = UIMode(new_mode)

    def call_rebuild(self) -> None:
        """Ask the game to dig a new cave."""
        self.parent.generate_cave()

    # -- input -----------------------------------------------------------

    def click(self, click_pos: tuple[float, float]) -> None:
        """Handle a mouse press; presses closer together than the cooldown are ignored."""
        if self._click_cd > 0:
            return
        self._click_cd = CLICK_COOLDOWN
        x, y = click_pos
        if self._mode is UIMode.MUSEUM:
            self._click_museum(x, y)
        elif self._mode is UIMode.UPGRADER:
            self._click_upgrader(x, y)

    def _click_museum(self, x: float, y: float) -> None:
        count = self.parent.crystal_count
        if count == 0:
            return
        if self.button_left.bounds.contains(x, y) and self.current_crystal != 0:
            self.current_crystal -= 1
        if self.button_right.bounds.contains(x, y) and self.current_crystal != count - 1:
            self.current_crystal += 1

        item = self.parent.crystals[self.current_crystal]
        if self.sell_button.bounds.contains(x, y) and not item.is_sold:
            self.parent.add_coins(
                self.parent.rare_to_cost(item.rare, item.tex_rare, item.cost_mod)
            )
            self.parent.sell_crystal(self.current_crystal)

    def _click_upgrader(self, x: float, y: float) -> None:
        player = self.parent.player
        if self.pickaxe_button.bounds.contains(x, y) and player.level_cost <= self.parent.coins:
            self.parent.remove_coins(player.level_cost)
            player.level_up()

    def update_anims(self, delta: float) -> None:
        """Run down the click cooldown and advance the menu animations."""
        if self._click_cd > 0:
            self._click_cd -= delta
        if self._click_cd <= 0:
            self._click_cd = 0.0

        self._pickaxe_anim_time += delta
        if self._pickaxe_anim_time >= PICKAXE_ANIM_SPEED:
            self._pickaxe_anim_time = 0.0
            frame = self.pickaxe_anim.texture_rect
            left = (frame.left + WEAPON_TILE) % (PICKAXE_FRAME_COUNT * WEAPON_TILE)
            self.pickaxe_anim.texture_rect = Rect(left, frame.top, frame.width, frame.height)

        self._dungeon_anim_time += delta
        if self._dungeon_anim_time >= DUNGEON_ANIM_SPEED:
            self._dungeon_anim_time = 0.0
            frame = self.dungeon_anim.texture_rect
            left = 4 * TILE + (frame.left + TILE) % (DUNGEON_FRAME_COUNT * TILE)
            self.dungeon_anim.texture_rect = Rect(left, frame.top, frame.width, frame.height)

    # -- drawing ---------------------------------------------------------

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Draw the interface of the current mode onto ``surface``."""
        if self._mode is UIMode.BASE:
            self._draw_base(surface, assets)
            return

        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(SHADE)
        surface.blit(shade, (0, 0))
        self._panel(surface, assets, self.menu_brick)
        self._panel(surface, assets, self.title_brick)

        if self._mode is UIMode.SETTINGS:
            title = "PAUSE"
        elif self._mode is UIMode.UPGRADER:
            self._draw_upgrader(surface, assets)
            title = "UPGRADE"
        else:
            self._draw_museum(surface, assets)
            title = "MUSEUM"
        self._write(surface, assets, title, 28, (0, self._title_y), center_x=True)

    def _draw_base(self, surface: pygame.Surface, assets: Assets) -> None:
        draw_sprite(surface, assets, self.coin_icon)
        self._write(surface, assets, str(self.parent.coins), 28, self._coin_label)
        draw_sprite(surface, assets, self.crystal_icon)
        self._write(surface, assets, str(self.parent.crystal_count), 28, self._crystal_label)

    def _draw_upgrader(self, surface: pygame.Surface, assets: Assets) -> None:
        player = self.parent.player
        self._panel(surface, assets, self.upgrader_coins)
        self._panel(surface, assets, self.pickaxe_level)
        draw_sprite(surface, assets, self.pickaxe_icon)
        draw_sprite(surface, assets, self.up_coins_icon)
        self._write(surface, assets, f"{player.level} level", 28, self._pickaxe_label)
        self._write(surface, assets, f"{self.parent.coins} coins", 28, self._up_coins_label)

        cost = player.level_cost
        self._draw_offer(
            surface,
            assets,
            self.pickaxe_field,
            self.pickaxe_anim,
            PICKAXE_TITLE,
            PICKAXE_DESCRIPTION,
            self.pickaxe_button,
            "MAX" if cost == 0 else f"{cost} coins",
        )
        self._draw_offer(
            surface,
            assets,
            self.dungeon_field,
            self.dungeon_anim,
            DUNGEON_TITLE,
            DUNGEON_DESCRIPTION,
            self.dungeon_button,
            DUNGEON_COST,
        )

    def _draw_offer(
        self,
        surface: pygame.Surface,
        assets: Assets,
        field: _Panel,
        anim: Sprite,
        title: str,
        description: str,
        button: _Panel,
        cost: str,
    ) -> None:
        box = field.bounds
        self._panel(surface, assets, field)
        draw_sprite(surface, assets, anim)
        text_x = box.left + 5 * TILE * SCALE[0]
        self._write(surface, assets, title, 36, (text_x, box.top + UI_TILE * SCALE[1]))
        self._write(surface, assets, description, 18, (text_x, box.top + 2 * TILE * SCALE[1]))
        self._panel(surface, assets, button)
        self._write(
            surface,
            assets,
            cost,
            24,
            (box.left + 18.25 * TILE * SCALE[0], box.top + 3 * TILE * SCALE[1]),
        )

    def _draw_museum(self, surface: pygame.Surface, assets: Assets) -> None:
        self._panel(surface, assets, self.upgrader_coins)
        draw_sprite(surface, assets, self.up_coins_icon)
        self._write(surface, assets, f"{self.parent.coins} coins", 28, self._up_coins_label)

        count = self.parent.crystal_count
        if count == 0:
            self._write(
                surface, assets, EMPTY_MUSEUM, 32, (0, 0), center_x=True, center_y=True
            )
            return

        item = self.parent.crystals[self.current_crystal]
        self._panel(surface, assets, self.pickaxe_level)
        draw_sprite(surface, assets, self.crystal_museum_icon)
        self._write(
            surface, assets, f"{self.current_crystal + 1}/{count}", 28, self._pickaxe_label
        )

        self._panel(surface, assets, self.crystal_view)
        self._panel(surface, assets, self.button_left)
        self._write(surface, assets, "<-", 26, self._left_label)
        self._panel(surface, assets, self.button_right)
        self._write(surface, assets, "->", 26, self._right_label)

        self._write(surface, assets, item.name, 36, (0, self._crystal_title_y), center_x=True)
        cost = self.parent.rare_to_cost(item.rare, item.tex_rare, item.cost_mod)
        self._write(
            surface,
            assets,
            describe_crystal(item, cost),
            24,
            (0, self._crystal_description_y),
            center_x=True,
        )

        col, row = CRYSTAL_CELLS.get(item.tex_rare, (0, 4))
        self.crystal_image.texture_rect = Rect(col * TILE, row * TILE, TILE, TILE)
        draw_sprite(surface, assets, self.crystal_image)

        if item.is_sold:
            self._panel(surface, assets, self.sold_label)
            self._write(surface, assets, "SOLD", 26, self._sell_text)
        else:
            self._panel(surface, assets, self.sell_button)
            self._write(surface, assets, "SELL", 26, self._sell_text)

    def _panel(self, surface: pygame.Surface, assets: Assets, panel: _Panel) -> None:
        if assets is not self._cache_owner:
            self._panel_cache.clear()
            self._cache_owner = assets
        image = self._panel_cache.get(panel)
        if image is None:
            image = pieces_to_rect(assets, UI_TEXTURE, panel.texture_coord, panel.size)
            self._panel_cache[panel] = image
        surface.blit(image, (round(panel.position[0]), round(panel.position[1])))

    def _write(
        self,
        surface: pygame.Surface,
        assets: Assets,
        text: str,
        size: int,
        position: tuple[float, float],
        *,
        center_x: bool = False,
        center_y: bool = False,
    ) -> None:
        font = assets.font(self.font_path, size)
        lines = text.split("\n")
        line_height = font.get_linesize()
        width = max(font.size(line)[0] for line in lines)
        x, y = position
        if center_x:
            x = (WIDTH - width) / 2
        if center_y:
            y = (HEIGHT - line_height * len(lines)) / 2
        for number, line in enumerate(lines):
            if line:
                rendered = font.render(line, True, TEXT_COLOR)
                surface.blit(rendered, (round(x), round(y + number * line_height)))