from dataclasses import dataclass, field

from dungeon_archeology.core import Rect, UIMode
from dungeon_archeology.interactive import (
    PROPS_TEXTURE,
    RAILS_TEXTURE,
    Interactive,
    Museum,
    Updater,
    Upgrader,
)
from dungeon_archeology.player import Player


@dataclass
class FakeGui:
    mode: UIMode = UIMode.BASE
    rebuilds: int = 0

    def call_rebuild(self):
        self.rebuilds += 1


@dataclass
class FakePlayer:
    box: Rect = field(default_factory=lambda: Rect(-1000, -1000, 10, 10))

    def bounds(self):
        return self.box


def _on(prop):
    return FakePlayer(prop.sprite.global_bounds())


def test_upgrader_opens_upgrade_menu_when_touched():
    prop = Upgrader()
    gui = FakeGui()
    prop.interact(gui, _on(prop))
    assert gui.mode is UIMode.UPGRADER


def test_upgrader_ignores_distant_player():
    gui = FakeGui()
    Upgrader().interact(gui, FakePlayer())
    assert gui.mode is UIMode.BASE


def test_upgrader_with_real_player_nearby():
    prop = Upgrader()
    player = Player()
    box = prop.sprite.global_bounds()
    player.set_position(((box.left + 10) / 2, (box.top + 10) / 2))
    gui = FakeGui()
    prop.interact(gui, player)
    assert gui.mode is UIMode.UPGRADER


def test_museum_opens_museum():
    prop = Museum()
    gui = FakeGui()
    prop.interact(gui, _on(prop))
    assert gui.mode is UIMode.MUSEUM


def test_museum_ignores_distant_player():
    gui = FakeGui(mode=UIMode.SETTINGS)
    Museum().interact(gui, FakePlayer())
    assert gui.mode is UIMode.SETTINGS


def test_updater_rebuilds_without_changing_mode():
    prop = Updater()
    gui = FakeGui()
    prop.interact(gui, _on(prop))
    assert gui.rebuilds == 1
    assert gui.mode is UIMode.BASE


def test_updater_ignores_distant_player():
    gui = FakeGui()
    Updater().interact(gui, FakePlayer())
    assert gui.rebuilds == 0


def test_updater_rotation_keeps_square_bounds():
    box = Updater().sprite.global_bounds()
    assert box.width == box.height


def test_base_interactive_sets_base_mode():
    prop = Interactive()
    prop.sprite.texture_rect = Rect(0, 0, 16, 16)
    gui = FakeGui(mode=UIMode.MUSEUM)
    prop.interact(gui, _on(prop))
    assert gui.mode is UIMode.BASE


def test_upgrader_drawables():
    prop = Upgrader()
    sprites = prop.drawables()
    assert sprites == [prop.sprite]
    assert sprites[0].texture == PROPS_TEXTURE


def test_museum_pieces_lie_inside_its_area():
    prop = Museum()
    area = prop.sprite.global_bounds()
    pieces = prop.drawables()
    assert len(pieces) == 11
    for piece in pieces:
        box = piece.global_bounds()
        assert piece.texture == RAILS_TEXTURE
        assert box.left >= area.left and box.right <= area.right
        assert box.top >= area.top and box.bottom <= area.bottom