import pytest

from dungeon_archeology.core import TILE, WEAPON_TILE, Material, WallID
from dungeon_archeology.player import Move, Player
from dungeon_archeology.wall import Wall


def _placed(x=100.0, y=100.0):
    player = Player()
    player.set_position((x, y))
    return player


def test_set_position_scales_and_moves_weapon():
    player = _placed(10.0, 20.0)
    assert player.position == (20.0, 40.0)
    assert player.weapon_sprite.position == player.position


def test_level_progression_follows_upgrade_table():
    player = Player()
    assert player.level == 0
    assert player.level_cost == 500
    assert player.bonus_value == 2
    for _ in range(5):
        player.level_up()
    assert player.level == 5
    assert player.level_cost == 0
    assert player.bonus_value == 18


def test_level_up_stops_at_max():
    player = Player()
    for _ in range(10):
        player.level_up()
    assert player.level == 5


def test_moving_right_changes_only_x():
    player = _placed()
    start = player.position
    player.update(0.1, {Move.RIGHT})
    assert player.position[0] > start[0]
    assert player.position[1] == start[1]


def test_opposite_keys_cancel():
    player = _placed()
    start = player.position
    player.update(0.1, {Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN})
    assert player.position == start


def test_diagonal_movement_is_normalised():
    straight = _placed()
    diagonal = _placed()
    s0 = straight.position
    d0 = diagonal.position
    straight.update(0.1, {Move.UP})
    diagonal.update(0.1, {Move.UP, Move.LEFT})
    straight_dist = abs(straight.position[1] - s0[1])
    dx = diagonal.position[0] - d0[0]
    dy = diagonal.position[1] - d0[1]
    assert (dx * dx + dy * dy) ** 0.5 == pytest.approx(straight_dist)
    assert dx < 0 and dy < 0


def test_sprint_is_one_and_a_half_times_faster():
    walk = _placed()
    run = _placed()
    w0, r0 = walk.position[0], run.position[0]
    walk.update(0.1, {Move.RIGHT})
    run.update(0.1, {Move.RIGHT, Move.SPRINT})
    assert (run.position[0] - r0) / (walk.position[0] - w0) == pytest.approx(1.5)


def test_attack_blocks_movement():
    player = _placed()
    player.click((1000, player.position[1]))
    start = player.position
    player.update(0.05, {Move.RIGHT})
    assert player.position == start


@pytest.mark.parametrize(
    "offset, row",
    [((100, 0), 14), ((0, -100), 15), ((0, 100), 13), ((-100, 0), 12)],
)
def test_click_direction_selects_weapon_row(offset, row):
    player = _placed()
    px, py = player.position
    player.click((px + offset[0], py + offset[1]))
    assert player.attacking
    assert player.weapon_sprite.texture_rect.top == WEAPON_TILE * row


def test_attack_ends_after_full_swing():
    player = _placed()
    player.click((0, 0))
    assert len(player.drawables()) == 2
    for _ in range(4):
        player.update(0.2)
        assert player.attacking
    player.update(0.2)
    assert not player.attacking
    assert player.drawables() == [player.sprite]
    assert player.weapon_sprite.texture_rect.left == 0


def test_running_right_uses_run_row():
    player = _placed()
    player.update(0.25, {Move.RIGHT})
    assert player.sprite.texture_rect.top == TILE * 2
    assert player.sprite.texture_rect.left == TILE


def test_walk_frames_wrap():
    player = _placed()
    lefts = []
    for _ in range(8):
        player.update(0.25, {Move.RIGHT})
        lefts.append(player.sprite.texture_rect.left)
    assert all(0 <= left < 4 * TILE for left in lefts)
    assert lefts[:4] == lefts[4:]


def test_check_bounds_pushes_out_of_wall():
    wall = Wall(WallID.TOP, Material.BRICK, (100.0, 100.0))
    player = _placed(97.0, 102.0)
    assert wall.check_collision(player.bounds())
    player.check_bounds([wall])
    assert not wall.check_collision(player.bounds())


def test_check_bounds_ignores_distant_wall():
    wall = Wall(WallID.TOP, Material.BRICK, (500.0, 500.0))
    player = _placed()
    start = player.position
    player.check_bounds([wall])
    assert player.position == start