import random

import pytest

from config import ENEMY_SPRITE, CHARACTERS
from entities import Body, Enemy, Player, grid_to_px


def test_grid_to_px():
    assert grid_to_px(0, 0) == (0, 0)
    assert grid_to_px(2, 5) == (202, 415)


def test_body_derives_y_from_row():
    b = Body("x.png", 3, 10.5)
    assert (b.row, b.x, b.y) == (3, 10.5, 249)


# ── Enemy ──

def test_enemy_spawns_off_left_edge_on_a_road_row(scripted):
    e = Enemy(1, scripted(0.0, 0.0))
    assert e.x == -101
    assert e.row == 1 and e.y == 83
    assert e.sprite == ENEMY_SPRITE


def test_enemy_row_drawn_before_speed(scripted):
    e = Enemy(2, scripted(0.99, 0.0))
    assert e.row == 3
    assert e.speed == 4


@pytest.mark.parametrize("level", [1, 2, 3])
def test_enemy_speed_bands(level):
    rng = random.Random(level)
    speeds = set()
    for _ in range(300):
        e = Enemy(level, rng)
        assert e.row in (1, 2, 3)
        speeds.add(e.speed)
    assert speeds <= {2 * level, 2 * level + 1, 2 * level + 2}
    assert len(speeds) == 3


def test_enemy_moves_only_on_full_frames(scripted):
    e = Enemy(1, scripted(0.0, 0.5))
    assert e.speed == 3
    e.update(0.009)
    assert e.x == -101
    e.update(0.01)
    assert e.x == -98
    e.update(0.5)
    assert e.x == -95


# ── Player input ──

def test_player_starts_in_the_middle_of_the_bottom_row():
    p = Player()
    assert (p.col, p.row, p.won) == (2, 5, False)
    assert (p.x, p.y) == (202, 415)
    assert p.sprite == CHARACTERS[0]


@pytest.mark.parametrize("action,times", [("left", 10), ("right", 10), ("down", 10)])
def test_movement_clamps_at_the_edges(action, times):
    p = Player()
    for _ in range(times):
        p.handle_input(action)
        assert 0 <= p.col <= 4
        assert 0 <= p.row <= 5
    expect = {"left": (0, 5), "right": (4, 5), "down": (2, 5)}[action]
    assert (p.col, p.row) == expect
    assert (p.x, p.y) == grid_to_px(*expect)


def test_unknown_actions_are_ignored():
    p = Player()
    for a in ("jump", None, "", "UP"):
        p.handle_input(a)
    assert (p.col, p.row, p.won) == (2, 5, False)


def test_reaching_the_water_wins_once():
    calls = []
    p = Player(on_win=lambda: calls.append(1))
    for _ in range(4):
        p.handle_input("up")
    assert p.row == 1 and not p.won
    p.handle_input("up")
    assert p.row == 0 and p.won
    assert (p.x, p.y) == (202, 0)
    for a in ("up", "down", "left", "right", "up"):
        p.handle_input(a)
    assert (p.col, p.row) == (2, 0)
    assert calls == [1]


def test_reset_restores_start():
    p = Player()
    for a in ("left", "left", "up", "up", "up", "up", "up"):
        p.handle_input(a)
    assert p.won
    p.reset()
    assert (p.col, p.row, p.won) == (2, 5, False)
    assert (p.x, p.y) == (202, 415)


def test_set_character():
    p = Player()
    assert p.set_character(CHARACTERS[3])
    assert p.sprite == CHARACTERS[3]
    assert p.body.sprite == CHARACTERS[3]


def test_set_character_rejects_unloaded_ids():
    p = Player()
    assert not p.set_character("images/nobody.png")
    assert p.sprite == CHARACTERS[0]


# ── Collision ──

def _player_on_row(row):
    p = Player()
    while p.row > row:
        p.handle_input("up")
    return p


def _enemy(x, row, scripted):
    e = Enemy(1, scripted(0.0))
    e.x, e.row = x, row
    return e


def test_hitbox_is_inset():
    p = Player()
    assert (p.left, p.right) == (222, 292)


def test_collision_literals(scripted):
    p = _player_on_row(2)
    assert p.check_collision(_enemy(250, 2, scripted))
    assert not p.check_collision(_enemy(400, 2, scripted))
    assert not p.check_collision(_enemy(250, 3, scripted))


def test_collision_edges_are_inclusive(scripted):
    p = _player_on_row(1)
    # enemy spans [121, 222]: player left edge touches its right edge
    assert p.check_collision(_enemy(121, 1, scripted))
    assert not p.check_collision(_enemy(120, 1, scripted))
    # enemy starts exactly at the hitbox right edge
    assert p.check_collision(_enemy(292, 1, scripted))
    assert not p.check_collision(_enemy(293, 1, scripted))


def test_update_sends_player_back_on_hit(scripted):
    p = _player_on_row(3)
    p.handle_input("right")
    miss = _enemy(0, 3, scripted)
    hit = _enemy(p.x, 3, scripted)
    assert p.update([miss, hit])
    assert (p.col, p.row) == (2, 4)
    assert (p.x, p.y) == (202, 332)
    assert not p.update([hit])


def test_update_without_enemies_is_quiet():
    p = Player()
    assert not p.update([])
    assert (p.col, p.row) == (2, 5)
