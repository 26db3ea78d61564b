"""
entities.py - Body (shared grid position), Enemy, Player
"""
import logging
import math
import random

from config import (
    COL_W, ROW_H, COLS, ROWS, FRAME_DT,
    ENEMY_SPRITE, ENEMY_START_X, ENEMY_W, ENEMY_ROWS,
    START_COL, START_ROW, HIT_COL, HIT_ROW, GOAL_ROW,
    HITBOX_INSET, HITBOX_W, CHARACTERS, DEFAULT_CHARACTER,
)

logger = logging.getLogger(__name__)


def grid_to_px(col, row):
    return col * COL_W, row * ROW_H


class Body:
    """Anything drawn on the grid: sprite id, grid row, pixel position."""
    __slots__ = ("sprite", "row", "x", "y")

    def __init__(self, sprite, row, x):
        self.sprite = sprite
        self.row = row
        self.x = x
        self.y = row * ROW_H

    def draw(self, canvas, res):
        canvas.draw_image(res.get(self.sprite), self.x, self.y)

    def __repr__(self):
        return f"Body({self.sprite!r}, row={self.row}, x={self.x}, y={self.y})"


def _body_attr(name):
    return property(lambda self: getattr(self.body, name),
                    lambda self, v: setattr(self.body, name, v))


# ─────────────────────────────────────────────────────
#  ENEMY
# ─────────────────────────────────────────────────────
class Enemy:
    sprite = _body_attr("sprite")
    row = _body_attr("row")
    x = _body_attr("x")
    y = _body_attr("y")

    def __init__(self, level=1, rng=random):
        # row first, then speed
        row = ENEMY_ROWS[0] + math.floor(rng.random() * len(ENEMY_ROWS))
        self.body = Body(ENEMY_SPRITE, row, ENEMY_START_X)
        self.level = level
        self.speed = math.floor(rng.random() * 3) + level * 2

    def update(self, dt):
        if dt >= FRAME_DT:
            self.x += self.speed

    def draw(self, canvas, res):
        self.body.draw(canvas, res)

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + ENEMY_W


# ─────────────────────────────────────────────────────
#  PLAYER
# ─────────────────────────────────────────────────────
class Player:
    sprite = _body_attr("sprite")
    row = _body_attr("row")
    x = _body_attr("x")
    y = _body_attr("y")

    def __init__(self, sprite=DEFAULT_CHARACTER, on_win=None):
        self.col = START_COL
        self.body = Body(sprite, START_ROW, START_COL * COL_W)
        self.won = False
        self.on_win = on_win

    def _place(self):
        self.x, self.y = grid_to_px(self.col, self.row)

    def set_character(self, sprite):
        # only ids the loader was asked for can be drawn
        if sprite not in CHARACTERS: return False
        self.sprite = sprite
        return True

    # ── Hitbox ──
    @property
    def left(self):
        return self.x + HITBOX_INSET

    @property
    def right(self):
        return self.left + HITBOX_W

    def check_collision(self, enemy):
        if self.row != enemy.row: return False
        lo, hi = enemy.left, enemy.right
        # edge containment only; the hitbox is narrower than a bug
        return lo <= self.left <= hi or lo <= self.right <= hi

    def update(self, enemies):
        """Resolve collisions for this frame's positions. True if hit."""
        for e in enemies:
            if self.check_collision(e):
                logger.debug("hit by bug at x=%s row=%s", e.x, e.row)
                self.col, self.row = HIT_COL, HIT_ROW
                self._place()
                return True
        return False

    # ── Input ──
    def handle_input(self, action):
        if self.row > GOAL_ROW:
            if action == "left":
                self.col = max(0, self.col - 1)
            elif action == "right":
                self.col = min(COLS - 1, self.col + 1)
            elif action == "up":
                self.row = max(GOAL_ROW, self.row - 1)
                if self.row == GOAL_ROW:
                    self.wins()
            elif action == "down":
                self.row = min(ROWS - 1, self.row + 1)
        self._place()

    def wins(self):
        self.won = True
        logger.info("player reached the water")
        if self.on_win is not None:
            self.on_win()

    def reset(self):
        self.col, self.row = START_COL, START_ROW
        self._place()
        self.won = False

    def draw(self, canvas, res):
        self.body.draw(canvas, res)
