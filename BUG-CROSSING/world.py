"""
world.py - the fixed background board and its placeholder tile art
"""
import random
import pygame
from config import (
    PAL, COLS, ROWS, COL_W, ROW_H, BOARD_Y_OFFSET, SPRITE_W, SPRITE_H,
    ROW_IMAGES, WATER_SPRITE, STONE_SPRITE, GRASS_SPRITE,
)

# Block art: transparent above, top face from y=50, front face below
_TOP_Y   = 50
_FACE_Y  = 130

_TILE_COLS = {
    WATER_SPRITE: ("water1", "water2"),
    STONE_SPRITE: ("stone1", "stone2"),
    GRASS_SPRITE: ("grass1", "grass2"),
}


def board_cells():
    """(sprite, x, y) for every background tile, top row first."""
    return [(ROW_IMAGES[row], col * COL_W, row * ROW_H + BOARD_Y_OFFSET)
            for row in range(ROWS) for col in range(COLS)]


def draw_board(canvas, res):
    for sprite, x, y in board_cells():
        canvas.draw_image(res.get(sprite), x, y)


def is_tile(sprite_id):
    return sprite_id in _TILE_COLS


def make_tile(sprite_id):
    """Procedural stand-in for a block image."""
    light, dark = _TILE_COLS[sprite_id]
    rng = random.Random(sum(map(ord, sprite_id)))
    surf = pygame.Surface((SPRITE_W, SPRITE_H), pygame.SRCALPHA)
    pygame.draw.rect(surf, PAL[light], (0, _TOP_Y, SPRITE_W, _FACE_Y - _TOP_Y))
    pygame.draw.rect(surf, PAL[dark],  (0, _FACE_Y, SPRITE_W, SPRITE_H - _FACE_Y - 8))
    if sprite_id == WATER_SPRITE:
        for _ in range(6):
            x, y = rng.randint(4, SPRITE_W-20), rng.randint(_TOP_Y+4, _FACE_Y-10)
            pygame.draw.ellipse(surf, PAL["water2"], (x, y, rng.randint(8, 16), 4))
    else:
        for _ in range(10):
            x, y = rng.randint(2, SPRITE_W-3), rng.randint(_TOP_Y+2, _FACE_Y-3)
            pygame.draw.circle(surf, PAL[dark], (x, y), rng.randint(1, 3))
    pygame.draw.line(surf, PAL[dark], (0, _TOP_Y), (SPRITE_W, _TOP_Y), 1)
    return surf
