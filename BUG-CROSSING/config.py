"""
config.py - constants: screen, grid, timing, difficulty, sprites, palette
"""
import os

# Screen / canvas
SW, SH = 505, 606
FPS    = 60

# Board grid - 6 rows × 5 cols, tile footprint 101×83
COLS, ROWS   = 5, 6
COL_W, ROW_H = 101, 83
BOARD_Y_OFFSET = 15      # background tiles sit 15px lower than entities
SPRITE_W, SPRITE_H = 101, 171

# Frame cadence - 0.01s ≈ 100fps
FRAME_DT = 0.01

# Enemies
ENEMY_START_X = -101     # just off the left edge
ENEMY_W       = 101
ENEMY_ROWS    = (1, 2, 3)  # stone road rows
PRUNE_MARGIN  = 300

# Player
START_COL, START_ROW = 2, 5
HIT_COL,   HIT_ROW   = 2, 4   # where a collision sends the player
HITBOX_INSET = 20
HITBOX_W     = 70
GOAL_ROW     = 0

WIN_DELAY_MS = 1000

# level → (min_gap, max_gap) between consecutive spawns
DIFFS = {
    1: (100, 300),
    2: (80, 220),
    3: (50, 150),
}
DIFF_NAMES = {1: "Easy", 2: "Medium", 3: "Hard"}

# Sprites
WATER_SPRITE = "images/water-block.png"
STONE_SPRITE = "images/stone-block.png"
GRASS_SPRITE = "images/grass-block.png"
ENEMY_SPRITE = "images/enemy-bug.png"

ROW_IMAGES = [
    WATER_SPRITE,   # goal
    STONE_SPRITE,
    STONE_SPRITE,
    STONE_SPRITE,
    GRASS_SPRITE,
    GRASS_SPRITE,
]

CHARACTERS = [
    "images/char-boy.png",
    "images/char-cat-girl.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
    "images/char-princess-girl.png",
]
DEFAULT_CHARACTER = CHARACTERS[0]

SPRITES = [STONE_SPRITE, WATER_SPRITE, GRASS_SPRITE, ENEMY_SPRITE] + CHARACTERS

ASSET_DIR = os.environ.get("BUG_CROSSING_ASSETS", os.path.join(os.getcwd(), "assets"))

# Palette
PAL = {
    "bg":        (255, 255, 255),
    "water1":    (60, 120, 220),
    "water2":    (95, 160, 240),
    "stone1":    (150, 150, 158),
    "stone2":    (118, 118, 126),
    "grass1":    (70, 170, 70),
    "grass2":    (52, 135, 52),
    "bug":       (205, 40, 40),
    "bug_dark":  (120, 20, 20),
    "eye":       (250, 250, 250),
    "skin":      (245, 205, 165),
    "ui_bg":     (20, 24, 32),
    "ui_text":   (232, 232, 236),
    "ui_dim":    (150, 150, 165),
    "ui_gold":   (255, 210, 70),
    "ui_border": (90, 100, 130),
    "ui_hover":  (60, 74, 110),
}

# Tint per character for placeholder art
CHAR_COLS = {
    "char-boy":            (60, 110, 210),
    "char-cat-girl":       (230, 140, 60),
    "char-horn-girl":      (150, 80, 190),
    "char-pink-girl":      (240, 120, 170),
    "char-princess-girl":  (245, 205, 60),
}

# Logging
LOG_LEVEL  = os.environ.get("BUG_CROSSING_LOG", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
