"""
resources.py - ResourceLoader: load + cache sprite images, readiness callbacks

Images live under ASSET_DIR keyed by their relative id ("images/enemy-bug.png").
A missing or broken file is replaced by placeholder art drawn in code, so the
game is playable without the image pack.
"""
import logging
import os
import pygame

from config import PAL, SPRITE_W, SPRITE_H, CHAR_COLS, ENEMY_SPRITE, ASSET_DIR
from world import is_tile, make_tile

logger = logging.getLogger(__name__)


class ResourceLoader:
    def __init__(self, base_dir=ASSET_DIR):
        self.base_dir = base_dir
        self._cache = {}
        self._loading = set()
        self._callbacks = []

    def load(self, ids):
        if isinstance(ids, str): ids = [ids]
        for sid in ids:
            if sid in self._cache: continue
            self._loading.add(sid)
            self._cache[sid] = self._load_one(sid)
            self._loading.discard(sid)
        if self.is_ready():
            self._fire()

    def _load_one(self, sid):
        path = os.path.join(self.base_dir, sid)
        try:
            img = pygame.image.load(path)
        except (FileNotFoundError, pygame.error) as e:
            logger.warning("using placeholder for %s (%s)", sid, e)
            img = placeholder(sid)
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        return img

    def get(self, sid):
        try:
            return self._cache[sid]
        except KeyError:
            raise KeyError(f"resource not loaded: {sid}") from None

    def is_ready(self):
        return not self._loading and bool(self._cache)

    def on_ready(self, fn):
        if self.is_ready():
            fn()
        else:
            self._callbacks.append(fn)

    def _fire(self):
        cbs, self._callbacks = self._callbacks, []
        for fn in cbs:
            fn()

    def __contains__(self, sid):
        return sid in self._cache


# ─────────────────────────────────────────────────────
#  PLACEHOLDER ART
# ─────────────────────────────────────────────────────
def placeholder(sid):
    if is_tile(sid): return make_tile(sid)
    if sid == ENEMY_SPRITE: return make_bug()
    name = os.path.splitext(os.path.basename(sid))[0]
    return make_character(CHAR_COLS.get(name, PAL["ui_dim"]))


def make_bug():
    surf = pygame.Surface((SPRITE_W, SPRITE_H), pygame.SRCALPHA)
    # legs
    for i in range(3):
        lx = 28 + i*18
        pygame.draw.line(surf, PAL["bug_dark"], (lx, 92), (lx-6, 84), 3)
        pygame.draw.line(surf, PAL["bug_dark"], (lx, 128), (lx-6, 136), 3)
    pygame.draw.ellipse(surf, PAL["bug"], (6, 86, 82, 48))
    pygame.draw.ellipse(surf, PAL["bug_dark"], (6, 86, 82, 48), 2)
    pygame.draw.line(surf, PAL["bug_dark"], (10, 110), (70, 110), 2)
    # head faces right
    pygame.draw.circle(surf, PAL["bug_dark"], (88, 110), 12)
    pygame.draw.circle(surf, PAL["eye"], (92, 105), 4)
    pygame.draw.circle(surf, PAL["eye"], (92, 115), 4)
    return surf


def make_character(col):
    surf = pygame.Surface((SPRITE_W, SPRITE_H), pygame.SRCALPHA)
    pygame.draw.ellipse(surf, (0, 0, 0, 60), (24, 130, 54, 12))
    pygame.draw.rect(surf, col, (34, 96, 34, 38), border_radius=8)
    pygame.draw.circle(surf, PAL["skin"], (51, 80), 20)
    pygame.draw.arc(surf, col, pygame.Rect(31, 58, 40, 30), 0, 3.1416, 6)
    pygame.draw.circle(surf, (30, 20, 10), (44, 82), 3)
    pygame.draw.circle(surf, (30, 20, 10), (58, 82), 3)
    return surf
