"""
game.py - Game: pygame window, event pump, settings/win panels → engine commands
"""
import logging
import random
import pygame

from config import SW, SH, FPS, SPRITES, ASSET_DIR, DIFFS
from engine import GameState, tick, dispatch
from renderer import Canvas
from resources import ResourceLoader
from ui import draw_topbar, draw_sidebar, draw_win_panel

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_LEFT:  "left",
    pygame.K_UP:    "up",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN:  "down",
}
LEVEL_KEYS = {pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3}


class Game:
    def __init__(self, asset_dir=ASSET_DIR, rng=None):
        pygame.init()
        self.screen = pygame.display.set_mode((SW, SH))
        pygame.display.set_caption("Bug Crossing")
        self.clock = pygame.time.Clock()

        def make_font(size, bold=False):
            for fn in ["DejaVu Sans", "Arial", "FreeSans", None]:
                try: return pygame.font.SysFont(fn, size, bold=bold)
                except (pygame.error, OSError): pass
            return pygame.font.Font(None, size)

        self.fonts = (make_font(22), make_font(34, True), make_font(16))

        self.rng = rng or random.Random()
        self.canvas = Canvas(self.screen)
        self.state = GameState(clock=pygame.time.get_ticks)
        self.res = ResourceLoader(asset_dir)

        # UI
        self.show_set = False
        self.started = False
        self.running = True
        R = pygame.Rect(0, 0, 1, 1)
        self._tb = R                                            # settings button
        self._se = {"close": R, "chars": [], "levels": [], "restart": R}
        self._wp = {"modal": R, "close": R, "yes": R, "no": R}

        self.res.load(SPRITES)
        self.res.on_ready(self._start)

    def _start(self):
        dispatch(self.state, "reset")
        self.state.last_time = pygame.time.get_ticks()
        self.started = True
        logger.info("game started, %d sprites loaded", len(SPRITES))

    # ── Commands ──
    def restart(self):
        dispatch(self.state, "reset")

    def choose_character(self, sprite):
        if sprite != self.state.player.sprite:
            dispatch(self.state, "set_character", sprite)

    def choose_level(self, level):
        if level != self.state.difficulty.level:
            dispatch(self.state, "set_difficulty", level)

    # ── Main loop ──
    def run(self):
        while self.running:
            try:
                self._events()
            except Exception:
                logger.exception("event handling failed")

            rendered = False
            try:
                if self.started:
                    rendered = tick(self.state, pygame.time.get_ticks(),
                                    self.canvas, self.res, self.rng)
            except Exception:
                logger.exception("frame failed")

            if rendered:
                try:
                    self._draw()
                except Exception:
                    logger.exception("ui draw failed")
                pygame.display.flip()

            self.clock.tick(FPS)

        pygame.quit()

    # ── Events ──
    def _events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False; return
            if ev.type == pygame.KEYUP:
                self._key(ev.key)
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                self._click(ev.pos)

    def _key(self, key):
        if key in KEYMAP:
            self.state.player.handle_input(KEYMAP[key])
        elif key in LEVEL_KEYS:
            self.choose_level(LEVEL_KEYS[key])
        elif key == pygame.K_r:
            self.restart()
        elif key == pygame.K_s:
            self.show_set = not self.show_set
        elif key == pygame.K_ESCAPE:
            self.show_set = False; self.state.win_visible = False
        elif key == pygame.K_RETURN and self.state.win_visible:
            self.restart()

    def _click(self, pos):
        st = self.state
        if st.win_visible:
            wp = self._wp
            if wp["yes"].collidepoint(pos):
                self.restart()
            elif wp["no"].collidepoint(pos) or wp["close"].collidepoint(pos):
                st.win_visible = False
            elif not wp["modal"].collidepoint(pos):
                st.win_visible = False
            return

        if self.show_set:
            se = self._se
            if se["close"].collidepoint(pos):
                self.show_set = False; return
            for r, sprite in se["chars"]:
                if r.collidepoint(pos): self.choose_character(sprite)
            for r, lv in se["levels"]:
                if r.collidepoint(pos) and lv in DIFFS: self.choose_level(lv)
            if se["restart"].collidepoint(pos):
                self.restart()
            return

        if self._tb.collidepoint(pos):
            self.show_set = True

    # ── Draw ──
    def _draw(self):
        surf, mouse = self.screen, pygame.mouse.get_pos()
        st = self.state
        self._tb = draw_topbar(surf, self.fonts, mouse, st.difficulty.level)
        if self.show_set:
            self._se = draw_sidebar(surf, self.fonts, mouse, self.res,
                                    st.player.sprite, st.difficulty.level)
        if st.win_visible:
            self._wp = draw_win_panel(surf, self.fonts, mouse)
