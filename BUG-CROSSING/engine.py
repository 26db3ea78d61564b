"""
engine.py - game loop: spawn, update, prune, render, reset, commands

All mutable game data lives in one GameState passed to the loop functions.
The host calls tick() once per frame with a millisecond timestamp.
"""
import heapq
import itertools
import logging
import random

from config import SW, SH, FRAME_DT, PRUNE_MARGIN, WIN_DELAY_MS
from difficulty import Difficulty
from entities import Enemy, Player
from world import draw_board

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────
#  TIMERS
# ─────────────────────────────────────────────────────
class Timers:
    """Deferred callbacks fired from the frame loop."""

    def __init__(self, clock):
        self.clock = clock
        self._q = []
        self._ids = itertools.count()
        self._live = set()

    def call_later(self, delay_ms, fn):
        h = next(self._ids)
        heapq.heappush(self._q, (self.clock() + delay_ms, h, fn))
        self._live.add(h)
        return h

    def cancel(self, h):
        self._live.discard(h)

    def clear(self):
        self._q.clear(); self._live.clear()

    def run_due(self, now):
        fired = 0
        while self._q and self._q[0][0] <= now:
            _, h, fn = heapq.heappop(self._q)
            if h not in self._live: continue
            self._live.discard(h)
            fn(); fired += 1
        return fired

    def __len__(self):
        return len(self._live)


# ─────────────────────────────────────────────────────
#  STATE
# ─────────────────────────────────────────────────────
class GameState:
    def __init__(self, clock, player=None, difficulty=None, width=SW, height=SH):
        self.player = player or Player()
        self.enemies = []
        self.difficulty = difficulty or Difficulty()
        self.width, self.height = width, height
        self.timers = Timers(clock)
        self.last_time = clock()
        self.win_visible = False
        self._win_timer = None
        self.player.on_win = self._schedule_win_panel

    @property
    def won(self):
        return self.player.won

    def _schedule_win_panel(self):
        self._win_timer = self.timers.call_later(WIN_DELAY_MS, self._show_win_panel)

    def _show_win_panel(self):
        self._win_timer = None
        self.win_visible = True

    def cancel_win_panel(self):
        if self._win_timer is not None:
            self.timers.cancel(self._win_timer)
            self._win_timer = None
        self.win_visible = False


# ─────────────────────────────────────────────────────
#  LOOP
# ─────────────────────────────────────────────────────
def tick(state, now, canvas, res, rng=random):
    """One frame. Returns True when the frame was rendered."""
    dt = (now - state.last_time) / 1000.0
    state.timers.run_due(now)

    if not state.player.won:
        update(state, dt, rng)

    if dt >= FRAME_DT:
        render(state, canvas, res)
        state.last_time = now
        return True
    return False


def update(state, dt, rng=random):
    enemies = state.enemies
    if not enemies or enemies[-1].x > state.difficulty.sample_gap(rng):
        e = Enemy(state.difficulty.level, rng)
        enemies.append(e)
        logger.debug("spawned bug row=%d speed=%d (%d live)", e.row, e.speed, len(enemies))
    update_entities(state, dt)


def update_entities(state, dt):
    limit = state.width + PRUNE_MARGIN
    alive = []
    for e in state.enemies:
        if e.x > limit:
            logger.debug("pruned bug at x=%s", e.x)
            continue
        e.update(dt)
        alive.append(e)
    state.enemies[:] = alive


def render(state, canvas, res):
    canvas.clear_rect(0, 0, state.width, state.height)
    draw_board(canvas, res)
    render_entities(state, canvas, res)
    # collisions are resolved once per drawn frame
    state.player.update(state.enemies)


def render_entities(state, canvas, res):
    for e in state.enemies:
        e.draw(canvas, res)
    state.player.draw(canvas, res)


def reset(state):
    state.enemies.clear()
    state.player.reset()
    state.timers.clear()
    state.cancel_win_panel()
    logger.info("game reset (level %s)", state.difficulty.level)


# ─────────────────────────────────────────────────────
#  COMMANDS
# ─────────────────────────────────────────────────────
def _set_character(state, sprite):
    if not state.player.set_character(sprite):
        logger.warning("unknown character %r", sprite)
        return False
    logger.info("character set to %s", sprite)
    return True


def _set_difficulty(state, level):
    ok = state.difficulty.change(level)
    if ok: logger.info("difficulty set to %d", level)
    return ok


def _reset(state):
    reset(state)
    return True


COMMANDS = {
    "reset":          _reset,
    "set_character":  _set_character,
    "set_difficulty": _set_difficulty,
}


def dispatch(state, command, *args):
    fn = COMMANDS.get(command)
    if fn is None:
        logger.warning("unknown command %r", command)
        return False
    return fn(state, *args)
