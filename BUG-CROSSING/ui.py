"""
ui.py - settings sidebar, win panel, top bar

Each draw_* function paints onto the screen and returns the clickable rects,
which Game keeps until the next frame for hit-testing.
"""
import pygame
from config import PAL, SW, SH, CHARACTERS, DIFFS, DIFF_NAMES

SIDEBAR_W = 300
_THUMB = (50, 85)


# ─────────────────────────────────────────────────────
#  HELPERS
# ─────────────────────────────────────────────────────
def _panel(surf, x, y, w, h, alpha=225):
    s = pygame.Surface((w, h), pygame.SRCALPHA)
    s.fill((*PAL["ui_bg"], alpha)); surf.blit(s, (x, y))
    pygame.draw.rect(surf, PAL["ui_border"], (x, y, w, h), 1, border_radius=8)


def _btn(surf, rect, text, font, hover=False, selected=False):
    bc = PAL["ui_hover"] if hover else (38, 44, 62)
    fc = PAL["ui_gold"] if (hover or selected) else PAL["ui_text"]
    bd = PAL["ui_gold"] if selected else PAL["ui_border"]
    pygame.draw.rect(surf, bc, rect, border_radius=7)
    pygame.draw.rect(surf, bd, rect, 3 if selected else 2, border_radius=7)
    t = font.render(text, True, fc)
    surf.blit(t, (rect[0]+rect[2]//2-t.get_width()//2, rect[1]+rect[3]//2-t.get_height()//2))


def _text_center(surf, font, text, y, col=None):
    t = font.render(text, True, col or PAL["ui_text"])
    surf.blit(t, (SW//2 - t.get_width()//2, y))


# ─────────────────────────────────────────────────────
#  TOP BAR
# ─────────────────────────────────────────────────────
def draw_topbar(surf, fonts, mouse, level):
    F, Fm, Fs = fonts
    r = pygame.Rect(6, 8, 110, 32)
    _btn(surf, r, "Settings", Fs, r.collidepoint(mouse))
    t = Fs.render(f"Level {level} - {DIFF_NAMES.get(level, '?')}", True, (40, 40, 48))
    surf.blit(t, (SW - t.get_width() - 10, 16))
    return r


# ─────────────────────────────────────────────────────
#  SETTINGS SIDEBAR
# ─────────────────────────────────────────────────────
def draw_sidebar(surf, fonts, mouse, res, character, level):
    F, Fm, Fs = fonts
    _panel(surf, 0, 0, SIDEBAR_W, SH, 235)
    bs = {}

    bs["close"] = pygame.Rect(SIDEBAR_W - 40, 10, 30, 30)
    _btn(surf, bs["close"], "x", F, bs["close"].collidepoint(mouse))

    t = Fm.render("Settings", True, PAL["ui_gold"])
    surf.blit(t, (16, 12))

    surf.blit(Fs.render("Character", True, PAL["ui_dim"]), (16, 70))
    chars = []
    for i, sprite in enumerate(CHARACTERS):
        r = pygame.Rect(16 + (i % 3) * 90, 92 + (i // 3) * 110, 80, 100)
        sel = sprite == character
        hov = r.collidepoint(mouse)
        pygame.draw.rect(surf, PAL["ui_hover"] if hov else (38, 44, 62), r, border_radius=8)
        pygame.draw.rect(surf, PAL["ui_gold"] if sel else PAL["ui_border"], r,
                         3 if sel else 1, border_radius=8)
        if sprite in res:
            img = pygame.transform.scale(res.get(sprite), _THUMB)
            surf.blit(img, (r.x + (r.w - _THUMB[0])//2, r.y + 4))
        chars.append((r, sprite))
    bs["chars"] = chars

    surf.blit(Fs.render("Level", True, PAL["ui_dim"]), (16, 320))
    lvls = []
    for i, lv in enumerate(sorted(DIFFS)):
        r = pygame.Rect(16 + i * 90, 342, 80, 40)
        _btn(surf, r, DIFF_NAMES[lv], Fs, r.collidepoint(mouse), lv == level)
        lvls.append((r, lv))
    bs["levels"] = lvls

    bs["restart"] = pygame.Rect(16, 410, SIDEBAR_W - 32, 44)
    _btn(surf, bs["restart"], "Restart Game", F, bs["restart"].collidepoint(mouse))

    for i, line in enumerate(("Arrows: move", "1-3: level   R: restart", "S: settings   Esc: close")):
        surf.blit(Fs.render(line, True, PAL["ui_dim"]), (16, 480 + i * 22))
    return bs


# ─────────────────────────────────────────────────────
#  WIN PANEL
# ─────────────────────────────────────────────────────
def draw_win_panel(surf, fonts, mouse):
    F, Fm, Fs = fonts
    ov = pygame.Surface((SW, SH), pygame.SRCALPHA); ov.fill((0, 0, 0, 140)); surf.blit(ov, (0, 0))
    bs = {}
    modal = pygame.Rect(SW//2 - 200, 190, 400, 220)
    _panel(surf, *modal, 245)
    bs["modal"] = modal

    bs["close"] = pygame.Rect(modal.right - 40, modal.y + 10, 30, 30)
    _btn(surf, bs["close"], "x", F, bs["close"].collidepoint(mouse))

    _text_center(surf, Fm, "Congratulations!", modal.y + 36, PAL["ui_gold"])
    _text_center(surf, F, "You made it across.", modal.y + 92)
    _text_center(surf, F, "Play again?", modal.y + 124, PAL["ui_dim"])

    bs["yes"] = pygame.Rect(SW//2 - 130, modal.y + 160, 120, 40)
    bs["no"]  = pygame.Rect(SW//2 + 10,  modal.y + 160, 120, 40)
    _btn(surf, bs["yes"], "Yes", F, bs["yes"].collidepoint(mouse))
    _btn(surf, bs["no"],  "No",  F, bs["no"].collidepoint(mouse))
    return bs
