"""
renderer.py - Canvas: the drawing surface the game loop paints on
"""
import pygame
from config import PAL


class Canvas:
    """draw_image / clear_rect over a pygame Surface, pixel coordinates."""

    def __init__(self, surf, bg=None):
        self.surf = surf
        self.bg = bg or PAL["bg"]

    @property
    def width(self):
        return self.surf.get_width()

    @property
    def height(self):
        return self.surf.get_height()

    def draw_image(self, image, x, y):
        self.surf.blit(image, (int(x), int(y)))

    def clear_rect(self, x, y, w, h):
        self.surf.fill(self.bg, pygame.Rect(int(x), int(y), int(w), int(h)))
