# src/revrand/render/strip.py
from __future__ import annotations
import pygame
from typing import Sequence, Tuple

BAR = (0, 220, 0)
CURSOR = (255, 220, 0)
BACKGROUND = (24, 24, 24)

def bar_rect(index: int, value: int, m: int, bar_w: int, height: int) -> pygame.Rect:
    """Rect for one bar; height scales with value/m, at least 1px tall."""
    h = max(1, (value * height) // m) if m > 1 else 1
    return pygame.Rect(index * bar_w, height - h, bar_w, h)

def draw_strip(surface: pygame.Surface, values: Sequence[int], m: int, cursor: int = -1) -> Tuple[int, int]:
    """
    Draw one vertical bar per value, the bar at index cursor highlighted.
    Returns (bars drawn, bar width). No display or font needed, so this
    works on off-screen surfaces.
    """
    surface.fill(BACKGROUND)
    if not values:
        return 0, 0
    w, h = surface.get_size()
    bar_w = max(1, w // len(values))
    drawn = 0
    for i, v in enumerate(values):
        r = bar_rect(i, v, m, bar_w, h)
        if r.left >= w:
            break
        pygame.draw.rect(surface, CURSOR if i == cursor else BAR, r)
        drawn += 1
    return drawn, bar_w
