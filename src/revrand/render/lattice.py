# src/revrand/render/lattice.py
# Plot consecutive pairs (x_n, x_n+1) of a generator as a PNG using Pillow.
# LCG output falls on a small number of parallel lines; this makes them visible.

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..rng import ReversibleRandom

BACKGROUND = (0, 0, 0, 255)
POINT = (0, 220, 0, 255)
FRAME = (80, 80, 80, 255)


def scale(v: int, m: int, size: int) -> int:
    """Map v in [0, m) onto a pixel coordinate in [0, size)."""
    return (v * size) // m


def lattice_points(engine: ReversibleRandom, count: int, size: int):
    """Advance engine count steps; return the set of pixel points hit."""
    pts = set()
    x = engine.current()
    for _ in range(count):
        y = engine.next()
        # image y grows downwards; flip so the origin is bottom-left
        pts.add((scale(x, engine.m, size), size - 1 - scale(y, engine.m, size)))
        x = y
    return pts


def render_lattice(engine: ReversibleRandom, out_png: str, count: int = 4096,
                   size: int = 256, margin: int = 4) -> int:
    pts = lattice_points(engine, count, size)
    w, h = image_size(size, margin)
    canvas = Image.new("RGBA", (w, h), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    if margin:
        draw.rectangle((0, 0, w - 1, h - 1), outline=FRAME)
    for px, py in pts:
        canvas.putpixel((margin + px, margin + py), POINT)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
    return len(pts)


def image_size(size: int, margin: int) -> Tuple[int, int]:
    return size + 2 * margin, size + 2 * margin
