#!/usr/bin/env python3
# Interactive stepper for a reversible generator.
# - Right / PageUp: next      Left / PageDown: prev
# - R: toggle ranged mode (projects onto --range LO HI)
# - J: jump forward --jump steps, Shift+J jumps back
# - 60 Hz fixed loop

import argparse
import pygame
from revrand.config import DEFAULT, preset
from revrand.errors import RevrandError
from revrand.render.strip import draw_strip
from revrand.rng import ReversibleRandom

HISTORY = 64


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--preset", type=str, help="Named parameter set")
    ap.add_argument("--seed", type=int, default=None, help="Initial value (random when omitted)")
    ap.add_argument("--range", type=int, nargs=2, default=(1, 6), metavar=("LO", "HI"))
    ap.add_argument("--jump", type=int, default=100, help="Steps per J press")
    ap.add_argument("--width", type=int, default=640)
    ap.add_argument("--height", type=int, default=240)
    args = ap.parse_args()

    try:
        rng = ReversibleRandom.from_params(preset(args.preset) if args.preset else DEFAULT)
        if args.seed is not None:
            rng.set_initial(args.seed)
    except RevrandError as e:
        raise SystemExit(f"[viewer] {e}")

    lo, hi = args.range
    ranged = False
    pos = 0

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width, args.height))

    # Window of values centred on the cursor; rebuilt from the generator itself
    # by walking back, which only works because the sequence is reversible.
    def window():
        probe = ReversibleRandom(rng.a, rng.c, rng.m, rng.inv_a, source=lambda n: 0)
        probe.set_initial(rng.current())
        probe.jump(-(HISTORY // 2))
        vals = []
        for _ in range(HISTORY):
            vals.append(probe.range_current(lo, hi) - lo if ranged else probe.current())
            probe.next()
        return vals

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_RIGHT, pygame.K_PAGEUP):
                    rng.next()
                    pos += 1
                elif ev.key in (pygame.K_LEFT, pygame.K_PAGEDOWN):
                    rng.prev()
                    pos -= 1
                elif ev.key == pygame.K_j:
                    n = -args.jump if ev.mod & pygame.KMOD_SHIFT else args.jump
                    rng.jump(n)
                    pos += n
                elif ev.key == pygame.K_r:
                    try:
                        rng.range_current(lo, hi)
                        ranged = not ranged
                    except RevrandError as e:
                        print(f"[viewer] ranged mode unavailable: {e}")

        m = (hi - lo + 1) if ranged else rng.m
        draw_strip(screen, window(), m, cursor=HISTORY // 2)
        value = rng.range_current(lo, hi) if ranged else rng.current()
        mode = f"RANGE {lo}..{hi}" if ranged else f"0..{rng.RAND_MAX}"
        pygame.display.set_caption(f"revrand viewer — step {pos}  value {value}  [{mode}]")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
