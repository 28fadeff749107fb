#!/usr/bin/env python3
# src/revrand/tool.py
# revtool: command-line access to the reversible generator.
#   revtool inverse 5 16
#   revtool walk --preset classic --seed 1 --steps 10 [--back] [--range 1 6] [--out walk.tsv]
#   revtool check --trials 1000
#   revtool lattice --a 5 --c 3 --m 16 --out out/lattice.png

import argparse, csv, random, sys

from .config import DEFAULT, preset
from .entropy import seeded_source
from .errors import RevrandError
from .modinv import modular_inverse
from .render.lattice import render_lattice
from .rng import ReversibleRandom


def build_engine(args) -> ReversibleRandom:
    params = preset(args.preset) if args.preset else DEFAULT
    a = params.a if args.a is None else args.a
    c = params.c if args.c is None else args.c
    m = params.m if args.m is None else args.m
    inv_a = params.inv_a if (a, m) == (params.a, params.m) else None
    source = seeded_source(args.entropy) if args.entropy is not None else None
    return ReversibleRandom(a, c, m, inv_a, source=source)


def write_rows(rows, out):
    w = csv.writer(out, delimiter='\t', lineterminator='\n')
    w.writerow(["step", "value"])
    for r in rows:
        w.writerow(r)


def cmd_inverse(args):
    print(modular_inverse(args.a, args.n))
    return 0


def cmd_walk(args):
    rng = build_engine(args)
    if args.range:
        lo, hi = args.range
        if args.seed is not None:
            rng.set_range_initial(args.seed, lo, hi)
        step = (lambda: rng.range_prev(lo, hi)) if args.back else (lambda: rng.range_next(lo, hi))
        first = rng.range_current(lo, hi)
    else:
        if args.seed is not None:
            rng.set_initial(args.seed)
        step = rng.prev if args.back else rng.next
        first = rng.current()
    sign = -1 if args.back else 1
    rows = [(0, first)] + [(sign * n, step()) for n in range(1, args.steps + 1)]
    if args.out:
        with open(args.out, 'w', newline='') as f:
            write_rows(rows, f)
        print(f"[revtool] wrote {len(rows)} rows to {args.out}")
    else:
        write_rows(rows, sys.stdout)
    return 0


def cmd_check(args):
    rng = build_engine(args)
    r = random.Random(args.entropy)
    failures = 0
    for _ in range(args.trials):
        x = r.randrange(rng.m)
        rng.set_initial(x)
        rng.next()
        back = rng.prev()
        rng.prev()
        fwd = rng.next()
        if back != x or fwd != x:
            failures += 1
            print(f"[revtool] round trip failed from {x}: prev(next)={back} next(prev)={fwd}")
    print(f"[revtool] a={rng.a} c={rng.c} m={rng.m} inv_a={rng.inv_a}: "
          f"{args.trials - failures}/{args.trials} round trips ok")
    return 1 if failures else 0


def cmd_lattice(args):
    rng = build_engine(args)
    if args.seed is not None:
        rng.set_initial(args.seed)
    n = render_lattice(rng, args.out, count=args.count, size=args.size)
    print(f"[revtool] plotted {n} points to {args.out}")
    return 0


def add_engine_args(p):
    p.add_argument('--preset', type=str, help="Named parameter set (classic, park_miller, ...)")
    p.add_argument('--a', type=int, help="Multiplier (overrides preset)")
    p.add_argument('--c', type=int, help="Increment (overrides preset)")
    p.add_argument('--m', type=int, help="Modulus (overrides preset)")
    p.add_argument('--entropy', type=int, help="Seed for the randomness source (reproducible runs)")


def make_parser():
    p = argparse.ArgumentParser(prog='revtool')
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('inverse', help="Modular inverse of A mod N")
    p1.add_argument('a', type=int)
    p1.add_argument('n', type=int)
    p1.set_defaults(func=cmd_inverse)

    p2 = sub.add_parser('walk', help="Print a stretch of the sequence as TSV")
    add_engine_args(p2)
    p2.add_argument('--seed', type=int, help="Initial value (random when omitted)")
    p2.add_argument('--steps', type=int, default=10)
    p2.add_argument('--back', action='store_true', help="Walk backwards with prev")
    p2.add_argument('--range', type=int, nargs=2, metavar=('LO', 'HI'))
    p2.add_argument('--out', type=str)
    p2.set_defaults(func=cmd_walk)

    p3 = sub.add_parser('check', help="Randomized round-trip check")
    add_engine_args(p3)
    p3.add_argument('--trials', type=int, default=1000)
    p3.set_defaults(func=cmd_check)

    p4 = sub.add_parser('lattice', help="Render (x_n, x_n+1) pairs to PNG")
    add_engine_args(p4)
    p4.add_argument('--seed', type=int)
    p4.add_argument('--count', type=int, default=4096)
    p4.add_argument('--size', type=int, default=256)
    p4.add_argument('--out', type=str, required=True)
    p4.set_defaults(func=cmd_lattice)
    return p


def main(argv=None):
    args = make_parser().parse_args(argv)
    try:
        return args.func(args)
    except RevrandError as e:
        print(f"[revtool] error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
