# src/revrand/entropy.py
"""
Randomness sources: callables source(n) -> int in [0, n).

The engine only draws from a source when seeding itself and when picking a
window in set_range_initial; tests swap in a seeded or fixed source.
"""

import random
from typing import Callable, Iterable

Source = Callable[[int], int]

_system = random.SystemRandom()


def system_source(n: int) -> int:
    """Non-reproducible draw from the OS entropy pool."""
    return _system.randrange(n)


def seeded_source(seed: int) -> Source:
    """Reproducible source with its own private random.Random."""
    r = random.Random(seed)

    def source(n: int) -> int:
        return r.randrange(n)
    return source


def make_fixed_source(values: Iterable[int]) -> Source:
    """
    Deterministic source for tests:
      cycles through values, each reduced mod n.
    """
    vals = list(values)
    if not vals:
        raise ValueError("make_fixed_source needs at least one value")
    calls = 0

    def source(n: int) -> int:
        nonlocal calls
        v = vals[calls % len(vals)]
        calls += 1
        return v % n
    return source
