# src/revrand/period.py
# Period measurements. The ranged sequence has no proven period, so it is
# measured per configuration instead.

from __future__ import annotations

import copy
from math import gcd
from typing import Optional, Tuple

from .rng import ReversibleRandom


def _primes_divide(m: int, d: int) -> bool:
    """
    True when every prime factor of m also divides d. Strips from m whatever
    it shares with d; a leftover > 1 holds a prime d lacks. No factoring, so
    large prime moduli cost a few gcds.
    """
    g = gcd(m, d)
    while g != 1:
        m //= g
        g = gcd(m, g)
    return m == 1


def has_full_period(a: int, c: int, m: int) -> bool:
    """
    Hull-Dobell: x -> (a*x + c) mod m visits all m states iff
      - gcd(c, m) == 1
      - a - 1 is divisible by every prime factor of m
      - a - 1 is divisible by 4 when m is
    """
    if m == 1:
        return True
    if gcd(c, m) != 1:
        return False
    if not _primes_divide(m, a - 1):
        return False
    if m % 4 == 0 and (a - 1) % 4:
        return False
    return True


def cycle_length(engine: ReversibleRandom, limit: int) -> Optional[int]:
    """Steps until the state repeats, or None past limit. engine is untouched."""
    probe = copy.copy(engine)
    start = probe.current()
    for n in range(1, limit + 1):
        if probe.next() == start:
            return n
    return None


def range_cycle_length(engine: ReversibleRandom, lo: int, hi: int, limit: int) -> Tuple[Optional[int], int]:
    """(cycle length, distinct projected values seen along the way)."""
    probe = copy.copy(engine)
    start = probe.current()
    seen = {probe.range_current(lo, hi)}
    for n in range(1, limit + 1):
        seen.add(probe.range_next(lo, hi))
        if probe.current() == start:
            return n, len(seen)
    return None, len(seen)
