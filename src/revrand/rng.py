# src/revrand/rng.py
"""
Reversible linear congruential generator.

    next:  cur' = (cur * a + c) mod m
    prev:  cur  = ((cur' - c) mod m * inv_a) mod m

inv_a is the inverse of a mod m, so prev undoes next exactly and the sequence
can be walked in either direction forever.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .arith import Arith, BigIntArith
from .config import DEFAULT, LCGParams
from .entropy import Source, system_source
from .errors import ConfigurationError, RangeError
from .modinv import is_inverse, modular_inverse


class ReversibleRandom:
    def __init__(
        self,
        a: int = DEFAULT.a,
        c: int = DEFAULT.c,
        m: int = DEFAULT.m,
        inv_a: Optional[int] = None,
        *,
        source: Optional[Source] = None,
        arith: Optional[Arith] = None,
    ):
        if m <= 0:
            raise ConfigurationError(f"m must be positive, got {m}")
        if not 0 <= a < m:
            raise ConfigurationError(f"a must be in [0, {m}), got {a}")
        if not 0 <= c < m:
            raise ConfigurationError(f"c must be in [0, {m}), got {c}")
        self.arith = arith if arith is not None else BigIntArith()
        self.arith.check_modulus(m)

        if inv_a is not None:
            if not is_inverse(a, inv_a, m):
                raise ConfigurationError(f"inv_a={inv_a} is not the inverse of {a} mod {m}")
            inv_a %= m
        else:
            inv_a = modular_inverse(a, m)

        self.a = a
        self.c = c
        self.m = m
        self.inv_a = inv_a
        self.RAND_MAX = m - 1
        self.source = source if source is not None else system_source
        self.cur = self.source(m) % m

    @classmethod
    def from_params(cls, params: LCGParams, *, source: Optional[Source] = None,
                    arith: Optional[Arith] = None) -> ReversibleRandom:
        return cls(params.a, params.c, params.m, params.inv_a, source=source, arith=arith)

    @property
    def params(self) -> LCGParams:
        return LCGParams(self.a, self.c, self.m, self.inv_a)

    def __repr__(self) -> str:
        return f"ReversibleRandom(a={self.a}, c={self.c}, m={self.m}, cur={self.cur})"

    # ---------- full-modulus sequence ----------

    def set_initial(self, i: int) -> None:
        if not 0 <= i < self.m:
            raise RangeError(f"initial value {i} outside [0, {self.RAND_MAX}]")
        self.cur = i

    def next(self) -> int:
        ar = self.arith
        self.cur = ar.addmod(ar.mulmod(self.cur, self.a, self.m), self.c, self.m)
        return self.cur

    def prev(self) -> int:
        ar = self.arith
        self.cur = ar.mulmod(ar.submod(self.cur, self.c, self.m), self.inv_a, self.m)
        return self.cur

    def current(self) -> int:
        return self.cur

    def jump(self, n: int) -> int:
        """
        Move n steps (backwards when n < 0) in O(log |n|) by squaring the
        affine map x -> g*x + k.
        """
        ar, m = self.arith, self.m
        if n >= 0:
            g, k = self.a, self.c
        else:
            # inverse map: x -> inv_a*x - inv_a*c
            g = self.inv_a
            k = ar.mulmod(ar.submod(0, self.c, m), self.inv_a, m)
            n = -n
        g_acc, k_acc = 1 % m, 0
        while n > 0:
            if n & 1:
                g_acc = ar.mulmod(g_acc, g, m)
                k_acc = ar.addmod(ar.mulmod(k_acc, g, m), k, m)
            k = ar.mulmod(ar.addmod(g, 1, m), k, m)
            g = ar.mulmod(g, g, m)
            n >>= 1
        self.cur = ar.addmod(ar.mulmod(g_acc, self.cur, m), k_acc, m)
        return self.cur

    # ---------- ranged views over [lo, hi] ----------
    # The full state keeps stepping over [0, m); only the returned value is
    # projected with cur % span, so ranged calls stay exactly reversible.

    def _span(self, lo: int, hi: int) -> int:
        if lo > hi:
            raise RangeError(f"empty range [{lo}, {hi}]")
        span = hi - lo + 1
        if span > self.m:
            raise RangeError(f"range [{lo}, {hi}] wider than modulus {self.m}")
        return span

    def set_range_initial(self, i: int, lo: int, hi: int) -> None:
        """
        Start so that range_current(lo, hi) == i, placing the state in a
        random window k >= 1 (cur = (i - lo) + k*span) rather than the
        zero-th one. Falls back to k = 0 when the range is too wide for any
        other window to fit below m.
        """
        span = self._span(lo, hi)
        if not lo <= i <= hi:
            raise RangeError(f"initial value {i} outside [{lo}, {hi}]")
        offset = i - lo
        k_max = (self.m - 1 - offset) // span
        k = 1 + self.source(k_max) % k_max if k_max >= 1 else 0
        self.cur = offset + k * span

    def range_next(self, lo: int, hi: int) -> int:
        span = self._span(lo, hi)
        return self.next() % span + lo

    def range_prev(self, lo: int, hi: int) -> int:
        span = self._span(lo, hi)
        return self.prev() % span + lo

    def range_current(self, lo: int, hi: int) -> int:
        span = self._span(lo, hi)
        return self.cur % span + lo

    def window(self, lo: int, hi: int) -> Tuple[int, int]:
        """(k, offset) of the current state for span hi - lo + 1."""
        return divmod(self.cur, self._span(lo, hi))
