# src/revrand/arith.py
"""
Integer backends for the generator's modular arithmetic.

The recurrence multiplies two residues (cur*a, or (cur-c)*inv_a), which needs
room for m*(m-1). Python ints never overflow, so BigIntArith accepts any
modulus; FixedWidthArith emulates an unsigned machine word and refuses moduli
whose products would not fit.
"""

from math import isqrt
from typing import Union

from .errors import ConfigurationError


def wrap(v: int, bits: int) -> int:
    """Interpret v as an unsigned bits-wide word."""
    return v & ((1 << bits) - 1)


def fits(v: int, bits: int) -> bool:
    return 0 <= v < (1 << bits)


def max_modulus_for(bits: int) -> int:
    """Largest m with m*(m-1) < 2**bits."""
    limit = 1 << bits
    m = isqrt(limit) + 2
    while m * (m - 1) >= limit:
        m -= 1
    return m


class BigIntArith:
    name = "bigint"
    max_modulus = None

    def check_modulus(self, m: int) -> None:
        pass

    def mulmod(self, x: int, y: int, m: int) -> int:
        return (x * y) % m

    def addmod(self, x: int, y: int, m: int) -> int:
        return (x + y) % m

    def submod(self, x: int, y: int, m: int) -> int:
        return (x - y) % m

    def __repr__(self) -> str:
        return "BigIntArith()"


class FixedWidthArith:
    """
    Unsigned fixed-width arithmetic. Every intermediate result is checked
    against the word size and raises OverflowError instead of wrapping.
    """

    def __init__(self, bits: int = 64):
        if bits < 2:
            raise ConfigurationError(f"word width must be at least 2 bits, got {bits}")
        self.bits = bits
        self.name = f"u{bits}"
        self.max_modulus = max_modulus_for(bits)

    def check_modulus(self, m: int) -> None:
        if m > self.max_modulus:
            raise ConfigurationError(
                f"modulus {m} too large for {self.bits}-bit arithmetic "
                f"(max {self.max_modulus})"
            )

    def _checked(self, v: int) -> int:
        if not fits(v, self.bits):
            raise OverflowError(f"{v} does not fit in {self.bits} bits")
        return v

    def mulmod(self, x: int, y: int, m: int) -> int:
        return self._checked(x * y) % m

    def addmod(self, x: int, y: int, m: int) -> int:
        return self._checked(x + y) % m

    def submod(self, x: int, y: int, m: int) -> int:
        # x, y are residues; add m first so the word never goes negative.
        return self._checked(x + m - y) % m

    def __repr__(self) -> str:
        return f"FixedWidthArith({self.bits})"


Arith = Union[BigIntArith, FixedWidthArith]
