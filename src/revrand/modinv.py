# src/revrand/modinv.py
"""
Modular inverse via the extended Euclidean algorithm.

Python floor division matches % for a positive divisor, so the loop below can
use the textbook back-substitution as-is (inputs must be non-negative).
"""

from typing import Tuple

from .errors import ConfigurationError, NotInvertibleError


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g == gcd(a, b)."""
    # Iterative: one Euclid step per loop, so moduli of thousands of bits
    # never touch the recursion limit.
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def modular_inverse(a: int, n: int) -> int:
    """
    Return x in [0, n) such that (a * x) % n == 1 % n.
    Raises NotInvertibleError when gcd(a, n) != 1.
    """
    if n <= 0:
        raise ConfigurationError(f"modulus must be positive, got {n}")
    g, x, _ = extended_gcd(a % n, n)
    if g != 1:
        raise NotInvertibleError(a, n, g)
    return x % n


def is_inverse(a: int, inv_a: int, n: int) -> bool:
    # Congruence form so n == 1 (where every residue is 0) stays consistent.
    return (a * inv_a - 1) % n == 0
