# tests/test_modinv.py
import random
from math import gcd

import pytest

from revrand.errors import ConfigurationError, NotInvertibleError
from revrand.entropy import seeded_source
from revrand.modinv import extended_gcd, is_inverse, modular_inverse
from revrand.rng import ReversibleRandom

def test_extended_gcd_bezout():
    for a, b in [(240, 46), (46, 240), (17, 5), (5, 16), (0, 7), (7, 0), (1, 1), (233280, 9301)]:
        g, x, y = extended_gcd(a, b)
        assert g == gcd(a, b)
        assert a * x + b * y == g, f"Bezout fails for ({a}, {b})"

def test_inverse_known_value():
    # 5*13 = 65 = 4*16 + 1
    assert modular_inverse(5, 16) == 13

def test_inverse_park_miller():
    assert modular_inverse(16807, 0x7FFFFFFF) == 1407677000

def test_inverse_all_coprime_small_moduli():
    for m in range(2, 60):
        for a in range(1, m):
            if gcd(a, m) != 1:
                continue
            x = modular_inverse(a, m)
            assert 0 <= x < m
            assert (a * x) % m == 1, f"bad inverse {x} for {a} mod {m}"

def test_inverse_reduces_a_first():
    assert modular_inverse(21, 16) == modular_inverse(5, 16)

def test_inverse_modulus_one():
    assert modular_inverse(0, 1) == 0
    assert is_inverse(0, 0, 1)

def test_no_inverse():
    with pytest.raises(NotInvertibleError) as ei:
        modular_inverse(4, 8)
    assert ei.value.gcd == 4
    assert (ei.value.a, ei.value.n) == (4, 8)
    assert isinstance(ei.value, ConfigurationError)
    with pytest.raises(NotInvertibleError):
        modular_inverse(0, 10)

def test_bad_modulus():
    with pytest.raises(ConfigurationError):
        modular_inverse(3, 0)
    with pytest.raises(ValueError):
        modular_inverse(3, -7)

def test_is_inverse():
    assert is_inverse(5, 13, 16)
    assert is_inverse(5, 29, 16)
    assert not is_inverse(5, 5, 16)

def fib_pair(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a, b

def test_inverse_consecutive_fibonacci_1000_bits():
    # consecutive Fibonacci numbers are the slowest case for Euclid
    a, m = fib_pair(1500)
    assert m.bit_length() > 1000
    x = modular_inverse(a, m)
    assert 0 <= x < m
    assert (a * x) % m == 1
    g, x, y = extended_gcd(a, m)
    assert g == 1 and a * x + m * y == 1

def test_engine_with_4096_bit_modulus():
    r = random.Random(7)
    m = 1 << 4096
    for _ in range(5):
        a = r.getrandbits(4096) | 1
        rng = ReversibleRandom(a, 1, m, source=seeded_source(a))
        assert (a * rng.inv_a) % m == 1
        x = rng.current()
        rng.next()
        assert rng.prev() == x
