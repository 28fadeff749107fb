# tests/test_period.py
from revrand.config import DEFAULT
from revrand.period import cycle_length, has_full_period, range_cycle_length
from revrand.rng import ReversibleRandom

def test_hull_dobell():
    assert has_full_period(5, 3, 16)
    assert has_full_period(DEFAULT.a, DEFAULT.c, DEFAULT.m)
    assert has_full_period(0, 0, 1)
    assert not has_full_period(7, 0, 10)   # c shares a factor with m
    assert not has_full_period(5, 2, 16)
    assert not has_full_period(3, 1, 16)   # 4 | m but not 4 | a-1
    assert not has_full_period(16807, 0, 0x7FFFFFFF)

def test_hull_dobell_agrees_with_measurement():
    for m in (8, 9, 12, 16):
        for a in range(1, m):
            for c in range(m):
                try:
                    rng = ReversibleRandom(a, c, m, source=lambda n: 0)
                except ValueError:
                    continue
                assert (cycle_length(rng, m) == m) == has_full_period(a, c, m), (a, c, m)

def test_cycle_length_does_not_move_engine():
    rng = ReversibleRandom(5, 3, 16)
    rng.set_initial(6)
    assert cycle_length(rng, 100) == 16
    assert rng.current() == 6

def test_short_cycles():
    rng = ReversibleRandom(7, 0, 10)
    rng.set_initial(1)          # 1 -> 7 -> 9 -> 3 -> 1
    assert cycle_length(rng, 100) == 4
    rng.set_initial(0)          # fixed point
    assert cycle_length(rng, 100) == 1
    rng.set_initial(1)
    assert cycle_length(rng, 3) is None

def test_range_cycle_length():
    rng = ReversibleRandom(5, 3, 16)
    rng.set_initial(0)
    assert range_cycle_length(rng, 0, 3, 100) == (16, 4)
    assert rng.current() == 0
    length, distinct = range_cycle_length(rng, 1, 6, 5)
    assert length is None
    assert 1 <= distinct <= 6

def test_range_cycle_covers_dice_for_default():
    rng = ReversibleRandom(source=lambda n: 0)
    rng.set_range_initial(1, 1, 6)
    length, distinct = range_cycle_length(rng, 1, 6, DEFAULT.m)
    assert length == DEFAULT.m
    assert distinct == 6

def test_hull_dobell_large_moduli():
    # prime moduli of 61 and 127 bits are answered without factoring
    assert not has_full_period(3, 7, (1 << 61) - 1)
    assert not has_full_period(16807, 1, (1 << 127) - 1)
    assert has_full_period(1, 7, (1 << 61) - 1)
    # PCG's 64-bit multiplier with an odd increment
    assert has_full_period(6364136223846793005, 1442695040888963407, 1 << 64)
    assert not has_full_period(6364136223846793007, 1442695040888963407, 1 << 64)
    # m = p*q with a-1 carrying only p
    p, q = (1 << 61) - 1, (1 << 31) - 1
    assert not has_full_period(p + 1, 1, p * q)
    assert has_full_period(p * q + 1, 1, p * q)
