import random

import pytest

from hlsdsp.macc import Macc


def test_single_clear_step_matches_board_test():
    macc = Macc()
    assert macc.step(2, 21, True) == 42


def test_accumulates_without_clear():
    macc = Macc()
    macc.step(2, 21, True)
    assert macc.step(2, 21, False) == 84


def test_clear_discards_history():
    macc = Macc()
    macc.step(100, 100)
    assert macc.step(3, 4, True) == 12


@pytest.mark.parametrize("seed", range(4))
def test_random_runs_match_sum_of_products(seed):
    rng = random.Random(seed)
    macc = Macc()
    for _ in range(32):
        length = rng.randrange(256) + 1
        pairs = [
            (rng.randint(-2048, 2047), rng.randint(-2048, 2047))
            for _ in range(length)
        ]
        for j, (a, b) in enumerate(pairs):
            result = macc.step(a, b, j == 0)
        assert result == sum(a * b for a, b in pairs)


def test_accumulator_wraps_at_32_bits():
    macc = Macc()
    result = macc.step(1 << 16, 1 << 16, True)
    assert result == 0
    top = macc.step((1 << 31) - 1, 1, True)
    assert macc.step(1, 1) == -top - 1