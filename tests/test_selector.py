"""Unit tests for RandomSelector."""

import random
from collections import Counter

import pytest

from core.exceptions import PoolExhaustedError
from services.selector import RandomSelector


class StuckRandom:
    """Always lands on the first candidate."""

    def randrange(self, stop):
        return 0

    def choice(self, seq):
        return seq[-1]


def test_pick_returns_eligible_id(selector):
    candidates = [1, 2, 3, 4]
    for _ in range(50):
        assert selector.pick(candidates, {2, 4}) in {2, 4}


def test_stale_ids_are_skipped(selector):
    assert selector.pick([1, 2, 3], {3}) == 3


def test_empty_pool_raises():
    selector = RandomSelector(rng=random.Random(1))
    with pytest.raises(PoolExhaustedError):
        selector.pick([], {1})
    with pytest.raises(PoolExhaustedError):
        selector.pick([1, 2], set())
    with pytest.raises(PoolExhaustedError):
        selector.pick([1, 2], {3})


def test_falls_back_after_retry_budget():
    selector = RandomSelector(rng=StuckRandom(), retry_factor=2)
    # Index 0 is always stale, so only the fallback can answer
    assert selector.pick([1, 2, 3], {2, 3}) == 3


def test_duplicates_do_not_bias_selection():
    selector = RandomSelector(rng=random.Random(1234))
    candidates = [1] * 7 + [2]
    counts = Counter(selector.pick(candidates, {1, 2}) for _ in range(2000))

    assert set(counts) == {1, 2}
    assert 850 <= counts[2] <= 1150


def test_uniform_over_distinct_eligible_ids():
    selector = RandomSelector(rng=random.Random(99))
    candidates = [5, 6, 7, 8, 9]
    counts = Counter(selector.pick(candidates, {6, 7, 9}) for _ in range(3000))

    assert set(counts) == {6, 7, 9}
    for value in counts.values():
        assert 850 <= value <= 1150
