"""Uniform random selection from a shrinking participant pool."""

from __future__ import annotations

import random
from typing import AbstractSet, Optional, Sequence

from core import get_logger, DrawDefaults
from core.exceptions import PoolExhaustedError

logger = get_logger(__name__)


class RandomSelector:
    """Draws one eligible id from a candidate sequence.

    The candidate sequence may contain stale ids (already drawn) and
    duplicates. A draw is retried when it lands on an id that is not
    eligible, or on a repeated occurrence of an id (only the first
    occurrence counts), so every distinct eligible id has the same chance.
    After ``retry_factor * len(candidates)`` misses the selector chooses
    directly among the distinct eligible ids that are left.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        retry_factor: int = DrawDefaults.SELECTOR_RETRY_FACTOR,
    ) -> None:
        self.rng = rng or random.SystemRandom()
        self.retry_factor = max(1, retry_factor)

    def pick(self, candidates: Sequence[int], eligible: AbstractSet[int]) -> int:
        """Return one id from ``candidates`` that is in ``eligible``.

        Raises:
            PoolExhaustedError: If no candidate is eligible
        """
        if not candidates or not eligible:
            raise PoolExhaustedError()

        first_seen = {}
        for index, candidate in enumerate(candidates):
            first_seen.setdefault(candidate, index)

        for _ in range(self.retry_factor * len(candidates)):
            index = self.rng.randrange(len(candidates))
            candidate = candidates[index]
            if candidate in eligible and first_seen[candidate] == index:
                return candidate

        remaining = [candidate for candidate in first_seen if candidate in eligible]
        if not remaining:
            raise PoolExhaustedError()

        logger.debug(
            f"Retry budget spent, choosing among {len(remaining)} remaining ids"
        )
        return self.rng.choice(remaining)
