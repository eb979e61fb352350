from __future__ import annotations

import random

from .base import RandomSource


class SystemRandomSource(RandomSource):
    """
    Mersenne Twister backed source. Without a seed the generator is seeded from
    OS entropy, so successive rolls are not reproducible.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)
