from __future__ import annotations

from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Abstract provider of uniformly distributed integers."""

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` inclusive."""
        raise NotImplementedError
