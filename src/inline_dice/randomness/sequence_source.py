from __future__ import annotations

from collections import deque
from typing import Iterable

from .base import RandomSource


class SequenceRandomSource(RandomSource):
    """Replays a fixed sequence of values; useful for tests and demos."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = deque(values)

    def randint(self, low: int, high: int) -> int:
        if not self._values:
            raise ValueError("SequenceRandomSource has no values left.")
        value = self._values.popleft()
        if not low <= value <= high:
            raise ValueError(f"Scripted value {value} outside range [{low}, {high}].")
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)
