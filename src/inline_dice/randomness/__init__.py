from __future__ import annotations

from typing import Any

from .base import RandomSource
from .sequence_source import SequenceRandomSource
from .system_source import SystemRandomSource

__all__ = [
    "RandomSource",
    "SequenceRandomSource",
    "SystemRandomSource",
    "create_random_source",
    "default_random_source",
]

_DEFAULT_SOURCE = SystemRandomSource()


def create_random_source(name: str = "system", **kwargs: Any) -> RandomSource:
    """Factory for building random sources by name."""
    normalized = name.lower().strip()
    if normalized == "system":
        return SystemRandomSource(seed=kwargs.get("seed"))
    if normalized == "sequence":
        return SequenceRandomSource(kwargs.get("values", ()))
    raise ValueError(f"Unknown random source '{name}'.")


def default_random_source() -> RandomSource:
    """Return the shared, entropy-seeded source used when none is injected."""
    return _DEFAULT_SOURCE
