from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class DiceConfig:
    """Presentation and rendering options for inline dice."""

    icon: str = "🎲"
    style_id: str = "clickable-dice"
    formula_attribute: str = "data-dice-formula"
    success_class: str = "dice-critical-success"
    fail_class: str = "dice-critical-fail"
    notice_duration_ms: int = 8000
    seed: int | None = None
    window_size: int = 0
    stride: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(DiceConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> DiceConfig:
    """Build a DiceConfig from a dictionary-like input."""
    if data is None:
        return DiceConfig()
    return DiceConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> DiceConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> DiceConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return DiceConfig()
    return config_from_yaml(path)
