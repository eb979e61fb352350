"""
inline_dice package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import DiceConfig, config_from_dict, config_from_yaml, load_config
from .decorations import DecorationBuilder, build_decorations
from .evaluation import InvalidFormula, evaluate
from .formatting import format_roll
from .pipeline import RollSession, evaluate_and_format, roll_notice, scan_document
from .tokenization import scan_dice

__all__ = [
    "DiceConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "DecorationBuilder",
    "build_decorations",
    "InvalidFormula",
    "evaluate",
    "format_roll",
    "evaluate_and_format",
    "roll_notice",
    "RollSession",
    "scan_document",
    "scan_dice",
]

__version__ = "0.1.0"
