from __future__ import annotations

from typing import TYPE_CHECKING, List

from .models import CriticalTag, FormattedRoll, Notice, RollResult

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import DiceConfig

DEFAULT_ICON = "🎲"
INVALID_FORMULA_TEXT = "Invalid dice formula"


def format_roll(
    formula: str, result: RollResult, icon: str = DEFAULT_ICON
) -> FormattedRoll:
    """
    Render a roll as three lines: the formula, the individual rolls in draw
    order and the sum. The sum line only carries a modifier and an ``= total``
    suffix when the modifier is non-zero.
    """
    lines: List[str] = [
        f"{icon} {formula}",
        "Rolls: " + " ".join(f"[{roll}]" for roll in result.rolls),
    ]
    sum_line = f"Sum: {result.base_sum}"
    if result.modifier != 0:
        sign = "+" if result.modifier > 0 else "-"
        sum_line += f" {sign} {abs(result.modifier)} = {result.final_sum}"
    lines.append(sum_line)
    return FormattedRoll(text="\n".join(lines), style_tag=result.critical)


def format_invalid(formula: str) -> FormattedRoll:
    """Sentinel display result for a literal that could not be evaluated."""
    return FormattedRoll(text=INVALID_FORMULA_TEXT, style_tag=None)


def css_class_for(tag: CriticalTag | None, config: "DiceConfig") -> str | None:
    if tag is CriticalTag.SUCCESS:
        return config.success_class
    if tag is CriticalTag.FAIL:
        return config.fail_class
    return None


def build_notice(formatted: FormattedRoll, config: "DiceConfig") -> Notice:
    """Attach the configured toast duration and critical CSS class."""
    return Notice(
        text=formatted.text,
        duration_ms=config.notice_duration_ms,
        css_class=css_class_for(formatted.style_tag, config),
    )
