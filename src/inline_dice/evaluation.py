from __future__ import annotations

import logging

from .models import CriticalTag, ParsedFormula, RollResult
from .randomness import RandomSource, default_random_source
from .tokenization import DICE_PATTERN

logger = logging.getLogger(__name__)

# Only this exact spelling (case-insensitive) is eligible for critical tags.
CRITICAL_FORMULA = "1d20"

# Clicks roll synchronously; larger pools are rejected rather than drawn.
MAX_DICE_COUNT = 1000


class InvalidFormula(ValueError):
    """Raised when a literal is not a usable dice formula."""


def parse_formula(literal: str) -> ParsedFormula:
    """Parse ``literal`` into count, sides and modifier."""
    match = DICE_PATTERN.fullmatch(literal)
    if match is None:
        raise InvalidFormula(f"Not a dice formula: {literal!r}")
    count = int(match.group("count"))
    sides = int(match.group("sides"))
    if count < 1:
        raise InvalidFormula(f"Dice count must be at least 1: {literal!r}")
    if sides < 1:
        raise InvalidFormula(f"Die size must be at least 1: {literal!r}")
    modifier_text = match.group("modifier")
    return ParsedFormula(
        count=count,
        sides=sides,
        modifier=int(modifier_text) if modifier_text else 0,
        separator=match.group("separator"),
    )


def classify_critical(literal: str, rolls: tuple[int, ...]) -> CriticalTag | None:
    """Tag a natural 20 or natural 1, but only for a bare ``1d20`` literal."""
    if literal.lower() != CRITICAL_FORMULA or len(rolls) != 1:
        return None
    if rolls[0] == 20:
        return CriticalTag.SUCCESS
    if rolls[0] == 1:
        return CriticalTag.FAIL
    return None


def evaluate(
    literal: str,
    rng: RandomSource | None = None,
    max_count: int = MAX_DICE_COUNT,
) -> RollResult:
    """Roll the dice described by ``literal`` and classify the outcome."""
    formula = parse_formula(literal)
    if formula.count > max_count:
        raise InvalidFormula(
            f"Too many dice in {literal!r}; at most {max_count} can be rolled."
        )
    source = rng if rng is not None else default_random_source()
    rolls = tuple(source.randint(1, formula.sides) for _ in range(formula.count))
    base_sum = sum(rolls)
    result = RollResult(
        formula=formula,
        rolls=rolls,
        base_sum=base_sum,
        final_sum=base_sum + formula.modifier,
        critical=classify_critical(literal, rolls),
    )
    logger.debug(
        "Rolled %s -> %s (total %d, critical=%s)",
        literal,
        list(rolls),
        result.final_sum,
        result.critical.value if result.critical else None,
    )
    return result
