from __future__ import annotations

import re
from typing import Iterator, List

from .models import DiceToken

# "к" is the Russian abbreviation for a die (кубик).
DICE_PATTERN = re.compile(
    r"(?P<count>[0-9]+)(?P<separator>[dк])(?P<sides>[0-9]+)(?P<modifier>[+-][0-9]+)?",
    re.IGNORECASE,
)


def scan_dice(text: str) -> Iterator[DiceToken]:
    """Lazily yield dice tokens in ``text``, leftmost first and never overlapping."""
    for match in DICE_PATTERN.finditer(text):
        yield DiceToken(
            literal=match.group(), start_offset=match.start(), end_offset=match.end()
        )


def tokenize_dice(text: str) -> List[DiceToken]:
    """Tokenize text into dice tokens with character offsets."""
    return list(scan_dice(text))


def matches_dice_grammar(literal: str) -> bool:
    """Return True when the whole literal is a single dice token."""
    return DICE_PATTERN.fullmatch(literal) is not None
