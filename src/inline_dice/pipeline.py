from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from .config import DiceConfig
from .decorations import build_window_decorations
from .evaluation import InvalidFormula, evaluate
from .formatting import DEFAULT_ICON, build_notice, format_invalid, format_roll
from .models import DecorationSet, DiceToken, Document, FormattedRoll, Notice
from .randomness import RandomSource, create_random_source
from .tokenization import tokenize_dice
from .windowing import create_windows, windows_from_ranges

logger = logging.getLogger(__name__)


def scan_document(doc: Document) -> List[DiceToken]:
    """Find every dice token in a whole document (static rendering path)."""
    return tokenize_dice(doc.text)


def evaluate_and_format(
    literal: str, rng: RandomSource | None = None, icon: str = DEFAULT_ICON
) -> FormattedRoll:
    """Roll ``literal`` and render it, falling back to the invalid sentinel."""
    try:
        result = evaluate(literal, rng)
    except InvalidFormula as exc:
        logger.warning("Cannot roll %r: %s", literal, exc)
        return format_invalid(literal)
    return format_roll(literal, result, icon=icon)


def roll_notice(
    literal: str, config: DiceConfig, rng: RandomSource | None = None
) -> Notice:
    """Produce the notification payload for a clicked dice literal."""
    formatted = evaluate_and_format(literal, rng, icon=config.icon)
    return build_notice(formatted, config)


class RollSession:
    """
    Rolls clicked literals for one host session. When ``config.seed`` is set the
    seeded source is built once, so the session's sequence of rolls repeats
    across runs while successive clicks still differ.
    """

    def __init__(self, config: DiceConfig, rng: RandomSource | None = None) -> None:
        self.config = config
        if rng is None and config.seed is not None:
            rng = create_random_source("system", seed=config.seed)
        self._rng = rng

    def roll(self, literal: str) -> Notice:
        return roll_notice(literal, self.config, self._rng)


def decorate_document(
    doc: Document,
    config: DiceConfig,
    visible_ranges: Sequence[Tuple[int, int]] | None = None,
) -> DecorationSet:
    """
    Decorate a document as a live view would. Explicit visible ranges win;
    otherwise the document is tiled using ``window_size``/``stride``.
    """
    if visible_ranges is not None:
        windows = windows_from_ranges(doc.text, visible_ranges)
    else:
        windows = create_windows(doc.text, config.window_size, config.stride)
    return build_window_decorations(
        windows, style_id=config.style_id, attribute_name=config.formula_attribute
    )


def process_corpus(documents: List[Document]) -> Dict[str, List[DiceToken]]:
    """Scan all documents and return the per-document tokens."""
    results: Dict[str, List[DiceToken]] = {}
    for document in documents:
        results[document.doc_id] = scan_document(document)
    return results
