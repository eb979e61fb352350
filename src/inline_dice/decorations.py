from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .models import DecorationRange, DecorationSet, TextWindow
from .tokenization import scan_dice
from .windowing import windows_from_ranges

logger = logging.getLogger(__name__)

DEFAULT_STYLE_ID = "clickable-dice"
DEFAULT_FORMULA_ATTRIBUTE = "data-dice-formula"


def build_decorations(
    window_text: str,
    window_start: int,
    style_id: str = DEFAULT_STYLE_ID,
    attribute_name: str = DEFAULT_FORMULA_ATTRIBUTE,
) -> DecorationSet:
    """Decorate every dice token in a window, shifted to document offsets."""
    return DecorationSet(
        ranges=tuple(
            _window_ranges(window_text, window_start, style_id, attribute_name)
        )
    )


def build_window_decorations(
    windows: Sequence[TextWindow],
    style_id: str = DEFAULT_STYLE_ID,
    attribute_name: str = DEFAULT_FORMULA_ATTRIBUTE,
) -> DecorationSet:
    """
    Merge the decorations of several visible windows into one ordered set.

    Overlapping windows can see the same token more than once, possibly cut
    short by a window edge. Among overlapping candidates a match that touches
    no window edge wins over one that does; otherwise the longer match wins.
    The result is ordered and never overlapping.
    """
    candidates: List[Tuple[DecorationRange, bool]] = []
    for window in windows:
        for decoration in _window_ranges(
            window.text, window.start, style_id, attribute_name
        ):
            clipped = (decoration.start == window.start and window.start > 0) or (
                decoration.end == window.start + len(window.text)
            )
            candidates.append((decoration, clipped))
    candidates.sort(key=lambda item: (item[0].start, -item[0].end))

    ranges: List[DecorationRange] = []
    last_clipped = False
    for decoration, clipped in candidates:
        if ranges and decoration.start < ranges[-1].end:
            if _prefer(decoration, clipped, ranges[-1], last_clipped):
                logger.debug(
                    "Replacing %r with %r at %d",
                    ranges[-1].literal,
                    decoration.literal,
                    decoration.start,
                )
                ranges[-1] = decoration
                last_clipped = clipped
            continue
        ranges.append(decoration)
        last_clipped = clipped
    return DecorationSet(ranges=tuple(ranges))


def _prefer(
    candidate: DecorationRange,
    candidate_clipped: bool,
    current: DecorationRange,
    current_clipped: bool,
) -> bool:
    if candidate_clipped != current_clipped:
        return current_clipped
    return candidate.end - candidate.start > current.end - current.start


def _window_ranges(
    window_text: str, window_start: int, style_id: str, attribute_name: str
) -> Iterable[DecorationRange]:
    for token in scan_dice(window_text):
        yield DecorationRange(
            start=window_start + token.start_offset,
            end=window_start + token.end_offset,
            style_id=style_id,
            literal=token.literal,
            attribute_name=attribute_name,
        )


class DecorationBuilder:
    """
    Keeps the decoration set for one live view. The published set is only
    swapped once a rebuild has finished, so readers never see a partial set.
    """

    def __init__(
        self,
        style_id: str = DEFAULT_STYLE_ID,
        attribute_name: str = DEFAULT_FORMULA_ATTRIBUTE,
    ) -> None:
        self.style_id = style_id
        self.attribute_name = attribute_name
        self._decorations = DecorationSet()
        self._rebuilding = False

    @property
    def decorations(self) -> DecorationSet:
        return self._decorations

    @property
    def state(self) -> str:
        return "rebuilding" if self._rebuilding else "idle"

    def rebuild(
        self, text: str, visible_ranges: Iterable[Tuple[int, int]]
    ) -> DecorationSet:
        """Recompute decorations for the visible ranges of ``text``."""
        self._rebuilding = True
        try:
            windows = windows_from_ranges(text, visible_ranges)
            fresh = build_window_decorations(
                windows, self.style_id, self.attribute_name
            )
        finally:
            self._rebuilding = False
        self._decorations = fresh
        logger.debug(
            "Rebuilt %d decorations across %d windows", len(fresh), len(windows)
        )
        return fresh

    def update(
        self,
        text: str,
        visible_ranges: Iterable[Tuple[int, int]],
        *,
        doc_changed: bool = False,
        viewport_changed: bool = False,
    ) -> bool:
        """Rebuild only when the document or the viewport changed."""
        if not (doc_changed or viewport_changed):
            return False
        self.rebuild(text, visible_ranges)
        return True
