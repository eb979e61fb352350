from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import TextWindow


def window_from_range(text: str, start: int, end: int) -> TextWindow:
    """Slice one visible range out of ``text``, clamping it to the document."""
    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    return TextWindow(start=start, end=end, text=text[start:end])


def windows_from_ranges(
    text: str, ranges: Iterable[Tuple[int, int]]
) -> List[TextWindow]:
    """Build windows for the host's visible ranges, ordered by start offset."""
    windows = [window_from_range(text, start, end) for start, end in ranges]
    return sorted(windows, key=lambda window: (window.start, window.end))


def create_windows(text: str, window_size: int, stride: int) -> List[TextWindow]:
    """
    Tile a document into character windows, as a scrolling viewport would.
    ``window_size <= 0`` yields a single window over the whole text.
    """
    if not text:
        return []
    if window_size <= 0:
        return [TextWindow(start=0, end=len(text), text=text)]

    stride = max(1, stride or window_size)
    windows: List[TextWindow] = []
    start = 0
    while start < len(text):
        end = min(start + window_size, len(text))
        windows.append(TextWindow(start=start, end=end, text=text[start:end]))
        if end == len(text):
            break
        start += stride

    return windows
