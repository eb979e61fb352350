from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class DiceToken:
    """A dice-notation literal and its inclusive-exclusive character offsets."""

    literal: str
    start_offset: int
    end_offset: int


class CriticalTag(str, Enum):
    """Natural 20 or natural 1 on a plain d20 roll."""

    SUCCESS = "success"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class ParsedFormula:
    """Dice count, die size and flat modifier parsed from a literal."""

    count: int
    sides: int
    modifier: int = 0
    separator: str = "d"

    def to_literal(self) -> str:
        literal = f"{self.count}{self.separator}{self.sides}"
        if self.modifier:
            literal += f"{self.modifier:+d}"
        return literal


@dataclass(frozen=True, slots=True)
class RollResult:
    """Outcome of evaluating a formula; rolls are kept in draw order."""

    formula: ParsedFormula
    rolls: Tuple[int, ...]
    base_sum: int
    final_sum: int
    critical: CriticalTag | None = None

    @property
    def modifier(self) -> int:
        return self.formula.modifier


@dataclass(frozen=True, slots=True)
class FormattedRoll:
    """User-facing roll breakdown plus the optional style tag."""

    text: str
    style_tag: CriticalTag | None = None


@dataclass(frozen=True, slots=True)
class Notice:
    """Payload handed to the host notification surface."""

    text: str
    duration_ms: int
    css_class: str | None = None


@dataclass(frozen=True, slots=True)
class TextWindow:
    """A visible slice of a document starting at absolute offset ``start``."""

    start: int
    end: int
    text: str


@dataclass(frozen=True, slots=True)
class DecorationRange:
    """A styled document range that remembers the literal it covers."""

    start: int
    end: int
    style_id: str
    literal: str
    attribute_name: str = "data-dice-formula"

    @property
    def attributes(self) -> Dict[str, str]:
        return {self.attribute_name: self.literal}


@dataclass(frozen=True, slots=True)
class DecorationSet:
    """Ordered, non-overlapping decoration ranges for one text view."""

    ranges: Tuple[DecorationRange, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[DecorationRange]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def at(self, offset: int) -> DecorationRange | None:
        """Return the range covering ``offset``, if any."""
        for decoration in self.ranges:
            if decoration.start <= offset < decoration.end:
                return decoration
            if decoration.start > offset:
                break
        return None

    def literals(self) -> List[str]:
        return [decoration.literal for decoration in self.ranges]
