"""
User sets: the numbers someone typed, plus the style they were drawn with.

Two sets are equal when they hold the same numbers. Name and color are only
for display.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable

from .constants import EMPTY_SET_SYMBOL


def format_number(value: float) -> str:
    """Format a number the way it appears in a set: 5.0 -> "5", 2.5 -> "2.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_elements(elements: Iterable[float]) -> str:
    """Sorted, comma-joined elements ("1, 2, 3")."""
    return ", ".join(format_number(e) for e in sorted(elements))


def parse_elements(text: str) -> frozenset:
    """
    Parse comma-separated numbers into a set.

    Pieces that aren't numbers are skipped, so "1, two, 3" gives {1, 3}.
    NaN and infinity are skipped too (they can't be sorted or drawn).
    """
    elements = set()
    for piece in text.split(","):
        piece = piece.strip()
        if not piece:
            continue
        try:
            value = float(piece)
        except ValueError:
            continue
        if math.isfinite(value):
            elements.add(value)
    return frozenset(elements)


@dataclass(frozen=True)
class UserSet:
    """A set of numbers with a display name and color."""

    elements: frozenset = frozenset()
    name: str = field(default="A", compare=False)
    color: str = field(default="#5863F8", compare=False)

    def __post_init__(self):
        # Accept any iterable of numbers; duplicates collapse
        object.__setattr__(self, "elements", frozenset(float(e) for e in self.elements))

    @classmethod
    def from_text(cls, text: str, name: str = "A", color: str = "#5863F8") -> "UserSet":
        return cls(parse_elements(text), name=name, color=color)

    @property
    def count(self) -> int:
        return len(self.elements)

    @property
    def style(self) -> tuple[str, str]:
        return (self.name, self.color)

    @property
    def parsed_elements(self) -> str:
        """Elements for display, or Ø for the empty set."""
        if not self.elements:
            return EMPTY_SET_SYMBOL
        return format_elements(self.elements)
