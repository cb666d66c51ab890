"""Divergence and MatchResult dataclasses for structural match output.

A match produces an ordered list of ``Divergence`` records, one per
structural or value mismatch.  An empty list means the actual JSON conforms
to the pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["Divergence", "DivergenceKind", "MatchResult"]


class DivergenceKind(StrEnum):
    """Category of a single mismatch between pattern and actual."""

    TYPE_MISMATCH = auto()
    MISSING_PROPERTY = auto()
    UNEXPECTED_PROPERTY = auto()
    ARRAY_TOO_SHORT = auto()
    ARRAY_SIZE_MISMATCH = auto()
    VALUE_MISMATCH = auto()
    ELEMENT_NOT_FOUND = auto()


@dataclass(frozen=True, slots=True)
class Divergence:
    """One mismatch between pattern and actual.

    Attributes:
        kind:     What went wrong (see ``DivergenceKind``).
        location: Path in the pattern where it went wrong, e.g.
                  ``"$.items[2].name"``.  ``$`` is the root.
        message:  Human-readable, location-qualified description.
    """

    kind: DivergenceKind
    location: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of matching an actual JSON value against a pattern.

    Attributes:
        divergences: Every mismatch found, in traversal order.
        computation_time_ms: Wall-clock duration of the match in milliseconds.
    """

    divergences: list[Divergence]
    computation_time_ms: float

    @property
    def matched(self) -> bool:
        """True when no divergence was found."""
        return not self.divergences

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.divergences]

    def __bool__(self) -> bool:
        return self.matched
