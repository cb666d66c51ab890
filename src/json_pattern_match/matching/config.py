"""MatchConfig and ArrayOrder for structural matcher configuration.

MatchConfig is a frozen (immutable) dataclass holding the matcher
parameters.  ArrayOrder selects how arrays are compared: positionally or
as an unordered collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class ArrayOrder(StrEnum):
    """How to compare JSON arrays during matching.

    - ORDERED:   Element ``i`` of the pattern is matched against element ``i``
                 of the actual array.
    - ANY_ORDER: Every pattern element must match some actual element,
                 regardless of position.
    """

    ORDERED = auto()
    ANY_ORDER = auto()


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable configuration for the structural matcher.

    Attributes:
        array_order: How arrays are compared.  Defaults to ``ORDERED``.
        unique_witnesses: When True (``ANY_ORDER`` only), each actual element
            may satisfy at most one pattern element, so ``[1, 1]`` no longer
            matches ``[1, 2]``.  Default False keeps the loose semantics in
            which one actual element may witness several pattern elements.
        max_depth: Maximum nesting depth the matcher descends into.  ``None``
            means unbounded.  Exceeding it raises ``MaxDepthExceededError``.
    """

    array_order: ArrayOrder = ArrayOrder.ORDERED
    unique_witnesses: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)
        if self.unique_witnesses and self.array_order != ArrayOrder.ANY_ORDER:
            msg = (
                "unique_witnesses requires array_order=ANY_ORDER, "
                f"got {self.array_order!s}"
            )
            raise ValueError(msg)
