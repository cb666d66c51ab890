"""matching subpackage: public API for the structural matcher.

Provides the recursive comparator, its configuration, and the JSON kind
model it dispatches on.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_pattern_match.matching import ArrayOrder, MatchConfig, StructuralMatcher

    matcher = StructuralMatcher(config=MatchConfig(array_order=ArrayOrder.ANY_ORDER))
    matcher.find_divergences([1, 2], [2, 1])
    # []
"""

from __future__ import annotations

from json_pattern_match.matching.config import ArrayOrder, MatchConfig
from json_pattern_match.matching.kinds import (
    WILDCARD,
    NodeKind,
    classify,
    contains_wildcard,
    is_wildcard,
)
from json_pattern_match.matching.structural import ROOT, StructuralMatcher

__all__ = [
    "ROOT",
    "WILDCARD",
    "ArrayOrder",
    "MatchConfig",
    "NodeKind",
    "StructuralMatcher",
    "classify",
    "contains_wildcard",
    "is_wildcard",
]
