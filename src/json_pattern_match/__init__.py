"""JSON pattern matching - structural comparison with wildcards and templates."""

from __future__ import annotations

from json_pattern_match.api import (
    assert_json_matches,
    find_divergences,
    is_match,
    match_json,
)
from json_pattern_match.codec import JsonCodec, JsonCodecConfig
from json_pattern_match.errors import (
    InvalidJsonError,
    JsonPatternMatchError,
    MaxDepthExceededError,
    TemplateExpansionError,
    UnsupportedValueError,
    WildcardUsageError,
)
from json_pattern_match.matcher import JsonMatcher
from json_pattern_match.matching.config import ArrayOrder, MatchConfig
from json_pattern_match.matching.kinds import WILDCARD
from json_pattern_match.result import Divergence, DivergenceKind, MatchResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "WILDCARD",
    "ArrayOrder",
    "Divergence",
    "DivergenceKind",
    "InvalidJsonError",
    "JsonCodec",
    "JsonCodecConfig",
    "JsonMatcher",
    "JsonPatternMatchError",
    "MatchConfig",
    "MatchResult",
    "MaxDepthExceededError",
    "TemplateExpansionError",
    "UnsupportedValueError",
    "WildcardUsageError",
    "assert_json_matches",
    "find_divergences",
    "is_match",
    "match_json",
]
