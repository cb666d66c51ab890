"""Public API functions for json-pattern-match.

This module provides the user-facing functions: find_divergences,
match_json, is_match and assert_json_matches.  Each call creates a fresh
matcher to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_pattern_match.codec import JsonCodec
from json_pattern_match.matcher import JsonMatcher
from json_pattern_match.matching.config import MatchConfig
from json_pattern_match.matching.structural import StructuralMatcher
from json_pattern_match.result import Divergence, MatchResult

__all__ = ["assert_json_matches", "find_divergences", "is_match", "match_json"]


def find_divergences(
    pattern: Any,
    actual: Any,
    config: MatchConfig | None = None,
    scope: Any = None,
) -> list[Divergence]:
    """Return every divergence of ``actual`` from ``pattern``.

    This is the core contract and works on parsed trees only: a ``str``
    argument is a JSON string value here, not JSON text.  Use ``match_json``
    or ``assert_json_matches`` to pass raw text.

    Args:
        pattern: Pattern JSON value.  May contain the wildcard ``"..."`` and
                 template strings such as ``"{{name}}"``.
        actual:  JSON value under test.
        config:  Matching behaviour.  Defaults to ``MatchConfig()`` when None.
        scope:   Template variables.  None compares template syntax literally.

    Returns:
        Divergences in traversal order; an empty list means a match.
    """
    matcher = StructuralMatcher(config=config, scope=scope)
    return matcher.find_divergences(pattern, actual)


def match_json(
    pattern: Any,
    actual: Any,
    config: MatchConfig | None = None,
    scope: Any = None,
    codec: JsonCodec | None = None,
) -> MatchResult:
    """Match ``actual`` against ``pattern`` and return a ``MatchResult``.

    Args:
        pattern: Pattern JSON value or JSON text.
        actual:  JSON value or JSON text under test.
        config:  Matching behaviour.  Defaults to ``MatchConfig()`` when None.
        scope:   Template variables.
        codec:   Parser used for text inputs.  Defaults to ``JsonCodec()``.

    Returns:
        A ``MatchResult`` with divergences and computation_time_ms populated.
    """
    matcher = JsonMatcher(config=config, scope=scope, codec=codec)
    return matcher.match(pattern, actual)


def is_match(
    pattern: Any,
    actual: Any,
    config: MatchConfig | None = None,
    scope: Any = None,
) -> bool:
    """Return True if ``actual`` matches ``pattern`` without any divergence."""
    return match_json(pattern, actual, config=config, scope=scope).matched


def assert_json_matches(
    pattern: Any,
    actual: Any,
    reason: str | None = None,
    config: MatchConfig | None = None,
    scope: Any = None,
    codec: JsonCodec | None = None,
) -> None:
    """Assert that ``actual`` matches ``pattern``.

    Args:
        pattern: Pattern JSON value or JSON text.
        actual:  JSON value or JSON text under test.
        reason:  Optional prefix for the failure message.
        config:  Matching behaviour.  Defaults to ``MatchConfig()`` when None.
        scope:   Template variables.
        codec:   Parser for text inputs and printer for the failure report.

    Raises:
        AssertionError: Listing every divergence followed by pretty-printed
            actual JSON, pattern and template scope.
        InvalidJsonError: If ``pattern`` or ``actual`` is malformed JSON text.
    """
    matcher = JsonMatcher(config=config, scope=scope, codec=codec)
    matcher.assert_matches(pattern, actual, reason=reason)
