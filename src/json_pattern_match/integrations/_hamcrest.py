"""PyHamcrest matcher adapter for json-pattern-match.

Exposes the structural matcher as a hamcrest ``Matcher`` so it composes with
``assert_that`` and the other hamcrest matchers.  The matcher only answers
true or false; divergence detail is rendered on demand in
``describe_mismatch``.

Install the optional SDK dependency with::

    pip install json-pattern-match[hamcrest]
"""

from __future__ import annotations

from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from json_pattern_match.matcher import JsonMatcher
from json_pattern_match.matching.config import MatchConfig
from json_pattern_match.report import format_divergences
from json_pattern_match.result import Divergence

__all__ = ["IsMatchingJson", "matches_json"]


class IsMatchingJson(BaseMatcher[Any]):
    """Matches JSON text or trees that conform to a pattern."""

    def __init__(
        self,
        pattern: Any,
        config: MatchConfig | None = None,
        scope: Any = None,
    ) -> None:
        self._matcher = JsonMatcher(config=config, scope=scope)
        # Parse once so malformed pattern text fails at construction time.
        self._pattern = self._matcher.parse(pattern, "pattern")

    def _matches(self, item: Any) -> bool:
        if item is None:
            raise ValueError("Failed to parse JSON: given item was None")
        return not self._divergences(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("matches JSON ").append_text(
            self._matcher.codec.dumps(self._pattern)
        )

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is None:
            mismatch_description.append_text("was None")
            return
        divergences = self._divergences(item)
        if divergences:
            mismatch_description.append_text(format_divergences(divergences))

    def _divergences(self, item: Any) -> list[Divergence]:
        actual = self._matcher.parse(item, "actual")
        return self._matcher.find_tree_divergences(self._pattern, actual)


def matches_json(
    pattern: Any,
    config: MatchConfig | None = None,
    scope: Any = None,
) -> IsMatchingJson:
    """Create a hamcrest matcher for ``pattern``.

    Example::

        from hamcrest import assert_that
        from json_pattern_match.integrations import matches_json

        assert_that('{"id": 7, "name": "Ann"}', matches_json('{"id": "...", "name": "Ann"}'))
    """
    return IsMatchingJson(pattern, config=config, scope=scope)
