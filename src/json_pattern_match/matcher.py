"""JsonMatcher: orchestrator that wires codec + StructuralMatcher + TemplateEvaluator.

This is the central wiring layer between the recursive comparator and the
public API.  It accepts pattern and actual either as parsed trees or as raw
JSON text, times the match, and turns the divergence list into whatever the
caller needs: a ``MatchResult``, a boolean, an ``AssertionError`` or a
mismatch description.

Architecture:
- Text inputs (``str``/``bytes``) are parsed by ``JsonCodec`` before
  matching.  Parse failures raise ``InvalidJsonError`` naming the side that
  failed; they are never reported as divergences.
- ``StructuralMatcher`` is stateless across calls, so one ``JsonMatcher``
  may serve any number of matches.  The template engine's parse cache is
  shared between those calls and never affects results.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from json_pattern_match.codec import JsonCodec
from json_pattern_match.matching.config import MatchConfig
from json_pattern_match.matching.structural import StructuralMatcher
from json_pattern_match.report import format_divergences, format_failure
from json_pattern_match.result import MatchResult

if TYPE_CHECKING:
    from json_pattern_match.result import Divergence
    from json_pattern_match.templates.evaluator import TemplateEvaluator

__all__ = ["JsonMatcher"]

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


class JsonMatcher:
    """Matches actual JSON against a pattern and reports divergences.

    Example::

        from json_pattern_match.matcher import JsonMatcher

        matcher = JsonMatcher(scope={"name": "World"})
        result = matcher.match('{"greeting": "Hello {{name}}"}',
                               '{"greeting": "Hello World"}')
        print(result.matched)   # True

    Note that ``str`` inputs are always treated as JSON *text*.  To match a
    bare JSON string value, pass its JSON encoding (``'"abc"'``).
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        scope: Any = None,
        evaluator: TemplateEvaluator | None = None,
        codec: JsonCodec | None = None,
    ) -> None:
        """Initialise the matcher.

        Args:
            config:    Matching behaviour.  Defaults to ``MatchConfig()``.
            scope:     Template variables (mapping or object).  None disables
                       template expansion.
            evaluator: Leaf string comparator.  Defaults to a
                       ``TemplateEvaluator`` over ``MustacheEngine``.
            codec:     Parser/serializer for text inputs and reports.
                       Defaults to ``JsonCodec()``.
        """
        self._config: MatchConfig = config if config is not None else MatchConfig()
        self._scope = scope
        self._codec: JsonCodec = codec if codec is not None else JsonCodec()
        self._structural = StructuralMatcher(
            config=self._config, scope=scope, evaluator=evaluator
        )

    @property
    def config(self) -> MatchConfig:
        return self._config

    @property
    def scope(self) -> Any:
        return self._scope

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, value: Any, source: str) -> Any:
        """Return ``value`` as a tree, parsing it first when it is JSON text."""
        if isinstance(value, _TEXT_TYPES):
            return self._codec.loads(value, source=source)
        return value

    def find_divergences(self, pattern: Any, actual: Any) -> list[Divergence]:
        """Return the divergences of ``actual`` from ``pattern``."""
        return self.find_tree_divergences(
            self.parse(pattern, "pattern"), self.parse(actual, "actual")
        )

    def find_tree_divergences(
        self, pattern_tree: Any, actual_tree: Any
    ) -> list[Divergence]:
        """Like ``find_divergences`` but for already parsed trees; never parses."""
        return self._structural.find_divergences(pattern_tree, actual_tree)

    def match(self, pattern: Any, actual: Any) -> MatchResult:
        """Match ``actual`` against ``pattern`` and return a ``MatchResult``.

        Calling this twice with the same inputs always yields equal
        divergence lists.
        """
        t0 = time.perf_counter()
        divergences = self.find_divergences(pattern, actual)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Matched with array_order=%s: %d divergence(s) in %.3f ms",
            self._config.array_order,
            len(divergences),
            elapsed_ms,
        )
        return MatchResult(divergences=divergences, computation_time_ms=elapsed_ms)

    def matches(self, pattern: Any, actual: Any) -> bool:
        return self.match(pattern, actual).matched

    def assert_matches(
        self, pattern: Any, actual: Any, reason: str | None = None
    ) -> None:
        """Raise ``AssertionError`` if ``actual`` does not match ``pattern``.

        Args:
            pattern: Pattern tree or JSON text.
            actual:  Actual tree or JSON text.
            reason:  Optional prefix for the failure message.

        Raises:
            AssertionError: With the full failure report when any divergence
                is found.
            InvalidJsonError: If either input is malformed JSON text.
        """
        pattern_tree = self.parse(pattern, "pattern")
        actual_tree = self.parse(actual, "actual")
        divergences = self.find_tree_divergences(pattern_tree, actual_tree)
        if divergences:
            raise AssertionError(
                format_failure(
                    divergences,
                    actual=actual_tree,
                    pattern=pattern_tree,
                    codec=self._codec,
                    reason=reason,
                    scope=self._scope,
                )
            )

    def describe_mismatch(self, pattern: Any, actual: Any) -> str:
        """Return the divergence summary, or an empty string on match."""
        divergences = self.find_divergences(pattern, actual)
        if not divergences:
            return ""
        return format_divergences(divergences)
