"""StructuralMatcher: recursive pattern-vs-actual comparison.

Walks a pattern tree and an actual tree in lock-step, depth-first and
pre-order, and collects ``Divergence`` records instead of stopping at the
first mismatch.

Rules, in order, at every node:

1. A bare ``"..."`` pattern matches anything; nothing below it is visited.
2. Kinds must agree.  A kind mismatch yields one divergence and stops
   recursion into that node.
3. Objects are compared key by key, arrays element by element (ordered or
   any-order), strings through the ``TemplateEvaluator`` and the remaining
   scalars by their JSON text.

Locations follow the pattern's shape: ``$`` is the root, ``.key`` selects an
object member and ``[i]`` an array element.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from json_pattern_match.errors import MaxDepthExceededError
from json_pattern_match.matching.assignment import hungarian_match, witness_cost_matrix
from json_pattern_match.matching.config import ArrayOrder, MatchConfig
from json_pattern_match.matching.kinds import (
    WILDCARD,
    NodeKind,
    classify,
    contains_wildcard,
    is_wildcard,
)
from json_pattern_match.result import Divergence, DivergenceKind
from json_pattern_match.templates.evaluator import TemplateEvaluator

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

__all__ = ["ROOT", "StructuralMatcher", "preview"]

ROOT = "$"

# Location handed to any-order probes; their divergences are discarded.
_PROBE_LOCATION = "ignored"

_PREVIEW_LIMIT = 40


def _json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def preview(value: Any, limit: int = _PREVIEW_LIMIT) -> str:
    """Short JSON rendering of ``value`` for messages, truncated to ``limit``."""
    text = _json_text(value)
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


class StructuralMatcher:
    """Recursive comparator of a pattern tree against an actual tree.

    One instance may be reused for any number of calls; it holds no state
    between calls.  The divergence list is created fresh by each
    ``find_divergences`` call.

    Args:
        config:    Matching behaviour.  Defaults to ``MatchConfig()``.
        scope:     Template variables, or None to compare template syntax
                   literally.
        evaluator: Leaf string comparator.  Defaults to ``TemplateEvaluator()``.
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        scope: Any = None,
        evaluator: TemplateEvaluator | None = None,
    ) -> None:
        self._config: MatchConfig = config if config is not None else MatchConfig()
        self._scope = scope
        self._evaluator = evaluator if evaluator is not None else TemplateEvaluator()

    @property
    def config(self) -> MatchConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_divergences(
        self, pattern: Any, actual: Any, location: str = ROOT
    ) -> list[Divergence]:
        """Return every divergence of ``actual`` from ``pattern``.

        Args:
            pattern:  Pattern JSON value, possibly holding wildcards and
                      template strings.
            actual:   JSON value under test.
            location: Path of this node.  Defaults to the root ``"$"``.

        Returns:
            Divergences in traversal order.  Empty when ``actual`` matches.

        Raises:
            UnsupportedValueError: If either tree holds a non-JSON value.
            TemplateExpansionError: If a template string cannot be expanded.
            MaxDepthExceededError: If nesting exceeds ``config.max_depth``.
        """
        divergences: list[Divergence] = []
        self._match(pattern, actual, location, 0, divergences)
        return divergences

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _match(
        self,
        pattern: Any,
        actual: Any,
        location: str,
        depth: int,
        out: list[Divergence],
    ) -> None:
        if is_wildcard(pattern):
            return

        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            raise MaxDepthExceededError(
                f"Pattern nesting at {location} exceeds max_depth={max_depth}"
            )

        pattern_kind = classify(pattern)
        actual_kind = classify(actual)
        if pattern_kind != actual_kind:
            out.append(self._type_mismatch(pattern, pattern_kind, actual_kind, location))
            return

        if pattern_kind == NodeKind.OBJECT:
            self._match_object(pattern, actual, location, depth, out)
        elif pattern_kind == NodeKind.ARRAY:
            self._match_array(pattern, actual, location, depth, out)
        elif pattern_kind == NodeKind.STRING:
            divergence = self._evaluator.string_matches(
                pattern, actual, self._scope, location
            )
            if divergence is not None:
                out.append(divergence)
        else:
            self._match_scalar(pattern, actual, location, out)

    @staticmethod
    def _type_mismatch(
        pattern: Any, pattern_kind: NodeKind, actual_kind: NodeKind, location: str
    ) -> Divergence:
        if pattern_kind in (NodeKind.OBJECT, NodeKind.ARRAY):
            expected = f"of type {pattern_kind}"
        else:
            expected = f"of type {pattern_kind} ({preview(pattern)})"
        return Divergence(
            kind=DivergenceKind.TYPE_MISMATCH,
            location=location,
            message=f"Expected {location} to be {expected} but it was of type {actual_kind}",
        )

    @staticmethod
    def _match_scalar(
        pattern: Any, actual: Any, location: str, out: list[Divergence]
    ) -> None:
        expected_text = _json_text(pattern)
        actual_text = _json_text(actual)
        if expected_text != actual_text:
            out.append(
                Divergence(
                    kind=DivergenceKind.VALUE_MISMATCH,
                    location=location,
                    message=f"Expected {location} to be {expected_text} but it was {actual_text}",
                )
            )

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def _match_object(
        self,
        pattern: Mapping[str, Any],
        actual: Mapping[str, Any],
        location: str,
        depth: int,
        out: list[Divergence],
    ) -> None:
        wildcard = contains_wildcard(pattern)

        for key, expected in pattern.items():
            if key == WILDCARD and wildcard:
                continue
            child_location = f"{location}.{key}"
            if key not in actual:
                out.append(
                    Divergence(
                        kind=DivergenceKind.MISSING_PROPERTY,
                        location=child_location,
                        message=(
                            f'Expected property "{key}" at {location} '
                            f"with value {preview(expected)} but it was missing"
                        ),
                    )
                )
                continue
            self._match(expected, actual[key], child_location, depth + 1, out)

        if wildcard:
            return
        for key in actual:
            if key not in pattern:
                out.append(
                    Divergence(
                        kind=DivergenceKind.UNEXPECTED_PROPERTY,
                        location=location,
                        message=(
                            f'Unexpected property "{key}" at {location} '
                            f"with value {preview(actual[key])}"
                        ),
                    )
                )

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def _match_array(
        self,
        pattern: Sequence[Any],
        actual: Sequence[Any],
        location: str,
        depth: int,
        out: list[Divergence],
    ) -> None:
        wildcard = contains_wildcard(pattern)
        required = len(pattern) - 1 if wildcard else len(pattern)

        if wildcard and len(actual) < required:
            out.append(
                Divergence(
                    kind=DivergenceKind.ARRAY_TOO_SHORT,
                    location=location,
                    message=(
                        f"Expected {location} to have at least {required} "
                        f"element(s) but it had {len(actual)}"
                    ),
                )
            )
        elif not wildcard and len(actual) != len(pattern):
            out.append(
                Divergence(
                    kind=DivergenceKind.ARRAY_SIZE_MISMATCH,
                    location=location,
                    message=(
                        f"Expected {location} to have {len(pattern)} "
                        f"element(s) but it had {len(actual)}"
                    ),
                )
            )

        if self._config.array_order == ArrayOrder.ANY_ORDER:
            self._match_any_order(pattern[:required], actual, location, depth, wildcard, out)
        else:
            # The size divergence above already covers absent indices.
            compared = min(required, len(actual))
            self._match_ordered(pattern[:compared], actual, location, depth, out)

    def _match_ordered(
        self,
        elements: Sequence[Any],
        actual: Sequence[Any],
        location: str,
        depth: int,
        out: list[Divergence],
    ) -> None:
        for i, expected in enumerate(elements):
            self._match(expected, actual[i], f"{location}[{i}]", depth + 1, out)

    def _match_any_order(
        self,
        elements: Sequence[Any],
        actual: Sequence[Any],
        location: str,
        depth: int,
        wildcard: bool,
        out: list[Divergence],
    ) -> None:
        if self._config.unique_witnesses:
            unmatched = self._unassigned_elements(elements, actual, depth)
        else:
            unmatched = [
                i
                for i, expected in enumerate(elements)
                if not any(self._probe(expected, item, depth) for item in actual)
            ]

        for i in unmatched:
            element_location = f"{location}[{i}]"
            if wildcard:
                message = (
                    f"Expected {location} to contain an element matching "
                    f"{element_location} = {preview(elements[i])} in any order, "
                    f"but no element matched"
                )
            else:
                message = (
                    f"Expected {location} to consist of the pattern elements in any "
                    f"order, but no element matched {element_location} = "
                    f"{preview(elements[i])}"
                )
            out.append(
                Divergence(
                    kind=DivergenceKind.ELEMENT_NOT_FOUND,
                    location=element_location,
                    message=message,
                )
            )

    def _unassigned_elements(
        self, elements: Sequence[Any], actual: Sequence[Any], depth: int
    ) -> list[int]:
        """Pattern indices left without a distinct witness in ``actual``."""
        witnesses = [
            [self._probe(expected, item, depth) for item in actual]
            for expected in elements
        ]
        row_ind, _ = hungarian_match(witness_cost_matrix(witnesses, len(actual)))
        assigned = set(row_ind.tolist())
        return [i for i in range(len(elements)) if i not in assigned]

    def _probe(self, expected: Any, item: Any, depth: int) -> bool:
        """Return True if ``item`` matches ``expected`` without any divergence."""
        scratch: list[Divergence] = []
        self._match(expected, item, _PROBE_LOCATION, depth + 1, scratch)
        return not scratch
