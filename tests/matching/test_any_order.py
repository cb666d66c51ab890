"""Tests for StructuralMatcher with ArrayOrder.ANY_ORDER.

Covers:
- Reordered arrays match
- Size checks still apply (exact size without wildcard, minimum with wildcard)
- One summary divergence per unmatched pattern element, no nested detail
- Wording differs between wildcard (subset) and exact (permutation) arrays
- Loose witnesses by default: one actual element may satisfy several
  pattern elements
- unique_witnesses=True enforces a one-to-one assignment
"""

from __future__ import annotations

from json_pattern_match.matching.config import ArrayOrder, MatchConfig
from json_pattern_match.matching.structural import StructuralMatcher
from json_pattern_match.result import Divergence, DivergenceKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def any_order(pattern: object, actual: object) -> list[Divergence]:
    matcher = StructuralMatcher(config=MatchConfig(array_order=ArrayOrder.ANY_ORDER))
    return matcher.find_divergences(pattern, actual)


def one_to_one(pattern: object, actual: object) -> list[Divergence]:
    matcher = StructuralMatcher(
        config=MatchConfig(array_order=ArrayOrder.ANY_ORDER, unique_witnesses=True)
    )
    return matcher.find_divergences(pattern, actual)


# ---------------------------------------------------------------------------
# Loose any-order matching
# ---------------------------------------------------------------------------


class TestAnyOrderSuccess:
    def test_reordered_scalars_match(self) -> None:
        assert any_order([1, 2], [2, 1]) == []

    def test_reordered_objects_match(self) -> None:
        pattern = [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
        actual = [{"id": 2, "name": "b"}, {"id": 1, "name": "a"}]
        assert any_order(pattern, actual) == []

    def test_nested_wildcards_inside_elements(self) -> None:
        pattern = [{"id": 2, "...": "..."}, {"id": 1, "...": "..."}]
        actual = [{"id": 1, "x": True}, {"id": 2, "y": False}]
        assert any_order(pattern, actual) == []

    def test_wildcard_subset(self) -> None:
        assert any_order([3, 1, "..."], [1, 2, 3, 4]) == []

    def test_empty_arrays(self) -> None:
        assert any_order([], []) == []

    def test_nested_arrays_also_any_order(self) -> None:
        assert any_order([[1, 2], [3, 4]], [[4, 3], [2, 1]]) == []


class TestAnyOrderFailures:
    def test_element_not_found_without_wildcard(self) -> None:
        result = any_order([1, 5], [2, 1])
        assert len(result) == 1
        assert result[0].kind == DivergenceKind.ELEMENT_NOT_FOUND
        assert result[0].location == "$[1]"
        assert result[0].message == (
            "Expected $ to consist of the pattern elements in any order, "
            "but no element matched $[1] = 5"
        )

    def test_element_not_found_with_wildcard(self) -> None:
        result = any_order([5, "..."], [1, 2, 3])
        assert len(result) == 1
        assert result[0].kind == DivergenceKind.ELEMENT_NOT_FOUND
        assert result[0].message == (
            "Expected $ to contain an element matching $[0] = 5 in any order, "
            "but no element matched"
        )

    def test_unexpected_element_is_size_mismatch(self) -> None:
        result = any_order([1, 2], [2, 1, 3])
        assert [d.kind for d in result] == [DivergenceKind.ARRAY_SIZE_MISMATCH]

    def test_missing_element(self) -> None:
        result = any_order([1, 2, 3], [3, 1])
        assert [d.kind for d in result] == [
            DivergenceKind.ARRAY_SIZE_MISMATCH,
            DivergenceKind.ELEMENT_NOT_FOUND,
        ]
        assert result[1].location == "$[1]"

    def test_wildcard_too_short(self) -> None:
        result = any_order([1, 2, "..."], [2])
        assert [d.kind for d in result] == [
            DivergenceKind.ARRAY_TOO_SHORT,
            DivergenceKind.ELEMENT_NOT_FOUND,
        ]

    def test_nested_detail_is_discarded(self) -> None:
        result = any_order([{"id": 1, "name": "a"}], [{"id": 1, "name": "b"}])
        assert len(result) == 1
        assert result[0].kind == DivergenceKind.ELEMENT_NOT_FOUND
        assert "ignored" not in result[0].message

    def test_unmatched_elements_reported_in_pattern_order(self) -> None:
        result = any_order([7, 1, 8], [1, 2, 3])
        assert [d.location for d in result] == ["$[0]", "$[2]"]

    def test_array_inside_object_location(self) -> None:
        result = any_order({"tags": ["a", "z"]}, {"tags": ["b", "a"]})
        assert result[0].location == "$.tags[1]"


class TestLooseWitnesses:
    def test_one_actual_element_may_witness_repeated_pattern_elements(self) -> None:
        assert any_order([1, 1], [1, 2]) == []

    def test_wildcard_pattern_with_duplicates(self) -> None:
        assert any_order([1, 1, "..."], [1, 5]) == []


# ---------------------------------------------------------------------------
# One-to-one any-order matching
# ---------------------------------------------------------------------------


class TestUniqueWitnesses:
    def test_duplicates_need_distinct_witnesses(self) -> None:
        result = one_to_one([1, 1], [1, 2])
        assert len(result) == 1
        assert result[0].kind == DivergenceKind.ELEMENT_NOT_FOUND
        assert result[0].location == "$[1]"

    def test_reordered_match(self) -> None:
        assert one_to_one([1, 2, 3], [3, 1, 2]) == []

    def test_assignment_finds_non_greedy_solution(self) -> None:
        # First-fit would hand actual[0] to pattern[0] and strand {"id": 1}.
        pattern = [{"id": "..."}, {"id": 1}]
        actual = [{"id": 1}, {"id": 2}]
        assert one_to_one(pattern, actual) == []

    def test_empty_actual(self) -> None:
        result = one_to_one([1, "..."], [])
        assert [d.kind for d in result] == [
            DivergenceKind.ARRAY_TOO_SHORT,
            DivergenceKind.ELEMENT_NOT_FOUND,
        ]

    def test_wildcard_subset_with_extra_elements(self) -> None:
        assert one_to_one(["b", "a", "..."], ["a", "c", "b"]) == []
