"""pytest plugin for json-pattern-match.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_pattern_match import JsonMatcher, MatchConfig


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture that returns a callable JSON pattern asserter.

    The fixture is session-scoped because the returned callable is stateless
    (builds a fresh JsonMatcher per call).

    Usage in tests::

        def test_user(assert_json_matches):
            assert_json_matches({"id": "...", "name": "Ann"}, response.json())

        def test_mismatch(assert_json_matches):
            with pytest.raises(AssertionError, match=r"JSON does not match"):
                assert_json_matches({"a": 1}, {"b": 1})

    Returns:
        A callable ``_assert(pattern, actual, reason=None, config=None, scope=None) -> None``
        that raises ``AssertionError`` when ``actual`` diverges from ``pattern``.
    """

    def _assert(
        pattern: Any,
        actual: Any,
        reason: str | None = None,
        config: MatchConfig | None = None,
        scope: Any = None,
    ) -> None:
        """Assert that ``actual`` matches ``pattern``.

        Args:
            pattern: Pattern JSON value or JSON text.
            actual:  The JSON produced by the code under test.
            reason:  Optional prefix for the failure message.
            config:  Optional MatchConfig, e.g. for any-order arrays.
            scope:   Optional template variables.

        Raises:
            AssertionError: With every divergence and both JSON documents.
        """
        JsonMatcher(config=config, scope=scope).assert_matches(
            pattern, actual, reason=reason
        )

    return _assert
