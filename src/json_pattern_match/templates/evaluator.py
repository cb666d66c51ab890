"""TemplateEvaluator: leaf comparison of pattern strings against actual strings.

A pattern string is expanded only when a scope is supplied *and* the string
contains both ``{{`` and ``}}``.  The delimiter check keeps the template
engine off the hot path for the vast majority of plain strings.  Without a
scope, template syntax is compared literally, delimiters included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_pattern_match.result import Divergence, DivergenceKind
from json_pattern_match.templates.mustache import MustacheEngine

if TYPE_CHECKING:
    from json_pattern_match.templates.protocols import TemplateEngine

__all__ = ["TemplateEvaluator", "looks_like_template"]

OPEN_DELIMITER = "{{"
CLOSE_DELIMITER = "}}"


def looks_like_template(text: str) -> bool:
    """Return True if ``text`` might hold a template expression."""
    return OPEN_DELIMITER in text and CLOSE_DELIMITER in text


class TemplateEvaluator:
    """Compares pattern strings against actual strings, expanding templates.

    Args:
        engine: A ``TemplateEngine``-conformant object.  Defaults to
            ``MustacheEngine()`` when None.
    """

    def __init__(self, engine: TemplateEngine | None = None) -> None:
        self._engine: Any = engine if engine is not None else MustacheEngine()

    @property
    def engine(self) -> Any:
        return self._engine

    def expand(self, template: str, scope: Any) -> str:
        """Expand ``template`` against ``scope`` (no delimiter pre-check)."""
        return self._engine.render(template, scope)

    def string_matches(
        self,
        pattern: str,
        actual: str,
        scope: Any,
        location: str,
    ) -> Divergence | None:
        """Compare one pattern string against one actual string.

        Args:
            pattern:  Pattern text, possibly holding template expressions.
            actual:   Actual text.
            scope:    Variable bindings, or None to disable expansion.
            location: Path of the compared value, used in the message.

        Returns:
            None on match, otherwise a single ``VALUE_MISMATCH`` divergence.

        Raises:
            TemplateExpansionError: If expansion fails.  This is a usage
                error and is never turned into a divergence.
        """
        if scope is not None and looks_like_template(pattern):
            expanded = self.expand(pattern, scope)
            if actual == expanded:
                return None
            return Divergence(
                kind=DivergenceKind.VALUE_MISMATCH,
                location=location,
                message=(
                    f'Expected {location} to be "{expanded}" but it was "{actual}"\n'
                    f"        Pattern was evaluated as template\n"
                    f'        Original pattern: "{pattern}"'
                ),
            )
        if actual == pattern:
            return None
        return Divergence(
            kind=DivergenceKind.VALUE_MISMATCH,
            location=location,
            message=f'Expected {location} to be "{pattern}" but it was "{actual}"',
        )
