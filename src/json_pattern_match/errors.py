"""Usage-error hierarchy for json-pattern-match.

Divergences between pattern and actual are *data* and are returned as
``Divergence`` records.  The exceptions below signal a different channel:
the pattern, the input text, or the template itself is malformed.  They are
raised immediately and never folded into a divergence list.

Each exception also subclasses the closest builtin so callers that only
know about ``ValueError`` / ``TypeError`` still catch it.
"""

from __future__ import annotations

__all__ = [
    "InvalidJsonError",
    "JsonPatternMatchError",
    "MaxDepthExceededError",
    "TemplateExpansionError",
    "UnsupportedValueError",
    "WildcardUsageError",
]


class JsonPatternMatchError(Exception):
    """Base class of all usage errors raised by json-pattern-match."""


class InvalidJsonError(JsonPatternMatchError, ValueError):
    """Raised when pattern or actual JSON text cannot be parsed.

    Attributes:
        source: Which input failed, ``"pattern"`` or ``"actual"``.
        text:   The raw text that failed to parse.
    """

    def __init__(self, source: str, text: str, detail: str) -> None:
        self.source = source
        self.text = text
        super().__init__(f"Failed to parse {source} as JSON: {detail}\n{text}")


class UnsupportedValueError(JsonPatternMatchError, TypeError):
    """Raised when a Python value outside the JSON data model is matched."""


class WildcardUsageError(JsonPatternMatchError, TypeError):
    """Raised when wildcard detection is attempted on a non-container node."""


class TemplateExpansionError(JsonPatternMatchError, ValueError):
    """Raised when a template string cannot be expanded against its scope."""


class MaxDepthExceededError(JsonPatternMatchError, RecursionError):
    """Raised when a pattern is nested deeper than ``MatchConfig.max_depth``."""
