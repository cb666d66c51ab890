"""Integrations subpackage for json-pattern-match.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)
- PyHamcrest matcher (``matches_json``)

Adapters with optional SDK dependencies (PyHamcrest) are imported
conditionally; a missing SDK does not prevent the package from loading.
"""

from __future__ import annotations

__all__: list[str] = []

# PyHamcrest is optional (pip install json-pattern-match[hamcrest]).
try:
    from json_pattern_match.integrations._hamcrest import IsMatchingJson, matches_json

    __all__.extend(["IsMatchingJson", "matches_json"])
except ImportError:
    pass

__all__ = sorted(__all__)
