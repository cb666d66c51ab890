"""Failure report rendering for assertion-style callers.

Turns a non-empty divergence list into the message of the ``AssertionError``
raised by ``assert_json_matches``: an optional reason prefix, one numbered
line per divergence, then pretty-printed dumps of the actual JSON, the
pattern and, when present, the template scope.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_pattern_match.codec import JsonCodec
    from json_pattern_match.result import Divergence

__all__ = ["format_divergences", "format_failure", "format_scope"]

_RULE = "-" * 92


def _section(title: str, body: str) -> str:
    return f"{_RULE}\n{title}\n{_RULE}\n{body}"


def format_divergences(divergences: list[Divergence]) -> str:
    """Render divergences as numbered lines under a summary header."""
    count = len(divergences)
    noun = "divergence" if count == 1 else "divergences"
    lines = [f"JSON does not match pattern ({count} {noun}):"]
    lines.extend(f"[{i}] {d.message}" for i, d in enumerate(divergences, start=1))
    return "\n".join(lines)


def format_scope(scope: Any) -> str:
    """Render a template scope as aligned ``key = value`` lines.

    Mappings are rendered item by item, other objects through their public
    attributes.  Anything else falls back to ``repr``.
    """
    if isinstance(scope, Mapping):
        items = [(str(k), v) for k, v in scope.items()]
    elif hasattr(scope, "__dict__"):
        items = [(k, v) for k, v in vars(scope).items() if not k.startswith("_")]
    else:
        return repr(scope)
    if not items:
        return "(empty)"
    width = max(len(k) for k, _ in items)
    return "\n".join(f"{k.ljust(width)} = {v}" for k, v in items)


def format_failure(
    divergences: list[Divergence],
    actual: Any,
    pattern: Any,
    codec: JsonCodec,
    reason: str | None = None,
    scope: Any = None,
) -> str:
    """Build the full assertion message for a failed match.

    Args:
        divergences: Non-empty list of divergences.
        actual:      Parsed actual tree.
        pattern:     Parsed pattern tree.
        codec:       Codec used to pretty-print both trees.
        reason:      Optional prefix, e.g. the name of the failing check.
        scope:       Template scope, rendered only when not None.
    """
    parts = []
    header = format_divergences(divergences)
    parts.append(f"{reason}\n{header}" if reason else header)
    parts.append(_section("Actual JSON", codec.dumps(actual)))
    parts.append(_section("Pattern", codec.dumps(pattern)))
    if scope is not None:
        parts.append(_section("Template scope", format_scope(scope)))
    return "\n\n".join(parts)
