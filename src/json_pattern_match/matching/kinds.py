"""NodeKind StrEnum and wildcard predicates for plain Python JSON trees.

JSON values are represented by the structures ``json.loads`` produces:
``dict``, ``list``, ``str``, ``int``/``float``, ``bool`` and ``None``.
``classify`` maps a value onto exactly one of the six JSON kinds so the
structural matcher can dispatch on a closed set.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

from json_pattern_match.errors import UnsupportedValueError, WildcardUsageError

__all__ = [
    "WILDCARD",
    "JsonValue",
    "NodeKind",
    "classify",
    "contains_wildcard",
    "is_container",
    "is_wildcard",
]

#: Reserved marker meaning "anything here" / "any further elements or keys".
WILDCARD = "..."

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class NodeKind(StrEnum):
    """The six kinds of JSON value.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


def classify(value: Any) -> NodeKind:
    """Return the JSON kind of ``value``.

    Raises:
        UnsupportedValueError: If ``value`` is not a JSON value.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if value is None:
        return NodeKind.NULL
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    raise UnsupportedValueError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    return classify(value) in (NodeKind.ARRAY, NodeKind.OBJECT)


def is_wildcard(value: Any) -> bool:
    """Return True if ``value`` is the bare wildcard string."""
    return isinstance(value, str) and value == WILDCARD


def contains_wildcard(node: Any) -> bool:
    """Check whether a container pattern node carries a wildcard.

    An array carries one when its last element is the wildcard; an object
    when it has the key ``"..."`` mapped to the wildcard value.

    Raises:
        WildcardUsageError: If ``node`` is not an array or an object.
    """
    kind = classify(node)
    if kind == NodeKind.ARRAY:
        return len(node) > 0 and is_wildcard(node[-1])
    if kind == NodeKind.OBJECT:
        return WILDCARD in node and is_wildcard(node[WILDCARD])
    raise WildcardUsageError(
        f"Only array and object nodes can contain wildcards, got {kind} node"
    )
