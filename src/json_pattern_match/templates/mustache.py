"""MustacheEngine: pystache-backed template engine with a parse cache.

Patterns such as ``"{{baseUrl}}/users/{{id}}"`` are rendered with
``pystache`` against the caller's scope (a mapping or any object exposing
attributes).  Missing variables are errors rather than empty strings, and
HTML escaping is disabled since the output is compared against JSON text,
not embedded in a page.  Booleans and None render as ``true``, ``false``
and ``null``.

Parsed templates are kept in a per-instance ``LRUCache`` so a pattern that
repeats the same template string across many array elements is parsed once.
"""

from __future__ import annotations

import logging
from typing import Any

import pystache
from cachetools import LRUCache
from pystache.common import PystacheError
from pystache.parser import ParsingError

from json_pattern_match.errors import TemplateExpansionError

__all__ = ["MustacheEngine"]

logger = logging.getLogger(__name__)


def _no_escape(text: str) -> str:
    return text


class _JsonTextRenderer(pystache.Renderer):  # type: ignore[misc]
    """Renders booleans and null the way JSON spells them."""

    def str_coerce(self, val: Any) -> str:
        if isinstance(val, bool):
            return "true" if val else "false"
        if val is None:
            return "null"
        return str(val)


class MustacheEngine:
    """Renders mustache templates with pystache.

    Satisfies the ``TemplateEngine`` Protocol structurally.  Each instance
    owns its own ``LRUCache`` of parsed templates.

    Args:
        max_cache_size: Maximum number of parsed templates held in memory.
            Defaults to 256.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_cache_size: int = 256) -> None:
        self._renderer = _JsonTextRenderer(escape=_no_escape, missing_tags="strict")
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_cache_size)

    @property
    def max_size(self) -> int:
        """The maximum number of parsed templates this engine caches."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of parsed templates in the cache."""
        return int(self._cache.currsize)

    def render(self, template: str, scope: Any) -> str:
        """Expand ``template`` against ``scope``.

        Raises:
            TemplateExpansionError: If the template cannot be parsed or uses a
                variable that ``scope`` does not define.
        """
        try:
            parsed = self._cache.get(template)
            if parsed is None:
                logger.debug("Parsing template %r", template)
                parsed = pystache.parse(template)
                self._cache[template] = parsed
            return str(self._renderer.render(parsed, scope))
        except (ParsingError, PystacheError) as exc:
            raise TemplateExpansionError(
                f"Failed to expand template {template!r}: {exc}"
            ) from exc
