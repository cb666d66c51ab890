"""TemplateEngine Protocol for the template-substitution extension point.

Defines the structural interface every template engine must satisfy.
Users can plug in their own engine without inheriting from any base class:
any object with a conformant ``render`` method passes ``isinstance`` checks.

Example::

    from json_pattern_match.templates import TemplateEngine

    class FormatEngine:
        def render(self, template: str, scope: Any) -> str:
            return template.format(**scope)

    assert isinstance(FormatEngine(), TemplateEngine)  # structural conformance
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngine(Protocol):
    """Structural protocol for template engines.

    The ``render`` method must:
    - Expand every template expression in ``template`` against ``scope``.
    - Return the expanded text.
    - Raise ``TemplateExpansionError`` when the template is malformed or
      refers to a variable ``scope`` does not provide.
    """

    def render(self, template: str, scope: Any) -> str: ...
