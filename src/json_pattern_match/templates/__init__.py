"""Templates subpackage: string-template expansion used for leaf comparison.

Re-exports the public API for the templates module:
- TemplateEngine: structural protocol any template engine satisfies
- MustacheEngine: default pystache-backed engine with a parse cache
- TemplateEvaluator: compares pattern strings against actual strings
"""

from json_pattern_match.templates.evaluator import TemplateEvaluator, looks_like_template
from json_pattern_match.templates.mustache import MustacheEngine
from json_pattern_match.templates.protocols import TemplateEngine

__all__ = ["MustacheEngine", "TemplateEngine", "TemplateEvaluator", "looks_like_template"]
