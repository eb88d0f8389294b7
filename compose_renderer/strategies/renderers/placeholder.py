"""Placeholder renderer strategy.

Substitutes ``{{ name }}`` tokens with literal values from a configuration
mapping. Everything outside the tokens is copied through byte for byte.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from compose_renderer.interfaces.renderer import (
    BaseTemplateRenderer,
    InvalidVariableError,
    MissingVariableError,
)
from compose_renderer.strategies.template_engine.analyzer import OPEN_MARKER, TemplateAnalyzer

logger = logging.getLogger(__name__)


class PlaceholderRenderer(BaseTemplateRenderer):
    """Single-pass exact-string substitution renderer.

    Substituted values are never rescanned, and a value that contains an
    opening marker is rejected so the output never carries a marker.

    Example:
        ```python
        renderer = PlaceholderRenderer()
        renderer.render("path: {{ base }}/data", {"base": "/srv"})
        # 'path: /srv/data'
        ```
    """

    name = "placeholder"

    def __init__(self, analyzer: TemplateAnalyzer | None = None) -> None:
        """Initialize the renderer.

        Args:
            analyzer: Analyzer used to locate tokens. Defaults to a new TemplateAnalyzer.
        """
        self._analyzer = analyzer or TemplateAnalyzer()

    def render(self, template: str | Sequence[str], variables: Mapping[str, Any]) -> str:
        """Render a template with the given configuration mapping.

        Args:
            template: Template text, or a sequence of lines without terminators.
            variables: Placeholder name to value mapping.

        Returns:
            The fully resolved document text.

        Raises:
            MissingVariableError: If any referenced placeholder is not in `variables`.
            MalformedTemplateError: If the template contains a malformed marker.
            InvalidVariableError: If a substituted value contains an opening marker
                or forms one with adjacent text.
        """
        text = self.coerce_text(template)
        placeholders = self._analyzer.scan(text)

        missing = {p.name for p in placeholders if p.name not in variables}
        if missing:
            raise MissingVariableError(sorted(missing))

        values: dict[str, str] = {}
        for name in {p.name for p in placeholders}:
            value = self.format_value(variables[name])
            if OPEN_MARKER in value:
                raise InvalidVariableError(name)
            values[name] = value

        parts: list[str] = []
        spans: list[tuple[int, int, str]] = []
        pos = 0
        offset = 0
        for placeholder in placeholders:
            literal = text[pos:placeholder.start]
            value = values[placeholder.name]
            parts.append(literal)
            parts.append(value)
            offset += len(literal)
            spans.append((offset, offset + len(value), placeholder.name))
            offset += len(value)
            pos = placeholder.end
        parts.append(text[pos:])
        result = "".join(parts)

        # Literal text holds no opener after a scan, so any opener here
        # straddles a substituted value and its neighbour
        marker = result.find(OPEN_MARKER)
        if marker != -1:
            name = next(
                n for start, end, n in spans
                if start < end and start <= marker + 1 and end > marker
            )
            raise InvalidVariableError(
                name,
                message=f"Value for template variable '{name}' forms a "
                f"'{OPEN_MARKER}' marker with adjacent text",
            )

        logger.debug(
            f"Rendered {len(placeholders)} placeholders "
            f"({len(values)} distinct variables)"
        )
        return result

    def required_variables(self, template: str | Sequence[str]) -> list[str]:
        """Return the sorted unique placeholder names referenced by a template."""
        return self._analyzer.required_variables(self.coerce_text(template))
