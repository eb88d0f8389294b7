"""Template analyzer strategy.

Scans template text for double-brace placeholder tokens such as
``{{ app_data_base_path }}`` and reports where each one sits.
"""

import logging
import re

from compose_renderer.interfaces.renderer import MalformedTemplateError
from compose_renderer.interfaces.template import BaseTemplateAnalyzer
from compose_renderer.strategies.template_engine.models import DetectedPlaceholder

logger = logging.getLogger(__name__)

OPEN_MARKER = "{{"
CLOSE_MARKER = "}}"

_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class TemplateAnalyzer(BaseTemplateAnalyzer):
    """Detects placeholder tokens delimited by ``{{`` and ``}}``.

    A token must open and close on the same line and its body, once
    surrounding whitespace is stripped, must be a plain identifier.
    Text outside tokens, including a stray ``}}``, is left alone.
    """

    def scan(self, text: str) -> list[DetectedPlaceholder]:
        """Detect placeholder tokens in template text.

        Args:
            text: The raw template text.

        Returns:
            List of DetectedPlaceholder objects in document order.

        Raises:
            MalformedTemplateError: If a marker is unterminated, nested,
                or does not name a valid identifier.
        """
        placeholders: list[DetectedPlaceholder] = []
        pos = 0

        while True:
            start = text.find(OPEN_MARKER, pos)
            if start == -1:
                break

            line, column = self._location(text, start)
            line_end = text.find("\n", start)
            if line_end == -1:
                line_end = len(text)

            close = text.find(CLOSE_MARKER, start + len(OPEN_MARKER), line_end)
            if close == -1:
                raise MalformedTemplateError(
                    "Unterminated placeholder marker", line=line, column=column
                )

            body = text[start + len(OPEN_MARKER):close]
            if OPEN_MARKER in body:
                raise MalformedTemplateError(
                    "Unterminated placeholder marker", line=line, column=column
                )

            name = body.strip()
            if not _NAME_PATTERN.fullmatch(name):
                raise MalformedTemplateError(
                    f"Invalid placeholder name {name!r}", line=line, column=column
                )

            end = close + len(CLOSE_MARKER)
            placeholders.append(
                DetectedPlaceholder(
                    name=name,
                    raw=text[start:end],
                    start=start,
                    end=end,
                    line=line,
                    column=column,
                )
            )
            pos = end

        logger.debug(f"Scan complete: {len(placeholders)} placeholders detected")
        return placeholders

    def required_variables(self, text: str) -> list[str]:
        """Return the sorted unique placeholder names referenced by text."""
        return sorted({p.name for p in self.scan(text)})

    @staticmethod
    def _location(text: str, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of an offset."""
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return line, column
