"""Template renderer interface and render errors.

The Strategy Pattern allows the placeholder and Jinja2 renderers to be
interchangeable at runtime.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class TemplateRenderError(Exception):
    """Base exception for all rendering failures."""


class MissingVariableError(TemplateRenderError):
    """Raised when a referenced placeholder has no configured value.

    Attributes:
        missing: Sorted names of the unresolved placeholders.
    """

    def __init__(self, missing: Sequence[str], message: str | None = None) -> None:
        self.missing = sorted(set(missing))
        if message is None:
            message = "Missing template variable(s): " + ", ".join(self.missing)
        super().__init__(message)


class MalformedTemplateError(TemplateRenderError):
    """Raised when the template itself contains an invalid placeholder marker.

    Attributes:
        line: 1-based line of the offending marker, if known.
        column: 1-based column of the offending marker, if known.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            location = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({location})"
        super().__init__(message)


class InvalidVariableError(TemplateRenderError):
    """Raised when a configured value would leave a placeholder marker behind."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(
            message or f"Value for template variable '{name}' must not contain '{{{{'"
        )


class BaseTemplateRenderer(ABC):
    """Abstract base class for template rendering strategies.

    Rendering is a pure function of (template, variables): implementations
    must not keep per-render state and must not return partial output.
    """

    #: Identifier used by the factory and reported in render results.
    name: str = ""

    @abstractmethod
    def render(self, template: str | Sequence[str], variables: Mapping[str, Any]) -> str:
        """Render a template with the given configuration mapping.

        Args:
            template: Template text, or a sequence of lines without terminators.
            variables: Placeholder name to value mapping.

        Returns:
            The fully resolved document text.

        Raises:
            MissingVariableError: If a referenced placeholder is not in `variables`.
            MalformedTemplateError: If the template contains a malformed marker.
        """

    @abstractmethod
    def required_variables(self, template: str | Sequence[str]) -> list[str]:
        """Return the sorted unique placeholder names referenced by a template.

        Raises:
            MalformedTemplateError: If the template contains a malformed marker.
        """

    @staticmethod
    def coerce_text(template: str | Sequence[str]) -> str:
        """Normalize template input to a single string."""
        if isinstance(template, str):
            return template
        return "\n".join(template)

    @staticmethod
    def format_value(value: Any) -> str:
        """Convert a configured value to its literal substitution text."""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
