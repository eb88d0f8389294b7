"""Template loading and analysis interfaces.

Defines the template document model and abstract base classes for
template sources and placeholder analysis.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TemplateDocument:
    """A template loaded from a template source.

    Attributes:
        name: Template name relative to its source (e.g. "reverse_proxy/x.yml").
        content: The raw template text.
        metadata: Additional source-specific information (path, size, ...).
    """

    name: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> list[str]:
        """Return the template text split into lines (without terminators)."""
        return self.content.splitlines()


class BaseTemplateLoader(ABC):
    """Abstract base class for template sources.

    Example:
        ```python
        loader = FileSystemTemplateLoader(templates_dir)
        for name in loader.list_templates():
            document = loader.load(name)
        ```
    """

    @abstractmethod
    def list_templates(self) -> list[str]:
        """Return the sorted names of all available templates."""

    @abstractmethod
    def load(self, name: str) -> TemplateDocument:
        """Load a template by name.

        Args:
            name: The template name as returned by `list_templates`.

        Returns:
            The loaded TemplateDocument.

        Raises:
            FileNotFoundError: If no template with that name exists.
        """


class BaseTemplateAnalyzer(ABC):
    """Abstract base class for placeholder detection strategies."""

    @abstractmethod
    def scan(self, text: str) -> list[Any]:
        """Detect placeholder tokens in template text.

        Args:
            text: The raw template text.

        Returns:
            List of DetectedPlaceholder objects in document order.

        Raises:
            MalformedTemplateError: If a placeholder marker is malformed.
        """

    def analyze(self, document: TemplateDocument) -> list[Any]:
        """Detect placeholder tokens in a loaded template."""
        return self.scan(document.content)
