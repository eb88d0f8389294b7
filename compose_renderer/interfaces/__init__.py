"""Abstract base classes for template processing strategies."""

from compose_renderer.interfaces.renderer import (
    BaseTemplateRenderer,
    InvalidVariableError,
    MalformedTemplateError,
    MissingVariableError,
    TemplateRenderError,
)
from compose_renderer.interfaces.template import (
    BaseTemplateAnalyzer,
    BaseTemplateLoader,
    TemplateDocument,
)
from compose_renderer.interfaces.variables import BaseVariablesLoader

__all__ = [
    "BaseTemplateAnalyzer",
    "BaseTemplateLoader",
    "BaseTemplateRenderer",
    "BaseVariablesLoader",
    "TemplateDocument",
    "TemplateRenderError",
    "MissingVariableError",
    "MalformedTemplateError",
    "InvalidVariableError",
]
