"""Concrete strategy implementations."""

from compose_renderer.strategies.loaders import (
    FileSystemTemplateLoader,
    YamlVariablesLoader,
)
from compose_renderer.strategies.renderers import (
    JinjaRenderer,
    PlaceholderRenderer,
)
from compose_renderer.strategies.template_engine import (
    TemplateAnalyzer,
)

__all__ = [
    "FileSystemTemplateLoader",
    "YamlVariablesLoader",
    "JinjaRenderer",
    "PlaceholderRenderer",
    "TemplateAnalyzer",
]
