"""Template engine strategies.

Implements placeholder detection for double-brace templates.
"""

from compose_renderer.strategies.template_engine.analyzer import TemplateAnalyzer
from compose_renderer.strategies.template_engine.models import (
    DetectedPlaceholder,
    RenderedDocument,
)

__all__ = [
    "TemplateAnalyzer",
    "DetectedPlaceholder",
    "RenderedDocument",
]
