"""Template renderer strategies."""

from compose_renderer.strategies.renderers.jinja import JinjaRenderer
from compose_renderer.strategies.renderers.placeholder import PlaceholderRenderer

__all__ = [
    "PlaceholderRenderer",
    "JinjaRenderer",
]
