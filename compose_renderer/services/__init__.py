"""Application services."""

from compose_renderer.services.rendering import TemplateRenderingService

__all__ = ["TemplateRenderingService"]
