"""API routes and schemas."""

from compose_renderer.api.schemas import (
    ErrorResponse,
    InlineRenderRequest,
    RenderRequest,
    RenderResponse,
    TemplateDetailResponse,
    TemplateListResponse,
    TemplateSummary,
)
from compose_renderer.api.templates import router as templates_router

__all__ = [
    "templates_router",
    "ErrorResponse",
    "InlineRenderRequest",
    "RenderRequest",
    "RenderResponse",
    "TemplateDetailResponse",
    "TemplateListResponse",
    "TemplateSummary",
]
