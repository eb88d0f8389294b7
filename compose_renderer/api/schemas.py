"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from compose_renderer.strategies.template_engine import DetectedPlaceholder, RenderedDocument


# =============================================================================
# Template Schemas
# =============================================================================


class TemplateSummary(BaseModel):
    """A template and the variables it references."""

    name: str = Field(description="Template name, e.g. 'reverse_proxy/reverse-proxy-docker-compose.yml'")
    variables: list[str] = Field(default_factory=list, description="Sorted placeholder names")
    error: str | None = Field(default=None, description="Why the template could not be analyzed")


class TemplateListResponse(BaseModel):
    """Response for listing templates."""

    templates: list[TemplateSummary]
    total: int


class TemplateDetailResponse(BaseModel):
    """Response for a single template with its detected placeholders."""

    name: str
    content: str
    placeholders: list[DetectedPlaceholder]
    variables: list[str]


# =============================================================================
# Render Schemas
# =============================================================================


class RenderRequest(BaseModel):
    """Request schema for rendering a stored template."""

    variables: dict[str, str] = Field(
        default_factory=dict,
        description="Variables overriding the configured ones",
    )
    renderer: str | None = Field(
        default=None,
        description="Renderer strategy: 'placeholder' or 'jinja2'. Defaults to settings.",
    )


class InlineRenderRequest(RenderRequest):
    """Request schema for rendering template text supplied in the request."""

    template: str = Field(description="Template text to render")


class RenderResponse(RenderedDocument):
    """Response for render endpoints."""


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    error_code: str | None = None
    context: dict[str, Any] | None = None
