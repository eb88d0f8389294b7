"""Template API routes.

Handles template listing, placeholder inspection and rendering.
Render errors propagate to the exception handlers registered in main.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from compose_renderer.api.deps import get_factory, get_rendering_service
from compose_renderer.api.schemas import (
    InlineRenderRequest,
    RenderRequest,
    RenderResponse,
    TemplateDetailResponse,
    TemplateListResponse,
    TemplateSummary,
)
from compose_renderer.core.factory import ComponentFactory
from compose_renderer.interfaces.renderer import BaseTemplateRenderer, TemplateRenderError
from compose_renderer.services.rendering import TemplateRenderingService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["templates"])


def _select_renderer(factory: ComponentFactory, renderer_type: str | None) -> BaseTemplateRenderer:
    """Resolve the renderer requested by the client."""
    try:
        return factory.get_renderer(renderer_type)
    except ValueError as e:
        logger.warning(f"Rejected renderer type: {renderer_type}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates(
    service: TemplateRenderingService = Depends(get_rendering_service),
) -> TemplateListResponse:
    """List available templates with the variables each one references.

    A template that cannot be analyzed is listed with its error instead of
    failing the whole listing.
    """
    summaries: list[TemplateSummary] = []
    for name in service.list_templates():
        try:
            summaries.append(TemplateSummary(name=name, variables=service.required_variables(name)))
        except TemplateRenderError as e:
            logger.warning(f"Template {name} could not be analyzed: {e}")
            summaries.append(TemplateSummary(name=name, error=str(e)))
    return TemplateListResponse(templates=summaries, total=len(summaries))


@router.get("/templates/{template_name:path}", response_model=TemplateDetailResponse)
async def get_template(
    template_name: str,
    service: TemplateRenderingService = Depends(get_rendering_service),
) -> TemplateDetailResponse:
    """Return a template's content and detected placeholder tokens."""
    document, placeholders = service.describe(template_name)
    return TemplateDetailResponse(
        name=document.name,
        content=document.content,
        placeholders=placeholders,
        variables=sorted({p.name for p in placeholders}),
    )


@router.post(
    "/templates/{template_name:path}/render",
    response_model=RenderResponse,
    status_code=status.HTTP_200_OK,
)
async def render_template(
    template_name: str,
    request: RenderRequest,
    factory: ComponentFactory = Depends(get_factory),
    service: TemplateRenderingService = Depends(get_rendering_service),
) -> RenderResponse:
    """Render a stored template.

    Request variables take precedence over the configured variables.

    Raises:
        HTTPException: 404 if the template is unknown, 422 on render errors,
            400 for an unknown renderer.
    """
    renderer = _select_renderer(factory, request.renderer)
    logger.info(f"Rendering template {template_name} with {renderer.name}")
    document = service.render(template_name, request.variables, renderer=renderer)
    return RenderResponse(**document.model_dump())


@router.post("/render", response_model=RenderResponse, status_code=status.HTTP_200_OK)
async def render_inline(
    request: InlineRenderRequest,
    factory: ComponentFactory = Depends(get_factory),
    service: TemplateRenderingService = Depends(get_rendering_service),
) -> RenderResponse:
    """Render template text supplied in the request body."""
    renderer = _select_renderer(factory, request.renderer)
    document = service.render_text(request.template, request.variables, renderer=renderer)
    return RenderResponse(**document.model_dump())
