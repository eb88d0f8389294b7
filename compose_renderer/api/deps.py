"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- The component factory stored on the application
- The rendering service
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from compose_renderer.core.factory import ComponentFactory
from compose_renderer.services.rendering import TemplateRenderingService

logger = logging.getLogger(__name__)


def get_factory(request: Request) -> ComponentFactory:
    """Dependency returning the application's component factory."""
    return request.app.state.factory


def get_rendering_service(
    factory: ComponentFactory = Depends(get_factory),
) -> TemplateRenderingService:
    """Dependency for the rendering service.

    Raises:
        HTTPException: If the configured variables file cannot be loaded.
    """
    try:
        return factory.get_rendering_service()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load configured variables: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Configured variables could not be loaded: {e}",
        ) from e
