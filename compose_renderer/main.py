"""FastAPI application entry point.

Main application setup with middleware, routing, and error handling.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from compose_renderer import __version__
from compose_renderer.api.schemas import ErrorResponse
from compose_renderer.api.templates import router as templates_router
from compose_renderer.core.config import Settings, get_settings
from compose_renderer.core.factory import ComponentFactory
from compose_renderer.core.logging_config import setup_logging
from compose_renderer.interfaces.renderer import (
    InvalidVariableError,
    MalformedTemplateError,
    MissingVariableError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, detail: str, error_code: str, **context) -> JSONResponse:
    # Unknown locations (Jinja2 reports no column) are left out
    context = {key: value for key, value in context.items() if value is not None}
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            detail=detail,
            error_code=error_code,
            context=context or None,
        ).model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Compose Template Renderer",
        description="Renders docker-compose templates from a configuration mapping",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Store settings and shared components in app state
    app.state.settings = settings
    app.state.factory = ComponentFactory(settings)

    app.include_router(templates_router)
    logger.info("Registered templates router")

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "service": "compose-renderer",
            "version": __version__,
        }

    # Exception handlers
    @app.exception_handler(MissingVariableError)
    async def missing_variable_handler(request: Request, exc: MissingVariableError):
        logger.warning(f"Missing variables for {request.url.path}: {exc.missing}")
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            str(exc),
            "MISSING_VARIABLE",
            missing=exc.missing,
        )

    @app.exception_handler(MalformedTemplateError)
    async def malformed_template_handler(request: Request, exc: MalformedTemplateError):
        logger.warning(f"Malformed template for {request.url.path}: {exc}")
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            str(exc),
            "MALFORMED_TEMPLATE",
            line=exc.line,
            column=exc.column,
        )

    @app.exception_handler(InvalidVariableError)
    async def invalid_variable_handler(request: Request, exc: InvalidVariableError):
        logger.warning(f"Invalid variable for {request.url.path}: {exc}")
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            str(exc),
            "INVALID_VARIABLE",
            name=exc.name,
        )

    @app.exception_handler(FileNotFoundError)
    async def not_found_handler(request: Request, exc: FileNotFoundError):
        logger.warning(f"Not found: {exc}")
        return _error(status.HTTP_404_NOT_FOUND, str(exc), "TEMPLATE_NOT_FOUND")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        """Handle Pydantic validation errors."""
        logger.warning(f"Validation error: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": "Validation error",
                "errors": exc.errors(),
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            "INTERNAL_ERROR",
        )

    logger.info("FastAPI application created successfully")
    return app


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    host = host or settings.api_host
    port = port or settings.api_port

    logger.info(f"Starting uvicorn server on {host}:{port}...")
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
