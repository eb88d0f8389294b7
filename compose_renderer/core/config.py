"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

RENDERER_TYPES = ("placeholder", "jinja2")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Templates
    templates_dir: Path = Field(
        default=DEFAULT_TEMPLATES_DIR,
        description="Root directory of role templates.",
    )
    template_suffix: str = Field(
        default=".j2",
        description="File suffix identifying template files.",
    )

    # Strategy Selection
    renderer_type: str = Field(
        default="placeholder",
        description="Renderer strategy to use: 'placeholder' or 'jinja2'.",
    )

    # Configuration mapping
    template_vars: dict[str, str] = Field(
        default_factory=dict,
        description="Template variables as a JSON object, e.g. "
        '\'{"app_data_base_path": "/srv/data"}\'.',
    )
    vars_file: Path | None = Field(
        default=None,
        description="Optional YAML file of template variables.",
    )

    # API
    api_host: str = Field(
        default="0.0.0.0",
        description="Host interface for the HTTP API.",
    )
    api_port: int = Field(
        default=8000,
        description="Port for the HTTP API.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for info.log and error.log. Console only when unset.",
    )

    @field_validator("templates_dir")
    @classmethod
    def resolve_templates_dir(cls, v: Path) -> Path:
        """Resolve the templates directory to an absolute path."""
        return v.expanduser().resolve()

    @field_validator("renderer_type")
    @classmethod
    def validate_renderer_type(cls, v: str) -> str:
        """Normalize and validate the renderer type."""
        v = v.lower()
        if v not in RENDERER_TYPES:
            raise ValueError(
                f"Unknown renderer type: {v}. Valid options: 'placeholder', 'jinja2'"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
