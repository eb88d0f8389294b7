"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from compose_renderer.core.config import Settings, get_settings
from compose_renderer.interfaces.renderer import BaseTemplateRenderer
from compose_renderer.interfaces.template import BaseTemplateLoader
from compose_renderer.interfaces.variables import BaseVariablesLoader
from compose_renderer.services.rendering import TemplateRenderingService
from compose_renderer.strategies.loaders import FileSystemTemplateLoader, YamlVariablesLoader
from compose_renderer.strategies.renderers import JinjaRenderer, PlaceholderRenderer
from compose_renderer.strategies.template_engine import TemplateAnalyzer

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Renderers hold no per-render state, so instances are cached and
    shared between callers.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        renderer = factory.get_renderer()
        service = factory.get_rendering_service()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._renderer_cache: dict[str, BaseTemplateRenderer] = {}
        self._analyzer_cache: TemplateAnalyzer | None = None
        self._template_loader_cache: BaseTemplateLoader | None = None
        self._variables_loader_cache: BaseVariablesLoader | None = None

    def get_analyzer(self) -> TemplateAnalyzer:
        """Get the shared template analyzer."""
        if self._analyzer_cache is None:
            self._analyzer_cache = TemplateAnalyzer()
        return self._analyzer_cache

    def get_renderer(self, renderer_type: str | None = None) -> BaseTemplateRenderer:
        """Get a renderer instance based on the specified type.

        Args:
            renderer_type: The renderer type to instantiate. If None, uses settings.

        Returns:
            A BaseTemplateRenderer implementation instance.

        Raises:
            ValueError: If the renderer type is unknown.
        """
        renderer_type = (renderer_type or self._settings.renderer_type).lower()

        if renderer_type not in self._renderer_cache:
            logger.info(f"Instantiating renderer: {renderer_type}")

            match renderer_type:
                case "placeholder":
                    renderer: BaseTemplateRenderer = PlaceholderRenderer(
                        analyzer=self.get_analyzer()
                    )
                case "jinja2":
                    renderer = JinjaRenderer()
                case _:
                    raise ValueError(
                        f"Unknown renderer type: {renderer_type}. "
                        f"Valid options: 'placeholder', 'jinja2'"
                    )
            self._renderer_cache[renderer_type] = renderer

        return self._renderer_cache[renderer_type]

    def get_template_loader(self) -> BaseTemplateLoader:
        """Get the template loader for the configured templates directory."""
        if self._template_loader_cache is None:
            logger.info(f"Instantiating template loader: {self._settings.templates_dir}")
            self._template_loader_cache = FileSystemTemplateLoader(
                templates_dir=self._settings.templates_dir,
                suffix=self._settings.template_suffix,
            )
        return self._template_loader_cache

    def get_variables_loader(self) -> BaseVariablesLoader:
        """Get the variables file loader."""
        if self._variables_loader_cache is None:
            self._variables_loader_cache = YamlVariablesLoader()
        return self._variables_loader_cache

    def get_base_variables(self) -> dict[str, str]:
        """Merge the variables file (if configured) with settings.template_vars.

        Raises:
            FileNotFoundError: If the configured variables file does not exist.
            ValueError: If the variables file is invalid.
        """
        variables: dict[str, str] = {}
        if self._settings.vars_file is not None:
            variables.update(self.get_variables_loader().load(self._settings.vars_file))
        variables.update(self._settings.template_vars)
        return variables

    def get_rendering_service(self) -> TemplateRenderingService:
        """Build a rendering service wired to the configured strategies."""
        return TemplateRenderingService(
            loader=self.get_template_loader(),
            renderer=self.get_renderer(),
            analyzer=self.get_analyzer(),
            base_variables=self.get_base_variables(),
        )

    def clear_cache(self) -> None:
        """Clear all cached component instances."""
        self._renderer_cache.clear()
        self._analyzer_cache = None
        self._template_loader_cache = None
        self._variables_loader_cache = None
        logger.info("Component cache cleared")
