"""Template rendering service.

Combines a template source, a renderer strategy and the configured
variable sources into the operations exposed by the API and the CLI.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from compose_renderer.interfaces.renderer import BaseTemplateRenderer, TemplateRenderError
from compose_renderer.interfaces.template import BaseTemplateLoader, TemplateDocument
from compose_renderer.strategies.template_engine import (
    DetectedPlaceholder,
    RenderedDocument,
    TemplateAnalyzer,
)

logger = structlog.get_logger(__name__)


class TemplateRenderingService:
    """Loads and renders templates against a merged configuration mapping.

    Variable precedence, lowest first: `base_variables` (variables file and
    settings), then per-call overrides. The service keeps no per-render
    state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        loader: BaseTemplateLoader,
        renderer: BaseTemplateRenderer,
        analyzer: TemplateAnalyzer | None = None,
        base_variables: Mapping[str, str] | None = None,
    ) -> None:
        self._loader = loader
        self._renderer = renderer
        self._analyzer = analyzer or TemplateAnalyzer()
        self._base_variables = dict(base_variables or {})

    def list_templates(self) -> list[str]:
        return self._loader.list_templates()

    def describe(self, name: str) -> tuple[TemplateDocument, list[DetectedPlaceholder]]:
        """Load a template and detect its placeholder tokens.

        Raises:
            FileNotFoundError: If the template does not exist.
            MalformedTemplateError: If the template contains a malformed marker.
        """
        document = self._loader.load(name)
        return document, self._analyzer.analyze(document)

    def required_variables(self, name: str) -> list[str]:
        return self._renderer.required_variables(self._loader.load(name).content)

    def resolve_variables(self, overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge the base variables with per-call overrides."""
        return {**self._base_variables, **(overrides or {})}

    def render(
        self,
        name: str,
        overrides: Mapping[str, Any] | None = None,
        renderer: BaseTemplateRenderer | None = None,
    ) -> RenderedDocument:
        """Render a named template.

        Args:
            name: Template name as listed by the loader.
            overrides: Variables taking precedence over the base variables.
            renderer: Renderer to use instead of the configured one.

        Returns:
            The RenderedDocument.

        Raises:
            FileNotFoundError: If the template does not exist.
            TemplateRenderError: If rendering fails.
        """
        document = self._loader.load(name)
        return self._render(document.content, document.name, overrides, renderer)

    def render_text(
        self,
        text: str,
        overrides: Mapping[str, Any] | None = None,
        renderer: BaseTemplateRenderer | None = None,
    ) -> RenderedDocument:
        """Render inline template text."""
        return self._render(text, None, overrides, renderer)

    def _render(
        self,
        text: str,
        template_name: str | None,
        overrides: Mapping[str, Any] | None,
        renderer: BaseTemplateRenderer | None,
    ) -> RenderedDocument:
        renderer = renderer or self._renderer
        variables = self.resolve_variables(overrides)
        log = logger.bind(template=template_name or "<inline>", renderer=renderer.name)

        try:
            used = renderer.required_variables(text)
            content = renderer.render(text, variables)
        except TemplateRenderError as e:
            log.warning("template_render_failed", error=str(e), error_type=type(e).__name__)
            raise

        log.info("template_rendered", variables=used, size=len(content))
        return RenderedDocument(
            template_name=template_name,
            content=content,
            renderer=renderer.name,
            variables_used=used,
        )
