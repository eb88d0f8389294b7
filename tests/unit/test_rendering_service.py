"""Unit tests for the rendering service and component factory."""

import pytest

from compose_renderer.core.config import Settings
from compose_renderer.core.factory import ComponentFactory
from compose_renderer.interfaces.renderer import MalformedTemplateError, MissingVariableError
from compose_renderer.strategies.renderers import JinjaRenderer, PlaceholderRenderer

REVERSE_PROXY_TEMPLATE = "reverse_proxy/reverse-proxy-docker-compose.yml"


# =============================================================================
# Component Factory Tests
# =============================================================================


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    def test_default_renderer(self, settings):
        factory = ComponentFactory(settings)

        assert isinstance(factory.get_renderer(), PlaceholderRenderer)

    def test_renderer_by_type_is_cached(self, settings):
        factory = ComponentFactory(settings)

        renderer = factory.get_renderer("jinja2")

        assert isinstance(renderer, JinjaRenderer)
        assert factory.get_renderer("JINJA2") is renderer

    def test_unknown_renderer(self, settings):
        with pytest.raises(ValueError, match="Unknown renderer type"):
            ComponentFactory(settings).get_renderer("mustache")

    def test_clear_cache(self, settings):
        factory = ComponentFactory(settings)
        renderer = factory.get_renderer()

        factory.clear_cache()

        assert factory.get_renderer() is not renderer

    def test_base_variables_precedence(self, templates_dir, tmp_path):
        """Test that settings.template_vars override the variables file."""
        vars_file = tmp_path / "vars.yml"
        vars_file.write_text("base: /from-file\nnginx_tag: '1.0'\n", encoding="utf-8")
        settings = Settings(
            templates_dir=templates_dir,
            vars_file=vars_file,
            template_vars={"nginx_tag": "1.25"},
        )

        variables = ComponentFactory(settings).get_base_variables()

        assert variables == {"base": "/from-file", "nginx_tag": "1.25"}


# =============================================================================
# Rendering Service Tests
# =============================================================================


class TestTemplateRenderingService:
    """Test suite for TemplateRenderingService."""

    @pytest.fixture
    def service(self, settings):
        return ComponentFactory(settings).get_rendering_service()

    def test_render_merges_overrides(self, service):
        """Test that per-call variables are merged over configured ones."""
        document = service.render("web/compose.yml", {"base": "/srv"})

        assert document.template_name == "web/compose.yml"
        assert document.renderer == "placeholder"
        assert document.variables_used == ["base", "nginx_tag"]
        assert "image: 'nginx:1.25'" in document.content
        assert "- '/srv/web:/usr/share/nginx/html'" in document.content

    def test_override_wins(self, service):
        document = service.render("web/compose.yml", {"base": "/srv", "nginx_tag": "1.27"})

        assert "nginx:1.27" in document.content

    def test_render_missing_variable(self, service):
        with pytest.raises(MissingVariableError) as exc_info:
            service.render("web/compose.yml")

        assert exc_info.value.missing == ["base"]

    def test_render_malformed(self, service):
        with pytest.raises(MalformedTemplateError):
            service.render("broken/compose.yml", {"tag": "x"})

    def test_render_unknown_template(self, service):
        with pytest.raises(FileNotFoundError):
            service.render("nope/compose.yml", {})

    def test_render_with_explicit_renderer(self, service):
        document = service.render("web/compose.yml", {"base": "/srv"}, renderer=JinjaRenderer())

        assert document.renderer == "jinja2"
        assert "nginx:1.25" in document.content

    def test_render_text(self, service):
        document = service.render_text("{{ nginx_tag }}")

        assert document.template_name is None
        assert document.content == "1.25"

    def test_describe(self, service):
        document, placeholders = service.describe("web/compose.yml")

        assert document.name == "web/compose.yml"
        assert [p.name for p in placeholders] == ["nginx_tag", "base"]

    def test_bundled_reverse_proxy(self):
        """Test rendering the bundled template through the default settings."""
        service = ComponentFactory(Settings()).get_rendering_service()

        document = service.render(REVERSE_PROXY_TEMPLATE, {"app_data_base_path": "/srv/data"})

        assert "- '/srv/data/reverse-proxy/data:/data'" in document.content
        assert "- '/srv/data/reverse-proxy/letsencrypt:/etc/letsencrypt'" in document.content
        assert document.variables_used == ["app_data_base_path"]
