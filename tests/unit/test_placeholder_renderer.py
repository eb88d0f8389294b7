"""Unit tests for the placeholder renderer."""

import pytest
import yaml

from compose_renderer.interfaces.renderer import (
    InvalidVariableError,
    MalformedTemplateError,
    MissingVariableError,
)
from compose_renderer.strategies.renderers import PlaceholderRenderer


class TestPlaceholderRenderer:
    """Test suite for PlaceholderRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a renderer instance."""
        return PlaceholderRenderer()

    # =========================================================================
    # Substitution Tests
    # =========================================================================

    def test_replaces_every_occurrence(self, renderer):
        """Test that every token is replaced with the literal value."""
        template = "a={{ x }} b={{x}} c={{   x   }}"

        result = renderer.render(template, {"x": "/srv/data"})

        assert result == "a=/srv/data b=/srv/data c=/srv/data"
        assert "{{" not in result

    def test_multiple_variables(self, renderer):
        """Test substitution of several distinct variables."""
        result = renderer.render("{{ a }}-{{ b }}", {"a": "1", "b": "2", "unused": "3"})

        assert result == "1-2"

    def test_template_without_placeholders_is_unchanged(self, renderer):
        """Test that text without tokens passes through untouched."""
        text = "version: '3.8'\nservices: {}\n"

        assert renderer.render(text, {}) == text

    def test_stray_closing_marker_is_literal(self, renderer):
        """Test that a closing marker with no opener is kept as text."""
        assert renderer.render("a }} b", {}) == "a }} b"

    def test_value_is_not_rescanned(self, renderer):
        """Test that substituted values are inserted literally."""
        result = renderer.render("{{ x }}", {"x": "}} and $HOME"})

        assert result == "}} and $HOME"

    def test_line_sequence_input(self, renderer):
        """Test that a sequence of lines is joined with newlines."""
        lines = ["first: {{ x }}", "second: static"]

        assert renderer.render(lines, {"x": "1"}) == "first: 1\nsecond: static"

    def test_non_string_values(self, renderer):
        """Test that integers and booleans are formatted literally."""
        result = renderer.render("{{ port }} {{ enabled }}", {"port": 81, "enabled": False})

        assert result == "81 false"

    # =========================================================================
    # Reverse Proxy Template Tests
    # =========================================================================

    def test_reverse_proxy_volumes(self, renderer, reverse_proxy_text):
        """Test the rendered volume mounts of the reverse-proxy template."""
        result = renderer.render(reverse_proxy_text, {"app_data_base_path": "/srv/data"})

        document = yaml.safe_load(result)
        service = document["services"]["app"]
        assert service["volumes"] == [
            "/srv/data/reverse-proxy/data:/data",
            "/srv/data/reverse-proxy/letsencrypt:/etc/letsencrypt",
        ]
        assert service["ports"] == ["80:80", "443:443", "81:81"]
        assert document["version"] == "3.8"
        assert service["image"] == "jc21/nginx-proxy-manager:latest"
        assert service["container_name"] == "nginx_proxy_manager"
        assert service["restart"] == "unless-stopped"

    def test_reverse_proxy_static_lines_identical(self, renderer, reverse_proxy_text):
        """Test that lines without tokens are byte-identical after rendering."""
        result = renderer.render(reverse_proxy_text, {"app_data_base_path": "/srv/data"})

        template_lines = reverse_proxy_text.splitlines(keepends=True)
        result_lines = result.splitlines(keepends=True)
        assert len(template_lines) == len(result_lines)
        for before, after in zip(template_lines, result_lines):
            if "{{" not in before:
                assert before == after
        assert "      - '80:80'   # Public HTTP Port\n" in result_lines
        assert "      - '443:443' # Public HTTPS Port\n" in result_lines
        assert "      - '81:81'   # Admin Web UI\n" in result_lines

    def test_reverse_proxy_idempotent(self, renderer, reverse_proxy_text):
        """Test that rendering rendered output again changes nothing."""
        variables = {"app_data_base_path": "/opt/apps"}
        once = renderer.render(reverse_proxy_text, variables)

        assert renderer.render(once, variables) == once
        assert renderer.render(once, {}) == once

    def test_independent_renders(self, renderer, reverse_proxy_text):
        """Test that two mappings produce two independent outputs."""
        first = renderer.render(reverse_proxy_text, {"app_data_base_path": "/a"})
        second = renderer.render(reverse_proxy_text, {"app_data_base_path": "/b"})

        assert "/a/reverse-proxy/data:/data" in first
        assert "/b/" not in first
        assert "/b/reverse-proxy/data:/data" in second
        assert "/a/" not in second
        assert renderer.render(reverse_proxy_text, {"app_data_base_path": "/a"}) == first

    # =========================================================================
    # Error Tests
    # =========================================================================

    def test_missing_variable(self, renderer, reverse_proxy_text):
        """Test that a missing variable fails with MissingVariableError."""
        with pytest.raises(MissingVariableError) as exc_info:
            renderer.render(reverse_proxy_text, {"other": "x"})

        assert exc_info.value.missing == ["app_data_base_path"]
        assert "app_data_base_path" in str(exc_info.value)

    def test_all_missing_variables_reported(self, renderer):
        """Test that every missing name is reported, sorted."""
        with pytest.raises(MissingVariableError) as exc_info:
            renderer.render("{{ b }} {{ a }} {{ c }}", {"c": "1"})

        assert exc_info.value.missing == ["a", "b"]

    def test_unterminated_marker(self, renderer):
        """Test that an unterminated marker fails with MalformedTemplateError."""
        with pytest.raises(MalformedTemplateError) as exc_info:
            renderer.render("ok: {{ a }}\nbad: '{{ app_data_base_path/data'\n", {"a": "1"})

        assert exc_info.value.line == 2
        assert exc_info.value.column == 7

    def test_marker_closed_on_later_line_is_malformed(self, renderer):
        """Test that a marker must close on its own line."""
        with pytest.raises(MalformedTemplateError):
            renderer.render("{{ a\n}}", {"a": "1"})

    def test_nested_marker_is_malformed(self, renderer):
        """Test that an opener inside a token is rejected."""
        with pytest.raises(MalformedTemplateError):
            renderer.render("{{ a {{ b }}", {"a": "1", "b": "2"})

    def test_malformed_checked_before_missing(self, renderer):
        """Test that authoring defects win over missing variables."""
        with pytest.raises(MalformedTemplateError):
            renderer.render("{{ a }} {{ b", {})

    def test_value_with_open_marker_rejected(self, renderer):
        """Test that a value which would leave a marker behind is rejected."""
        with pytest.raises(InvalidVariableError) as exc_info:
            renderer.render("{{ x }}", {"x": "{{ y }}"})

        assert exc_info.value.name == "x"

    def test_value_forming_marker_with_literal_rejected(self, renderer):
        """Test that a value ending in '{' before a literal '{' is rejected."""
        with pytest.raises(InvalidVariableError) as exc_info:
            renderer.render("path: {{ a }}{x", {"a": "/srv{"})

        assert exc_info.value.name == "a"
        assert "adjacent text" in str(exc_info.value)

    def test_adjacent_values_forming_marker_rejected(self, renderer):
        """Test that two neighbouring values cannot assemble a new marker."""
        with pytest.raises(InvalidVariableError) as exc_info:
            renderer.render("{{ a }}{{ b }}", {"a": "{", "b": "{ y }}"})

        assert exc_info.value.name == "a"

    def test_value_starting_with_brace_after_literal(self, renderer):
        """Test that a value opening with '{' after a literal brace is fine when no marker forms."""
        assert renderer.render("x: { {{ a }}", {"a": "{}"}) == "x: { {}"

    def test_single_braces_in_values_allowed(self, renderer):
        """Test that lone braces that do not form a marker are kept."""
        result = renderer.render("{{ a }} {{ b }}", {"a": "{", "b": "}"})

        assert result == "{ }"
        assert "{{" not in result

    def test_required_variables(self, renderer, reverse_proxy_text):
        """Test placeholder discovery."""
        assert renderer.required_variables(reverse_proxy_text) == ["app_data_base_path"]
        assert renderer.required_variables(["{{ b }}", "{{ a }}{{ b }}"]) == ["a", "b"]
