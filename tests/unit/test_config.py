"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from compose_renderer.core.config import DEFAULT_TEMPLATES_DIR, Settings


def test_defaults(monkeypatch):
    for name in ("TEMPLATES_DIR", "RENDERER_TYPE", "TEMPLATE_VARS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.templates_dir == DEFAULT_TEMPLATES_DIR.resolve()
    assert settings.renderer_type == "placeholder"
    assert settings.template_vars == {}
    assert settings.vars_file is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TEMPLATES_DIR", str(tmp_path))
    monkeypatch.setenv("RENDERER_TYPE", "Jinja2")
    monkeypatch.setenv("TEMPLATE_VARS", '{"app_data_base_path": "/srv/data"}')
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.templates_dir == tmp_path.resolve()
    assert settings.renderer_type == "jinja2"
    assert settings.template_vars == {"app_data_base_path": "/srv/data"}
    assert settings.log_level == "DEBUG"


def test_unknown_renderer_type():
    with pytest.raises(ValidationError):
        Settings(renderer_type="mustache")
