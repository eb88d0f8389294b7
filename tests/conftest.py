"""Shared pytest fixtures."""

import logging
from pathlib import Path

import pytest

from compose_renderer.core.config import DEFAULT_TEMPLATES_DIR, Settings

REVERSE_PROXY_TEMPLATE = "reverse_proxy/reverse-proxy-docker-compose.yml"


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging during a test."""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def reverse_proxy_text() -> str:
    """The bundled reverse-proxy compose template."""
    return (DEFAULT_TEMPLATES_DIR / f"{REVERSE_PROXY_TEMPLATE}.j2").read_text(encoding="utf-8")


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A templates directory with one valid and one malformed role template."""
    root = tmp_path / "templates"
    (root / "web").mkdir(parents=True)
    (root / "web" / "compose.yml.j2").write_text(
        "services:\n"
        "  web:\n"
        "    image: 'nginx:{{ nginx_tag }}'\n"
        "    volumes:\n"
        "      - '{{ base }}/web:/usr/share/nginx/html'\n",
        encoding="utf-8",
    )
    (root / "broken").mkdir()
    (root / "broken" / "compose.yml.j2").write_text(
        "image: '{{ tag'\n",
        encoding="utf-8",
    )
    (root / "web" / "README.md").write_text("not a template\n", encoding="utf-8")
    return root


@pytest.fixture
def settings(templates_dir: Path) -> Settings:
    """Settings pointing at the temporary templates directory."""
    return Settings(templates_dir=templates_dir, template_vars={"nginx_tag": "1.25"})
