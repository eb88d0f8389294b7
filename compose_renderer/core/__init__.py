"""Core configuration and factory components."""

from compose_renderer.core.config import Settings, get_settings
from compose_renderer.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
