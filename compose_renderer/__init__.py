"""Compose template renderer.

Renders docker-compose templates such as the reverse-proxy service
definition from a configuration mapping.
"""

__version__ = "0.1.0"
