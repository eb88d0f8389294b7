"""YAML variables loader.

Reads a configuration mapping from a YAML file in the style of an
Ansible ``vars`` file::

    app_data_base_path: /srv/data
"""

import logging
from pathlib import Path

import yaml

from compose_renderer.interfaces.renderer import BaseTemplateRenderer
from compose_renderer.interfaces.variables import BaseVariablesLoader

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, int, float, bool)


class YamlVariablesLoader(BaseVariablesLoader):
    """Loads a flat mapping of scalar variables from a YAML file."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: str | Path) -> dict[str, str]:
        """Load variables from a YAML file.

        Args:
            path: Path to the YAML variables file.

        Returns:
            Mapping of variable names to string values. An empty file
            yields an empty mapping.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the YAML is invalid or not a flat scalar mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Variables file not found: {path}")

        logger.info(f"Loading variables file: {path}")

        try:
            with open(path, "r", encoding=self._encoding) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in variables file {path}: {e}")
            raise ValueError(f"Invalid YAML in variables file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Variables file {path} must contain a mapping, got {type(data).__name__}"
            )

        variables: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(value, _SCALAR_TYPES):
                raise ValueError(
                    f"Variable '{key}' in {path} must be a scalar, got {type(value).__name__}"
                )
            variables[str(key)] = BaseTemplateRenderer.format_value(value)

        logger.info(f"Loaded {len(variables)} variables from {path}")
        return variables

    @property
    def supported_extensions(self) -> set[str]:
        """Return supported file extensions."""
        return {".yml", ".yaml"}
