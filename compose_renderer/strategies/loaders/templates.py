"""File system template loader.

Reads templates laid out by role, e.g.
``<templates_dir>/reverse_proxy/reverse-proxy-docker-compose.yml.j2``,
and exposes them by their relative name without the template suffix.
"""

import logging
from pathlib import Path

from compose_renderer.interfaces.template import BaseTemplateLoader, TemplateDocument

logger = logging.getLogger(__name__)


class FileSystemTemplateLoader(BaseTemplateLoader):
    """Loads templates from a directory tree.

    Templates are treated as read-only: every `load` reads the file afresh
    and returns an immutable TemplateDocument.
    """

    def __init__(
        self,
        templates_dir: str | Path,
        suffix: str = ".j2",
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the loader.

        Args:
            templates_dir: Root directory containing role subdirectories.
            suffix: File suffix identifying template files.
            encoding: The character encoding to use when reading files.
        """
        self._root = Path(templates_dir).resolve()
        self._suffix = suffix
        self._encoding = encoding

    @property
    def templates_dir(self) -> Path:
        """Return the resolved templates root."""
        return self._root

    def list_templates(self) -> list[str]:
        """Return the sorted names of all templates under the root."""
        if not self._root.is_dir():
            logger.warning(f"Templates directory does not exist: {self._root}")
            return []

        names = [
            self._name_for(path)
            for path in self._root.rglob(f"*{self._suffix}")
            if path.is_file()
        ]
        return sorted(names)

    def load(self, name: str) -> TemplateDocument:
        """Load a template by name.

        Args:
            name: Relative template name, with or without the suffix.

        Returns:
            The loaded TemplateDocument.

        Raises:
            FileNotFoundError: If the template does not exist or lies outside the root.
            RuntimeError: If the file cannot be read.
        """
        path = self._path_for(name)
        if path is None or not path.is_file():
            raise FileNotFoundError(f"Template not found: {name}")

        logger.info(f"Loading template: {path}")

        try:
            content = path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Encoding error reading {path}: {e}")
            raise
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}", exc_info=True)
            raise RuntimeError(f"Reading template failed: {e}") from e

        return TemplateDocument(
            name=self._name_for(path),
            content=content,
            metadata={
                "loader": "filesystem",
                "source_file": str(path),
                "file_size": len(content.encode(self._encoding)),
            },
        )

    def _name_for(self, path: Path) -> str:
        relative = path.relative_to(self._root).as_posix()
        return relative[: -len(self._suffix)] if relative.endswith(self._suffix) else relative

    def _path_for(self, name: str) -> Path | None:
        relative = name if name.endswith(self._suffix) else f"{name}{self._suffix}"
        path = (self._root / relative).resolve()
        # Names must not escape the templates root
        if not path.is_relative_to(self._root):
            logger.warning(f"Rejected template name outside templates dir: {name}")
            return None
        return path
