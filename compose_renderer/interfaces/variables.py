"""Abstract base class for configuration mapping sources."""

from abc import ABC, abstractmethod
from pathlib import Path


class BaseVariablesLoader(ABC):
    """Loads a placeholder-name to value mapping from an external source."""

    @abstractmethod
    def load(self, path: str | Path) -> dict[str, str]:
        """Load variables from a file.

        Args:
            path: Path to the variables file.

        Returns:
            Mapping of variable names to string values.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a flat mapping of scalar values.
        """

    @property
    @abstractmethod
    def supported_extensions(self) -> set[str]:
        """Return supported file extensions."""
