"""Template and variables loader strategies."""

from compose_renderer.strategies.loaders.templates import FileSystemTemplateLoader
from compose_renderer.strategies.loaders.variables import YamlVariablesLoader

__all__ = [
    "FileSystemTemplateLoader",
    "YamlVariablesLoader",
]
