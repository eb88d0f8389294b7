"""Jinja2 renderer strategy.

Renders templates with a strict Jinja2 environment, the engine Ansible uses
for role templates, so templates may use filters and conditionals.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError, meta

from compose_renderer.interfaces.renderer import (
    BaseTemplateRenderer,
    InvalidVariableError,
    MalformedTemplateError,
    MissingVariableError,
)
from compose_renderer.strategies.template_engine.analyzer import OPEN_MARKER

logger = logging.getLogger(__name__)


class JinjaRenderer(BaseTemplateRenderer):
    """Renders templates with Jinja2 and StrictUndefined.

    Undeclared variables are checked against the mapping before rendering so
    every missing name is reported at once and no output is produced.
    """

    name = "jinja2"

    def __init__(self, environment: Environment | None = None) -> None:
        """Initialize the renderer.

        Args:
            environment: Optional preconfigured Jinja2 environment.
        """
        self._env = environment or Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, template: str | Sequence[str], variables: Mapping[str, Any]) -> str:
        """Render a template with the given configuration mapping.

        The output never contains an opening marker, including one emitted
        by a ``{% raw %}`` block.

        Raises:
            MissingVariableError: If a referenced variable is not in `variables`.
            MalformedTemplateError: If the template has a syntax error or
                itself emits an opening marker.
            InvalidVariableError: If a referenced value contains an opening
                marker or forms one with adjacent text.
        """
        text = self.coerce_text(template)

        required = self.required_variables(text)
        missing = set(required) - set(variables)
        if missing:
            raise MissingVariableError(sorted(missing))

        context = {key: self.format_value(value) for key, value in variables.items()}
        for name in required:
            if OPEN_MARKER in context[name]:
                raise InvalidVariableError(name)

        try:
            result = self._env.from_string(text).render(**context)
        except TemplateSyntaxError as e:
            raise MalformedTemplateError(e.message or str(e), line=e.lineno) from e
        except UndefinedError as e:
            logger.warning(f"Undefined value during render: {e}")
            raise MissingVariableError([], message=str(e)) from e

        if OPEN_MARKER in result:
            suspects = [name for name in required if "{" in context[name]]
            if suspects:
                raise InvalidVariableError(
                    suspects[0],
                    message=f"Value for template variable '{suspects[0]}' forms a "
                    f"'{OPEN_MARKER}' marker with adjacent text",
                )
            raise MalformedTemplateError(f"Rendered output contains a '{OPEN_MARKER}' marker")
        return result

    def required_variables(self, template: str | Sequence[str]) -> list[str]:
        """Return the sorted undeclared variable names of a template."""
        text = self.coerce_text(template)
        try:
            ast = self._env.parse(text)
        except TemplateSyntaxError as e:
            raise MalformedTemplateError(e.message or str(e), line=e.lineno) from e
        return sorted(meta.find_undeclared_variables(ast) - set(self._env.globals))
