"""Template engine domain models.

Pydantic models shared by the analyzer, the renderers and the API layer.
These live here to avoid circular imports with the API layer.
"""

from pydantic import BaseModel, Field


class DetectedPlaceholder(BaseModel):
    """A placeholder token found in template text."""

    name: str = Field(description="Variable name referenced by the token")
    raw: str = Field(description="The exact token text, delimiters included")
    start: int = Field(description="Offset of the opening delimiter")
    end: int = Field(description="Offset just past the closing delimiter")
    line: int = Field(description="1-based line number of the token")
    column: int = Field(description="1-based column of the opening delimiter")


class RenderedDocument(BaseModel):
    """The result of rendering a template."""

    template_name: str | None = Field(
        default=None, description="Name of the rendered template, None for inline text"
    )
    content: str = Field(description="The fully resolved document text")
    renderer: str = Field(description="Renderer strategy that produced the content")
    variables_used: list[str] = Field(
        default_factory=list, description="Sorted names of the substituted variables"
    )
