"""CLI for the compose template renderer.

Provides commands to list, inspect and render templates, and to serve the API.
"""

import sys
from pathlib import Path

import click

from compose_renderer.core.config import Settings, get_settings
from compose_renderer.core.factory import ComponentFactory
from compose_renderer.core.logging_config import get_logger, setup_logging
from compose_renderer.interfaces.renderer import TemplateRenderError

logger = get_logger(__name__)


def _parse_vars(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated --var KEY=VALUE options."""
    variables: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--var")
        variables[key.strip()] = value
    return variables


def _factory(ctx: click.Context) -> ComponentFactory:
    return ctx.obj["factory"]


@click.group()
@click.version_option(package_name="compose-renderer")
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Root directory of role templates (default: bundled templates)",
)
@click.pass_context
def cli(ctx: click.Context, templates_dir: Path | None) -> None:
    """Compose template renderer."""
    settings = get_settings()
    if templates_dir is not None:
        settings = Settings(**{**settings.model_dump(), "templates_dir": templates_dir})
    setup_logging(settings)
    ctx.ensure_object(dict)
    ctx.obj["factory"] = ComponentFactory(settings)


@cli.command("list")
@click.pass_context
def list_templates(ctx: click.Context) -> None:
    """List available templates and their variables."""
    factory = _factory(ctx)
    loader = factory.get_template_loader()
    analyzer = factory.get_analyzer()

    names = loader.list_templates()
    if not names:
        click.echo("No templates found.", err=True)
        return
    for name in names:
        try:
            variables = analyzer.required_variables(loader.load(name).content)
        except TemplateRenderError as e:
            click.echo(f"{name}\tError: {e}")
            continue
        click.echo(f"{name}\t{', '.join(variables)}")


@cli.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Show a template's placeholders and their locations."""
    factory = _factory(ctx)
    try:
        document = factory.get_template_loader().load(name)
        placeholders = factory.get_analyzer().analyze(document)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except TemplateRenderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Template: {document.name}")
    for placeholder in placeholders:
        click.echo(f"  {placeholder.line}:{placeholder.column}\t{placeholder.name}")


@cli.command()
@click.argument("name")
@click.option("--var", "-v", "var_items", multiple=True, metavar="KEY=VALUE", help="Template variable (repeatable)")
@click.option(
    "--vars-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file of template variables",
)
@click.option(
    "--renderer",
    "-r",
    type=click.Choice(["placeholder", "jinja2"]),
    default=None,
    help="Renderer strategy (default: from settings)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the rendered document here instead of stdout",
)
@click.pass_context
def render(
    ctx: click.Context,
    name: str,
    var_items: tuple[str, ...],
    vars_file: Path | None,
    renderer: str | None,
    output: Path | None,
) -> None:
    """Render a template.

    Variables are merged in order: settings, --vars-file, --var.
    """
    factory = _factory(ctx)
    overrides = _parse_vars(var_items)

    try:
        service = factory.get_rendering_service()
        if vars_file is not None:
            file_vars = factory.get_variables_loader().load(vars_file)
            overrides = {**file_vars, **overrides}
        document = service.render(name, overrides, renderer=factory.get_renderer(renderer))
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except TemplateRenderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(document.content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document.content, encoding="utf-8")
    logger.info(f"Rendered {document.template_name} to {output}")
    click.echo(f"Wrote {output}", err=True)


@cli.command()
@click.option("--host", default=None, help="Bind host (default: from settings)")
@click.option("--port", type=int, default=None, help="Bind port (default: from settings)")
def serve(host: str | None, port: int | None) -> None:
    """Serve the HTTP API with uvicorn."""
    from compose_renderer.main import run

    run(host=host, port=port)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
