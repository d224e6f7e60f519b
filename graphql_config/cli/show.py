"""CLI command printing the decoded config in document form."""

from __future__ import annotations

import json

import click
import yaml

from ..config.schema import RootConfig


@click.command(
    name="show",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
    help="Print the normalised GraphQL config (absent fields omitted).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
)
@click.option("-p", "--project", help="Only print this project's settings.")
@click.pass_obj
def cli(ctx_obj, fmt: str, project: str | None) -> None:
    """Print the re-encoded document or a single project.

    Raises:
        click.ClickException: When *project* is not declared.
    """
    cfg: RootConfig = ctx_obj["cfg"]

    if project is None:
        doc = cfg.to_document()
    else:
        try:
            doc = cfg.get_project(project).to_document()
        except KeyError:
            raise click.ClickException(f"Unknown project: {project}") from None

    if fmt == "yaml":
        click.echo(yaml.safe_dump(doc, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(doc, indent=2))


__all__ = ["cli"]
