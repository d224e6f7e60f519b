"""CLI command listing the projects declared in the config."""

from __future__ import annotations

import click

from ..config.schema import RootConfig
from ..utils.display import echo_project


@click.command(
    name="projects",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
    help="List declared projects and their schema paths.",
)
@click.pass_obj
def cli(ctx_obj) -> None:
    """List project names in lexicographic order."""
    cfg: RootConfig = ctx_obj["cfg"]
    if not cfg.projects:
        click.echo("No projects declared.")
        return
    for name, project in cfg.projects.items():
        echo_project(name, project.schema_path)


__all__ = ["cli"]
