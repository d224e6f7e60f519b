"""CLI command confirming that the GraphQL config decodes."""

from __future__ import annotations

import click
import structlog

from ..config.schema import RootConfig
from ..utils.display import echo_banner, echo_success

log = structlog.get_logger()


@click.command(
    name="validate",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
    help="Check that the GraphQL config is structurally valid.",
)
@click.pass_obj
def cli(ctx_obj) -> None:
    """Report the decoded config; decoding itself happens in the group.

    Args:
        ctx_obj: Click context populated in ``graphql_config.cli.main``.
    """
    cfg: RootConfig = ctx_obj["cfg"]
    path = ctx_obj["config_path"]

    echo_banner("Validate GraphQL config")
    n_projects = len(cfg.projects or {})
    log.info("Validated %s", path)
    echo_success(f"{path} is a valid GraphQL config ({n_projects} project(s)).")


__all__ = ["cli"]
