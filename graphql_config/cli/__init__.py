"""Expose the project-wide Click group for the ``graphql-config`` script.

The module:

* declares a single Click *group* called :pyfunc:`main`;
* wires common global flags (config file, search root, verbosity, logs);
* sets up logging via :pyfunc:`graphql_config.utils.logging.setup_logging`;
* loads and decodes the GraphQL config once for every sub-command;
* registers the sub-commands located in sibling modules.
"""

from __future__ import annotations

import importlib
import os
from pathlib import Path
from typing import Any, Dict

import click
import structlog

from graphql_config import __version__
from graphql_config.config.loader import load_config, resolve_config_path
from graphql_config.utils.errors import GraphQLConfigError
from graphql_config.utils.logging import setup_logging

log = structlog.get_logger()

ROOT_ENV = "GRAPHQL_CONFIG_ROOT"


class LazyGroup(click.Group):
    """Click group that imports sub-commands lazily."""

    def __init__(self, *args, **kwargs):
        self._lazy: dict[str, str] = {}
        super().__init__(*args, **kwargs)

    def set_lazy_command(self, name: str, target: str) -> None:
        """Register *name* to be imported from ``target`` on first use."""
        self._lazy[name] = target

    def list_commands(self, ctx):
        return sorted({*super().list_commands(ctx), *self._lazy})

    def get_command(self, ctx, cmd_name):  # noqa: D401 - Click signature
        """Resolve *cmd_name* from the eager map or import table."""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        target = self._lazy.get(cmd_name)
        if not target:
            return None
        module_name, attr = target.split(":", 1)
        cmd = getattr(importlib.import_module(module_name), attr)
        self.add_command(cmd, name=cmd_name)
        return cmd


_CTX: Dict[str, Any] = dict(
    help_option_names=["-h", "--help"],
    show_default=True,
    max_content_width=120,
)


@click.group(
    cls=LazyGroup,
    context_settings=_CTX,
    help="""\b
graphql-config – inspect graphql-config (.graphqlconfig) files.
""",
)
@click.version_option(__version__)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Explicit config file (skips discovery).",
)
@click.option(
    "-r",
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help=f"Directory where discovery starts. Falls back to ${ROOT_ENV} or the CWD.",
)
@click.option("-v", "--verbose", is_flag=True, help="INFO-level console output.")
@click.option("--debug", is_flag=True, help="DEBUG console output.")
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Write a rotating log file into this directory.",
)
@click.option(
    "--save-logfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Mirror console output into this plain-text file.",
)
@click.pass_context
def main(  # noqa: D401 – Click requires the callback to be named “main”.
    ctx: click.Context,
    config_path: Path | None,
    root: Path | None,
    verbose: bool,
    debug: bool,
    log_dir: Path | None,
    save_logfile: Path | None,
) -> None:
    """Root command executed by *graphql-config*.

    Raises:
        click.ClickException: When the config cannot be located, parsed or
            decoded.
    """
    search_root = root or Path(os.environ.get(ROOT_ENV, ".")).resolve()

    # Logging must be configured before any output is produced ----------------
    setup_logging(
        verbose=verbose,
        debug=debug,
        log_dir=log_dir,
        extra_text_log=save_logfile,
    )

    try:
        path = resolve_config_path(config_path=config_path, search_root=search_root)
        cfg = load_config(config_path=path)
    except GraphQLConfigError as exc:
        log.debug("Config load failed: %s", exc)
        raise click.ClickException(str(exc)) from exc

    ctx.obj = {
        "config_path": path,
        "cfg": cfg,
        "verbose": verbose,
        "debug": debug,
    }


main.set_lazy_command("validate", "graphql_config.cli.validate:cli")
main.set_lazy_command("show", "graphql_config.cli.show:cli")
main.set_lazy_command("projects", "graphql_config.cli.projects:cli")

cli = main
__all__: list[str] = ["main"]
