"""Utility functions to print formatted CLI messages."""

from __future__ import annotations

import click

__all__ = ["echo_banner", "echo_success", "echo_project"]


def echo_banner(text: str) -> None:
    """Print a colourful banner announcing a command.

    Args:
        text: Banner text.
    """
    click.secho(f"\n=== {text} ===", fg="cyan")


def echo_success(text: str) -> None:
    """Echo a green success message prefixed with a tick.

    Args:
        text: Message to display.
    """
    click.secho(f"✓ {text}", fg="green")


def echo_project(name: str, schema_path: str | None = None) -> None:
    """Echo a bullet with a project name and its schema path, if any."""
    if schema_path:
        click.echo(f"  • {name}: {schema_path}")
    else:
        click.echo(f"  • {name}")
