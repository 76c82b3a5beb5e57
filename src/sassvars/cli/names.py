"""CLI command: sassvars names -- list the variables a stylesheet declares."""

from __future__ import annotations

import click

from sassvars.cli.options import fail
from sassvars.discovery import discover_names
from sassvars.errors import SassVarsError


@click.command()
@click.argument("stylesheet", type=click.Path())
def names(stylesheet: str) -> None:
    """List variable names declared in STYLESHEET and everything it imports."""
    try:
        found = discover_names(stylesheet)
    except SassVarsError as exc:
        fail(exc)
        return
    for name in sorted(found):
        click.echo(name)
