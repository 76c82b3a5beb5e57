"""Options shared by the extraction commands."""

from __future__ import annotations

import sys
from typing import Callable, TypeVar

import click

from sassvars.config import LookupConfig
from sassvars.errors import SassVarsError
from sassvars.lookup import VarLookup

F = TypeVar("F", bound=Callable[..., object])


def lookup_options(fn: F) -> F:
    """Attach ``--sass-case``, ``--output-case`` and ``--style``."""
    fn = click.option(
        "--style",
        "output_style",
        default="expanded",
        show_default=True,
        type=click.Choice(["nested", "expanded", "compact", "compressed"]),
        help="libsass output style used while resolving values",
    )(fn)
    fn = click.option(
        "--output-case",
        default=None,
        help="Case of the exposed names, e.g. constant or camel",
    )(fn)
    fn = click.option(
        "--sass-case",
        default=None,
        help="Case of the names as declared in the stylesheet, e.g. param",
    )(fn)
    return fn


def build_lookup(sass_case: str | None, output_case: str | None, output_style: str) -> VarLookup:
    try:
        config = LookupConfig(
            sass_case=sass_case, output_case=output_case, output_style=output_style
        )
    except SassVarsError as exc:
        raise click.BadParameter(str(exc)) from exc
    return VarLookup(config)


def fail(exc: SassVarsError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)
