"""CLI command: sassvars extract -- print resolved variable values as JSON."""

from __future__ import annotations

import json

import click

from sassvars.cli.options import build_lookup, fail, lookup_options
from sassvars.errors import SassVarsError


@click.command()
@click.argument("stylesheet", type=click.Path())
@click.argument("names", nargs=-1)
@lookup_options
def extract(
    stylesheet: str,
    names: tuple[str, ...],
    sass_case: str | None,
    output_case: str | None,
    output_style: str,
) -> None:
    """Resolve variables of STYLESHEET and print them as a JSON object.

    Without NAMES every variable in the import closure is resolved.  NAMES
    are given in the output case.
    """
    lookup = build_lookup(sass_case, output_case, output_style)
    try:
        if names:
            values = lookup.extract_named(stylesheet, names)
            values = {name: values[name] for name in names}
        else:
            values = lookup.extract_all(stylesheet)
    except SassVarsError as exc:
        fail(exc)
        return
    click.echo(json.dumps(values, indent=2, sort_keys=True))
