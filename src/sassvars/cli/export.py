"""CLI command: sassvars export -- write a Python module of constants."""

from __future__ import annotations

from pathlib import Path

import click

from sassvars.cli.options import build_lookup, fail, lookup_options
from sassvars.codegen import render_module
from sassvars.errors import SassVarsError
from sassvars.sources import resolve_source
from sassvars.transforms import SassImportTransform, StylesheetImport


@click.command()
@click.argument("stylesheet", type=click.Path())
@click.argument("names", nargs=-1)
@click.option(
    "--default",
    "default_name",
    default=None,
    help="Bind every variable to this name as a read-only mapping",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the module here instead of stdout",
)
@lookup_options
def export(
    stylesheet: str,
    names: tuple[str, ...],
    default_name: str | None,
    output: str | None,
    sass_case: str | None,
    output_case: str | None,
    output_style: str,
) -> None:
    """Generate a Python module with constants from STYLESHEET.

    NAMES become individual constants; --default binds the whole mapping.
    With neither, the mapping is bound to STYLES.
    """
    if default_name is None and not names:
        default_name = "STYLES"
    transform = SassImportTransform(build_lookup(sass_case, output_case, output_style))
    try:
        source = resolve_source(stylesheet)
        request = StylesheetImport(
            source=source.path.name,
            default=default_name,
            names={name: name for name in names},
        )
        bindings = transform.apply(source.path, request)
        module = render_module(bindings, source=source.path.name)
    except SassVarsError as exc:
        fail(exc)
        return
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    if output is None:
        click.echo(module, nl=False)
    else:
        Path(output).write_text(module, encoding="utf-8")
        click.echo(f"Wrote {len(bindings)} binding(s) to {output}")
