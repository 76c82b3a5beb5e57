"""sassvars CLI entry point: Click group with subcommands."""

import logging

import click

from sassvars import __version__


@click.group()
@click.version_option(version=__version__, prog_name="sassvars")
@click.option("-v", "--verbose", is_flag=True, help="Log discovery, rendering and cache activity")
def cli(verbose: bool) -> None:
    """sassvars - computed Sass/SCSS variables as build-time constants."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from sassvars.cli.names import names  # noqa: E402
from sassvars.cli.extract import extract  # noqa: E402
from sassvars.cli.export import export  # noqa: E402

cli.add_command(names)
cli.add_command(extract)
cli.add_command(export)
