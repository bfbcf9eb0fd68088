"""CLI command: bemcheck check -- verify a directory of style-sheets."""

from __future__ import annotations

import logging
import sys

import click

from bemcheck.cli.options import preset_option, suffix_option
from bemcheck.config import NamingConvention
from bemcheck.validation import check_naming


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@preset_option
@suffix_option
@click.option("-v", "--verbose", is_flag=True, help="Log every checked file.")
def check(directory: str, preset: str, suffix: str, verbose: bool) -> None:
    """Check every style-sheet under DIRECTORY.

    Prints nothing and exits with code 0 when all files are accordant.
    Otherwise prints the first violation and exits with code 1.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    convention = NamingConvention.from_preset(preset, suffix=suffix)
    error = check_naming(directory, convention)
    if error is None:
        sys.exit(0)

    click.echo(f"Error [{error.kind.value}]: {error}", err=True)
    if error.fix:
        click.echo(f"Expected: {error.fix}", err=True)
    sys.exit(1)
