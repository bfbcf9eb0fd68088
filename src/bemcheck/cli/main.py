"""bemcheck CLI entry point: Click group with subcommands."""

import click

from bemcheck import __version__

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-V", "--version", prog_name="bemcheck")
def cli() -> None:
    """Check style-sheet trees against the BEM naming convention.

    Each top-level class rule must name its own file, and the file must sit
    in the directory its block, element and modifier names call for.
    """


from bemcheck.cli.check import check  # noqa: E402
from bemcheck.cli.parse import parse  # noqa: E402

cli.add_command(check)
cli.add_command(parse)
