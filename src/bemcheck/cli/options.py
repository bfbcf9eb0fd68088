"""Options shared by bemcheck subcommands."""

from __future__ import annotations

import click

from bemcheck.config import PRESET_SCHEMES

preset_option = click.option(
    "--preset",
    type=click.Choice(sorted(PRESET_SCHEMES)),
    default="origin",
    show_default=True,
    help="BEM naming flavour.",
)

suffix_option = click.option(
    "--suffix",
    default=".post.css",
    show_default=True,
    help="File suffix of checked style-sheets.",
)
