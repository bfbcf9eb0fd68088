"""CLI command: bemcheck parse -- show how a class name decomposes."""

from __future__ import annotations

import sys

import click

from bemcheck.cli.options import preset_option, suffix_option
from bemcheck.config import NamingConvention
from bemcheck.naming import parse_name
from bemcheck.validation import expected_location


@click.command()
@click.argument("name")
@preset_option
@suffix_option
def parse(name: str, preset: str, suffix: str) -> None:
    """Decompose NAME and show where its style-sheet must live."""
    convention = NamingConvention.from_preset(preset, suffix=suffix)
    identity = parse_name(name.lstrip("."), convention.scheme)
    if identity is None:
        click.echo(f'"{name}" is not a valid BEM name', err=True)
        sys.exit(1)

    click.echo(f"Shape:      {identity.shape.value}")
    click.echo(f"Entity:     {identity.entity}")
    if identity.sub_entity is not None:
        click.echo(f"Sub-entity: {identity.sub_entity}")
    if identity.modifier is not None:
        modifier = identity.modifier
        value = "" if modifier.value is True else f" = {modifier.value}"
        click.echo(f"Modifier:   {modifier.name}{value}")
    click.echo(f"Location:   {expected_location(identity, convention)}")
