"""CLI command: spellbook parse -- show the structure of one spell."""

from __future__ import annotations

import json
import sys

import click

from spellbook.model.area import Breakpoint
from spellbook.model.focus import Effect, Focus
from spellbook.model.spell import Spell
from spellbook.model.target import Variables
from spellbook.parser import SpellError, parse_spell


def _describe(spell: Spell) -> list[str]:
    lines = []
    if spell.area is None:
        lines.append("Area:      -")
    elif isinstance(spell.area, Breakpoint):
        lines.append(f"Area:      breakpoint {spell.area.size.value}")
    else:
        lines.append(f"Area:      media query ({spell.area.query})")

    if isinstance(spell.focus_effect, Focus):
        lines.append(f"Focus:     {spell.focus_effect.selector}")
    elif isinstance(spell.focus_effect, Effect):
        lines.append(f"Effect:    {', '.join(spell.focus_effect.names)}")

    lines.append(f"Component: {spell.component}")
    if isinstance(spell.target, Variables):
        lines.append(f"Variables: {', '.join(spell.target.names)}")
    else:
        lines.append(f"Value:     {spell.target.value}")
    return lines


@click.command()
@click.argument("spell")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format",
)
@click.pass_obj
def parse(config, spell: str, output_format: str | None) -> None:
    """Parse a single SPELL and display its structure.

    Exits with code 1 if the spell cannot be parsed.
    """
    output_format = output_format or config.output_format
    try:
        result = parse_spell(spell)
    except SpellError as exc:
        click.echo(f"Parse error: {type(exc).__name__}: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    for line in _describe(result):
        click.echo(line)
