"""CLI command: spellbook check -- parse and lint a spell sheet."""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import Path

import click

from spellbook.model.diagnostic import Severity
from spellbook.sheet import check_sheet, parse_sheet


@click.command()
@click.argument("sheetfile", type=click.Path(exists=True))
@click.option("--strict/--no-strict", default=None, help="Fail on warnings too")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format",
)
@click.pass_obj
def check(config, sheetfile: str, strict: bool | None, output_format: str | None) -> None:
    """Parse and check a spell sheet (one spell per line).

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    if strict is not None:
        config = dataclasses.replace(config, strict=strict)
    if output_format is not None:
        config = dataclasses.replace(config, output_format=output_format)

    sheet_path = Path(sheetfile)
    sheet = parse_sheet(sheet_path.read_text(encoding="utf-8"), config)
    diagnostics = check_sheet(sheet)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]
    failed = bool(errors) or (config.strict and bool(warnings))

    if config.output_format == "json":
        click.echo(
            json.dumps(
                {
                    "spells": len(sheet.entries),
                    "diagnostics": [d.to_dict() for d in diagnostics],
                },
                indent=2,
            )
        )
        sys.exit(1 if failed else 0)

    if not diagnostics:
        click.echo(
            f"OK: {sheet_path.name} is valid ({len(sheet.entries)} spell(s), 0 diagnostics)"
        )
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )
    sys.exit(1 if failed else 0)
