"""Spellbook CLI entry point: Click group with subcommands."""

import logging

import click

from spellbook import __version__
from spellbook.config import SpellbookConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="spellbook")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=SpellbookConfig.log_level,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Spellbook - parse and check compact styling spells."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = SpellbookConfig(log_level=log_level.upper())


# Import and register subcommands
from spellbook.cli.parse import parse  # noqa: E402
from spellbook.cli.check import check  # noqa: E402

cli.add_command(parse)
cli.add_command(check)
