"""Reader for spell sheets: one spell per line.

Example::

    # card styles
    border-radius=8px
    md__hover,active:background-color=darkgrey
    btn=8px_lightgrey_grey_darkgrey

Blank lines and comment lines are skipped. A line that fails to parse
becomes an ERROR diagnostic and reading continues with the next line.
"""

from __future__ import annotations

import logging

from spellbook.config import SpellbookConfig
from spellbook.model.diagnostic import Diagnostic, Severity
from spellbook.parser.errors import SpellError
from spellbook.parser.spell import parse_spell
from spellbook.sheet.model import SheetEntry, SpellSheet

__all__ = ["parse_sheet"]

log = logging.getLogger("spellbook.sheet")


def parse_sheet(source: str, config: SpellbookConfig | None = None) -> SpellSheet:
    """Parse every spell in *source*, collecting failures as diagnostics."""
    config = config or SpellbookConfig()
    entries: list[SheetEntry] = []
    diagnostics: list[Diagnostic] = []

    for lineno, raw in enumerate(source.splitlines(), start=1):
        text = raw.strip()
        if not text or (config.comment_prefix and text.startswith(config.comment_prefix)):
            continue
        try:
            spell = parse_spell(text)
        except SpellError as exc:
            log.debug("line %d: %s", lineno, exc)
            diagnostics.append(
                Diagnostic(
                    rule="parse",
                    severity=Severity.ERROR,
                    message=f"{type(exc).__name__}: {exc}",
                    line=lineno,
                    spell=text,
                )
            )
            continue
        log.debug("line %d: parsed %r", lineno, text)
        entries.append(SheetEntry(line=lineno, text=text, spell=spell))

    log.info(
        "parsed %d spell(s), %d failure(s)", len(entries), len(diagnostics)
    )
    return SpellSheet(entries=entries, diagnostics=diagnostics)
