"""Spell sheet model: SheetEntry and SpellSheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from spellbook.model.diagnostic import Diagnostic
from spellbook.model.spell import Spell


@dataclass(frozen=True)
class SheetEntry:
    """A spell parsed from one line of a sheet."""

    line: int
    text: str
    spell: Spell


@dataclass(frozen=True)
class SpellSheet:
    """Spells parsed from a multi-line source, plus per-line parse failures."""

    entries: list[SheetEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def spells(self) -> list[Spell]:
        return [entry.spell for entry in self.entries]
