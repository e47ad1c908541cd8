"""Lint rules for spell sheets.

Each rule is a function taking a SpellSheet and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from spellbook.model.area import MediaQuery
from spellbook.model.diagnostic import Diagnostic, Severity
from spellbook.model.focus import Effect
from spellbook.model.target import Variables
from spellbook.sheet.model import SpellSheet


def check_empty_component(sheet: SpellSheet) -> list[Diagnostic]:
    """Every spell must name a component before ``=``."""
    return [
        Diagnostic(
            rule="empty_component",
            severity=Severity.ERROR,
            message="Spell has no component before '='",
            line=entry.line,
            spell=entry.text,
        )
        for entry in sheet.entries
        if not entry.spell.component
    ]


def check_empty_media_query(sheet: SpellSheet) -> list[Diagnostic]:
    return [
        Diagnostic(
            rule="empty_media_query",
            severity=Severity.WARNING,
            message="Media query area is empty",
            line=entry.line,
            spell=entry.text,
        )
        for entry in sheet.entries
        if isinstance(entry.spell.area, MediaQuery) and not entry.spell.area.query
    ]


def check_empty_variable(sheet: SpellSheet) -> list[Diagnostic]:
    """Leading, trailing or doubled underscores leave empty variable names."""
    diagnostics: list[Diagnostic] = []
    for entry in sheet.entries:
        target = entry.spell.target
        if isinstance(target, Variables) and "" in target.names:
            diagnostics.append(
                Diagnostic(
                    rule="empty_variable",
                    severity=Severity.WARNING,
                    message=(
                        f"Variable list '{target}' contains an empty name "
                        f"(position {target.names.index('')})"
                    ),
                    line=entry.line,
                    spell=entry.text,
                )
            )
    return diagnostics


def check_empty_effect(sheet: SpellSheet) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for entry in sheet.entries:
        effect = entry.spell.focus_effect
        if isinstance(effect, Effect) and "" in effect.names:
            diagnostics.append(
                Diagnostic(
                    rule="empty_effect",
                    severity=Severity.WARNING,
                    message=f"Effect list '{effect}' contains an empty name",
                    line=entry.line,
                    spell=entry.text,
                )
            )
    return diagnostics


def check_duplicate_spell(sheet: SpellSheet) -> list[Diagnostic]:
    """The same spell should not be cast twice in one sheet."""
    first_seen: dict[str, int] = {}
    diagnostics: list[Diagnostic] = []
    for entry in sheet.entries:
        if entry.text in first_seen:
            diagnostics.append(
                Diagnostic(
                    rule="duplicate_spell",
                    severity=Severity.WARNING,
                    message=(
                        f"Spell '{entry.text}' duplicates line {first_seen[entry.text]}"
                    ),
                    line=entry.line,
                    spell=entry.text,
                )
            )
        else:
            first_seen[entry.text] = entry.line
    return diagnostics


ALL_RULES = [
    check_empty_component,
    check_empty_media_query,
    check_empty_variable,
    check_empty_effect,
    check_duplicate_spell,
]
