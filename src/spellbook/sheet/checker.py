"""Sheet checker: runs all lint rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from spellbook.model.diagnostic import Diagnostic
from spellbook.sheet.model import SpellSheet
from spellbook.sheet.rules import ALL_RULES


class SheetError(Exception):
    """Raised when checking produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Spell sheet has {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[SpellSheet], list[Diagnostic]]


def check_sheet(
    sheet: SpellSheet, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Return the sheet's parse diagnostics followed by all lint findings."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = list(sheet.diagnostics)
    for rule in rules:
        diagnostics.extend(rule(sheet))
    return diagnostics


def check_or_raise(
    sheet: SpellSheet, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run checks; raises :class:`SheetError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = check_sheet(sheet, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise SheetError(errors)
    return diagnostics
