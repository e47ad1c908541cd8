"""Immutable value types produced by the spell parser."""

from spellbook.model.area import Area, Breakpoint, BreakpointSize, MediaQuery
from spellbook.model.diagnostic import Diagnostic, Severity
from spellbook.model.focus import Effect, Focus, FocusOrEffect
from spellbook.model.spell import Spell
from spellbook.model.target import CSSValue, Target, Variables

__all__ = [
    "Area",
    "Breakpoint",
    "BreakpointSize",
    "CSSValue",
    "Diagnostic",
    "Effect",
    "Focus",
    "FocusOrEffect",
    "MediaQuery",
    "Severity",
    "Spell",
    "Target",
    "Variables",
]
