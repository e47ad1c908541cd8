"""Spellbook: parser for compact single-line styling rules."""

from __future__ import annotations

from spellbook.config import SpellbookConfig
from spellbook.model import (
    Area,
    Breakpoint,
    BreakpointSize,
    CSSValue,
    Effect,
    Focus,
    FocusOrEffect,
    MediaQuery,
    Spell,
    Target,
    Variables,
)
from spellbook.parser import SpellError, parse_spell
from spellbook.sheet import SpellSheet, check_sheet, parse_sheet

__version__ = "0.1.0"

__all__ = [
    "Area",
    "Breakpoint",
    "BreakpointSize",
    "CSSValue",
    "Effect",
    "Focus",
    "FocusOrEffect",
    "MediaQuery",
    "Spell",
    "SpellError",
    "SpellSheet",
    "SpellbookConfig",
    "Target",
    "Variables",
    "check_sheet",
    "parse_sheet",
    "parse_spell",
]
