"""Hand-written parser for spell strings."""

from spellbook.parser.area import parse_area
from spellbook.parser.breakpoint import parse_breakpoint
from spellbook.parser.errors import (
    EmptyTargetError,
    MalformedAreaError,
    MissingAssignmentError,
    SpellError,
    UnknownBreakpointError,
    UnterminatedFocusError,
    UnterminatedSpellError,
)
from spellbook.parser.focus_effect import parse_focus_effect
from spellbook.parser.spell import parse_spell
from spellbook.parser.target import is_variable_list, parse_target

__all__ = [
    "EmptyTargetError",
    "MalformedAreaError",
    "MissingAssignmentError",
    "SpellError",
    "UnknownBreakpointError",
    "UnterminatedFocusError",
    "UnterminatedSpellError",
    "is_variable_list",
    "parse_area",
    "parse_breakpoint",
    "parse_focus_effect",
    "parse_spell",
    "parse_target",
]
