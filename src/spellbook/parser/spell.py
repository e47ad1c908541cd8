"""Top-level spell parser.

Grammar::

    spell      := [area] [focus | effect] component "=" target
    area       := (breakpoint | "(" text_no_paren ")") "__"
    breakpoint := "sm" | "md" | "lg" | "xl" | "xxl"
    focus      := "{" text_no_brace "}"
    effect     := ident ("," ident)* ":"
    component  := text_no_equals
    target     := cssvalue | variables

Each stage reads a contiguous run of the input and hands the next stage the
offset to resume from. Nothing is re-read and nothing is backtracked.
"""

from __future__ import annotations

from spellbook.model.spell import Spell
from spellbook.parser.area import AREA_SEPARATOR, parse_area
from spellbook.parser.errors import MissingAssignmentError
from spellbook.parser.focus_effect import parse_focus_effect
from spellbook.parser.target import parse_target

__all__ = ["parse_spell"]


def parse_spell(text: str) -> Spell:
    """Parse one spell string into a :class:`Spell`.

    Raises a :class:`~spellbook.parser.errors.SpellError` subclass on the
    first failure; no partial result is returned.
    """
    area = None
    start = 0
    area_end = text.find(AREA_SEPARATOR)
    if area_end != -1:
        area = parse_area(text, area_end)
        start = area_end + len(AREA_SEPARATOR)

    focus_effect, component_start = parse_focus_effect(text, start)

    assign = text.find("=", component_start)
    if assign == -1:
        raise MissingAssignmentError(
            "expected '=' after component but could not find one",
            fragment=text[component_start:],
            position=component_start,
        )

    return Spell(
        area=area,
        focus_effect=focus_effect,
        component=text[component_start:assign],
        target=parse_target(text[assign + 1 :]),
    )
