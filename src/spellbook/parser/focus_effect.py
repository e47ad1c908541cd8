"""Focus/effect parser.

A focus is a selector between braces (``{[hidden]_>_p}``); an effect is a
comma-separated list of pseudo-states ended by a colon (``hover,active:``).
A spell that opens with ``{`` is always a focus, whatever follows the
closing brace.
"""

from __future__ import annotations

import re

from spellbook.model.focus import Effect, Focus, FocusOrEffect
from spellbook.parser.errors import UnterminatedFocusError, UnterminatedSpellError

__all__ = ["parse_focus_effect"]

# First effect terminator or assignment, whichever comes first.
_DELIMITER_RE = re.compile(r"[:=]")


def parse_focus_effect(spell: str, start: int) -> tuple[FocusOrEffect | None, int]:
    """Parse an optional focus or effect beginning at *start*.

    Returns the parsed variant (or ``None``) and the offset where the
    component begins.
    """
    if start >= len(spell):
        raise UnterminatedSpellError(
            "spell ends too early looking for focus", fragment="", position=start
        )

    if spell[start] == "{":
        close = spell.find("}", start + 1)
        if close == -1:
            raise UnterminatedFocusError(
                "spell ends without closing focus",
                fragment=spell[start:],
                position=start,
            )
        return Focus(spell[start + 1 : close]), close + 1

    match = _DELIMITER_RE.search(spell, start)
    if match is None or match.group() == "=":
        return None, start

    colon = match.start()
    return Effect(spell[start:colon].split(",")), colon + 1
