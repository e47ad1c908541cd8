"""Area prefix parser: ``sm__`` style breakpoints or ``(query)__`` media queries."""

from __future__ import annotations

from spellbook.model.area import Area, Breakpoint, MediaQuery
from spellbook.parser.breakpoint import parse_breakpoint
from spellbook.parser.errors import MalformedAreaError

__all__ = ["AREA_SEPARATOR", "parse_area"]

AREA_SEPARATOR = "__"


def parse_area(spell: str, end: int) -> Area:
    """Parse the area held in ``spell[:end]``.

    *end* is the offset of the first ``__``. A media query keeps the text
    strictly between the first ``(`` and the first ``)``; parentheses do not
    nest.
    """
    if end == 0:
        raise MalformedAreaError("spell not long enough", fragment="", position=0)

    if spell[0] == "(":
        close = spell.find(")", 1, end)
        if close == -1:
            raise MalformedAreaError(
                "missing closing paren in spell area",
                fragment=spell[:end],
                position=end,
            )
        return MediaQuery(spell[1:close])

    return Breakpoint(parse_breakpoint(spell[:end]))
