"""Breakpoint keyword lookup."""

from __future__ import annotations

from spellbook.model.area import BreakpointSize
from spellbook.parser.errors import UnknownBreakpointError

__all__ = ["parse_breakpoint"]

_KEYWORDS: dict[str, BreakpointSize] = {size.value: size for size in BreakpointSize}


def parse_breakpoint(text: str) -> BreakpointSize:
    """Return the size for an exact, case-sensitive breakpoint keyword."""
    try:
        return _KEYWORDS[text]
    except KeyError:
        raise UnknownBreakpointError(
            f"invalid breakpoint for area: {text!r}", fragment=text, position=0
        ) from None
