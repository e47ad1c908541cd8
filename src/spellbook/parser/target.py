"""Target parser: a literal CSS value or an underscore-joined variable list."""

from __future__ import annotations

from spellbook.model.target import CSSValue, Target, Variables
from spellbook.parser.errors import EmptyTargetError

__all__ = ["VARIABLE_SEPARATOR", "is_variable_list", "parse_target"]

VARIABLE_SEPARATOR = "_"


def is_variable_list(text: str) -> bool:
    """True if *text* has an underscore and only alphanumerics and underscores.

    This is a heuristic: ``8px_lightgrey_grey`` is a variable list, while
    ``#fff`` or ``rgba(0,0,0,.5)`` are not. A literal value made only of
    underscore-joined alphanumerics is still read as variables.
    """
    return VARIABLE_SEPARATOR in text and all(
        c.isalnum() or c == VARIABLE_SEPARATOR for c in text
    )


def parse_target(text: str) -> Target:
    """Classify and parse the text following ``=``."""
    if not is_variable_list(text):
        return CSSValue(text)
    names = text.split(VARIABLE_SEPARATOR)
    if not names:
        raise EmptyTargetError("empty target", fragment=text)
    return Variables(names)
