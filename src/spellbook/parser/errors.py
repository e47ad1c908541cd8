"""Spell parse error types.

Every parse failure is terminal for the call that raised it. Errors carry
the offending fragment and, where known, the offset into the spell text.
"""

from __future__ import annotations


class SpellError(ValueError):
    """Base error raised when spell text cannot be parsed."""

    def __init__(
        self, message: str, fragment: str = "", position: int | None = None
    ) -> None:
        self.message = message
        self.fragment = fragment
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at offset {self.position})"


class MalformedAreaError(SpellError):
    """The area prefix before ``__`` is empty or has an unbalanced ``(``."""


class UnknownBreakpointError(SpellError):
    """The area keyword is not one of ``sm md lg xl xxl``."""


class UnterminatedSpellError(SpellError):
    """The spell ends where a focus, effect or component should begin."""


class UnterminatedFocusError(SpellError):
    """A ``{`` focus block was opened but never closed."""


class MissingAssignmentError(SpellError):
    """No ``=`` separates the component from its target."""


class EmptyTargetError(SpellError):
    """A variable-list target produced no names."""
