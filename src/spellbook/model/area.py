"""Area model: the optional responsive scope of a spell."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BreakpointSize(Enum):
    """Fixed responsive width thresholds, keyed by their spell keyword."""

    SMALL = "sm"
    MEDIUM = "md"
    LARGE = "lg"
    XLARGE = "xl"
    XXLARGE = "xxl"


@dataclass(frozen=True)
class Breakpoint:
    """Scope limited to one named breakpoint, e.g. ``md__``."""

    size: BreakpointSize

    def __str__(self) -> str:
        return self.size.value


@dataclass(frozen=True)
class MediaQuery:
    """Scope given as a raw media query, e.g. ``(width>=768px)__``."""

    query: str

    def __str__(self) -> str:
        return f"({self.query})"


Area = Breakpoint | MediaQuery
