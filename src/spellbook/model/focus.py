"""Focus/effect model: the optional selector or pseudo-state qualifier."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Focus:
    """A literal selector fragment written between braces."""

    selector: str

    def __str__(self) -> str:
        return "{" + self.selector + "}"


@dataclass(frozen=True)
class Effect:
    """Pseudo-states (hover, active, ...) listed before the component."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))

    def __str__(self) -> str:
        return ",".join(self.names) + ":"


FocusOrEffect = Focus | Effect
