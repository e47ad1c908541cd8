"""Target model: the value assigned to a component."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CSSValue:
    """An opaque CSS value, kept verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Variables:
    """Positional variable references, in source order.

    Empty names produced by leading, trailing or doubled underscores are kept.
    """

    names: tuple[str, ...]  # lists are accepted and frozen to a tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))

    def __len__(self) -> int:
        return len(self.names)

    def __str__(self) -> str:
        return "_".join(self.names)


Target = CSSValue | Variables
