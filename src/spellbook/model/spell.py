"""Spell model: one parsed styling rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from spellbook.model.area import Area, Breakpoint, MediaQuery
from spellbook.model.focus import Effect, Focus, FocusOrEffect
from spellbook.model.target import Target, Variables


@dataclass(frozen=True)
class Spell:
    """A styling rule: optional area, optional focus or effect, component and target.

    ``focus_effect`` holds at most one of :class:`Focus` or :class:`Effect`,
    so a spell can never carry both.
    """

    area: Area | None
    focus_effect: FocusOrEffect | None
    component: str
    target: Target

    def __post_init__(self) -> None:
        if "=" in self.component:
            raise ValueError(f"Spell component must not contain '=': {self.component!r}")

    @classmethod
    def parse(cls, text: str) -> Spell:
        """Parse *text* into a Spell; see :func:`spellbook.parser.parse_spell`."""
        from spellbook.parser.spell import parse_spell

        return parse_spell(text)

    @property
    def focus(self) -> str | None:
        """The focus selector, if the spell has one."""
        if isinstance(self.focus_effect, Focus):
            return self.focus_effect.selector
        return None

    @property
    def effects(self) -> tuple[str, ...]:
        """The effect names, empty when the spell has none."""
        if isinstance(self.focus_effect, Effect):
            return self.focus_effect.names
        return ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the spell."""
        area: dict[str, str] | None = None
        if isinstance(self.area, Breakpoint):
            area = {"breakpoint": self.area.size.value}
        elif isinstance(self.area, MediaQuery):
            area = {"media_query": self.area.query}

        focus_effect: dict[str, Any] | None = None
        if isinstance(self.focus_effect, Focus):
            focus_effect = {"focus": self.focus_effect.selector}
        elif isinstance(self.focus_effect, Effect):
            focus_effect = {"effect": list(self.focus_effect.names)}

        if isinstance(self.target, Variables):
            target: dict[str, Any] = {"variables": list(self.target.names)}
        else:
            target = {"css_value": self.target.value}

        return {
            "area": area,
            "focus_effect": focus_effect,
            "component": self.component,
            "target": target,
        }

    def __str__(self) -> str:
        parts = []
        if self.area is not None:
            parts.append(f"{self.area}__")
        if self.focus_effect is not None:
            parts.append(str(self.focus_effect))
        parts.append(f"{self.component}={self.target}")
        return "".join(parts)
