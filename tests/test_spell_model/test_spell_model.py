"""Tests for the spell value types."""

import dataclasses
import json

import pytest

from spellbook.model import (
    Breakpoint,
    BreakpointSize,
    CSSValue,
    Effect,
    Focus,
    MediaQuery,
    Spell,
    Variables,
)
from spellbook.parser import parse_spell


class TestSequenceFields:
    def test_variables_frozen_to_tuple(self) -> None:
        variables = Variables(["a", "b"])
        assert variables.names == ("a", "b")
        assert variables == Variables(("a", "b"))

    def test_effect_frozen_to_tuple(self) -> None:
        assert Effect(["hover"]).names == ("hover",)

    def test_hashable(self) -> None:
        assert len({Variables(["a", "b"]), Variables(("a", "b"))}) == 1

    def test_variables_len(self) -> None:
        assert len(Variables(["a", "b", "c"])) == 3


class TestImmutability:
    def test_spell_frozen(self) -> None:
        spell = parse_spell("color=red")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spell.component = "background"  # type: ignore[misc]

    def test_component_rejects_equals(self) -> None:
        with pytest.raises(ValueError):
            Spell(area=None, focus_effect=None, component="a=b", target=CSSValue("c"))


class TestAccessors:
    def test_focus_property(self) -> None:
        spell = parse_spell("{.card}color=red")
        assert spell.focus == ".card"
        assert spell.effects == ()

    def test_effects_property(self) -> None:
        spell = parse_spell("hover,active:color=red")
        assert spell.focus is None
        assert spell.effects == ("hover", "active")

    def test_neither(self) -> None:
        spell = parse_spell("color=red")
        assert spell.focus is None
        assert spell.effects == ()


class TestRendering:
    @pytest.mark.parametrize(
        "text",
        [
            "border-radius=8px",
            "(width>=768px)__br=0.375rem",
            "{[hidden]_>_p:hover:active}color=red",
            "hover,active:background-color=darkgrey",
            "btn=8px_lightgrey_grey_darkgrey",
            "md__{_>_p}hover:display=none",
            "xxl__hover:color=red",
        ],
    )
    def test_str_reproduces_source(self, text: str) -> None:
        assert str(parse_spell(text)) == text

    def test_area_str(self) -> None:
        assert str(Breakpoint(BreakpointSize.SMALL)) == "sm"
        assert str(MediaQuery("width>=1px")) == "(width>=1px)"

    def test_focus_effect_str(self) -> None:
        assert str(Focus("a > b")) == "{a > b}"
        assert str(Effect(["hover", "active"])) == "hover,active:"


class TestToDict:
    def test_full_spell(self) -> None:
        spell = parse_spell("md__hover,active:btn=a_b")
        assert spell.to_dict() == {
            "area": {"breakpoint": "md"},
            "focus_effect": {"effect": ["hover", "active"]},
            "component": "btn",
            "target": {"variables": ["a", "b"]},
        }

    def test_media_query_and_focus(self) -> None:
        spell = parse_spell("(min-width:1px)__{p}color=red")
        assert spell.to_dict() == {
            "area": {"media_query": "min-width:1px"},
            "focus_effect": {"focus": "p"},
            "component": "color",
            "target": {"css_value": "red"},
        }

    def test_plain_spell_is_json_serialisable(self) -> None:
        data = json.loads(json.dumps(parse_spell("color=red").to_dict()))
        assert data["area"] is None
        assert data["focus_effect"] is None
