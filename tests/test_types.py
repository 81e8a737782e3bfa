"""
Tests for spell value types.
"""

import pytest
from pydantic import ValidationError

from lat_spells.types import (
    Action,
    Category,
    Element,
    Emphasis,
    Modifier,
    Origin,
    Preposition,
    SpellDescriptor,
    Target,
)


class TestWordEnums:
    """Tests for the word enums."""

    def test_variant_counts(self):
        assert len(Action) == 4
        assert len(Element) == 6
        assert len(Modifier) == 4
        assert len(Target) == 4
        assert len(Origin) == 2
        assert len(Emphasis) == 3
        assert len(Preposition) == 2

    def test_string_enum(self):
        assert isinstance(Action.URE, str)
        assert Emphasis.CUM_VI == "CumVi"

    def test_terra_is_two_distinct_words(self):
        assert Element.TERRA.value == Origin.TERRA.value
        assert Element.TERRA is not Origin.TERRA


class TestCategory:
    """Tests for Category."""

    def test_variants(self):
        assert Category.ACTION.variants is Action
        assert Category.PREPOSITION.variants is Preposition

    def test_variant_lookup(self):
        assert Category.EMPHASIS.variant("CumVi") is Emphasis.CUM_VI
        assert Category.EMPHASIS.variant("cum_vi") is Emphasis.CUM_VI
        assert Category.ORIGIN.variant("Terra") is Origin.TERRA

    def test_variant_lookup_invalid(self):
        with pytest.raises(ValueError, match="not a valid Action variant"):
            Category.ACTION.variant("Ignis")

    def test_of(self):
        assert Category.of(Element.TERRA) == Category.ELEMENT
        assert Category.of(Origin.TERRA) == Category.ORIGIN
        assert Category.of(Preposition.TO_TARGET) == Category.PREPOSITION

    def test_of_non_word(self):
        with pytest.raises(TypeError):
            Category.of("Terra")


class TestSpellDescriptor:
    """Tests for SpellDescriptor."""

    def test_defaults(self):
        spell = SpellDescriptor(action=Action.URE, element=Element.IGNIS, modifier=Modifier.MAGNUS)
        assert spell.target is None
        assert spell.origin is None
        assert spell.emphasis_phrases == ()
        assert spell.is_quick_cast
        assert not spell.is_full_cast

    def test_full_cast(self):
        spell = SpellDescriptor(
            action=Action.SANA,
            element=Element.AQUA,
            modifier=Modifier.PARVUS,
            target=Target.AMICUS,
        )
        assert spell.is_full_cast

    def test_emphasis_only_is_full_cast(self):
        spell = SpellDescriptor(
            action=Action.FERI,
            element=Element.VENTUS,
            modifier=Modifier.CELER,
            emphasis_phrases=(Emphasis.NUNC,),
        )
        assert spell.is_full_cast

    def test_frozen(self):
        spell = SpellDescriptor(action=Action.URE, element=Element.IGNIS, modifier=Modifier.MAGNUS)
        with pytest.raises(ValidationError):
            spell.action = Action.FERI

    def test_emphasis_phrases_immutable(self):
        spell = SpellDescriptor(
            action=Action.URE,
            element=Element.IGNIS,
            modifier=Modifier.MAGNUS,
            emphasis_phrases=[Emphasis.NUNC],
        )
        assert spell.emphasis_phrases == (Emphasis.NUNC,)
        assert not hasattr(spell.emphasis_phrases, "append")
        with pytest.raises(ValidationError):
            spell.emphasis_phrases = ()

    def test_hashable(self):
        a = SpellDescriptor(
            action=Action.URE,
            element=Element.IGNIS,
            modifier=Modifier.MAGNUS,
            emphasis_phrases=(Emphasis.NUNC, Emphasis.NUNC),
        )
        b = a.model_copy()
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_core_required(self):
        with pytest.raises(ValidationError):
            SpellDescriptor(action=Action.URE, element=Element.IGNIS)

    def test_json_round_trip(self):
        spell = SpellDescriptor(
            action=Action.URE,
            element=Element.TERRA,
            modifier=Modifier.FORTIS,
            origin=Origin.CAELUM,
            emphasis_phrases=(Emphasis.TANDEM, Emphasis.TANDEM),
            source_text="Ure Terra Fortis ex Caelo Tandem Tandem",
        )
        assert SpellDescriptor.model_validate_json(spell.model_dump_json()) == spell
