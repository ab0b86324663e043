"""
Tests for brewcalc enum display tokens.
"""

import pytest

from brewcalc.enums import (
    ALL_ENUMS,
    FermentableType,
    HopUse,
    MiscType,
    YeastFlocculation,
    YeastForm,
)
from brewcalc.exceptions import BrewcalcError, UnknownVariantError


class TestDisplayTokens:
    """Tests for member -> string."""

    def test_multi_word_tokens(self):
        assert FermentableType.DRY_EXTRACT.display == "Dry Extract"
        assert HopUse.FIRST_WORT.display == "First Wort"
        assert YeastFlocculation.VERY_HIGH.display == "Very High"
        assert MiscType.WATER_AGENT.display == "Water Agent"

    def test_str_is_display(self):
        assert str(FermentableType.GRAIN) == "Grain"
        assert f"{HopUse.DRY_HOP}" == "Dry Hop"

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_tokens_are_unique(self, enum_cls):
        tokens = [member.display for member in enum_cls]
        assert len(tokens) == len(set(tokens))

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_display_is_a_documented_token(self, enum_cls):
        for member in enum_cls:
            assert member.display in enum_cls.tokens()


class TestFromDisplay:
    """Tests for string -> member."""

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_round_trip(self, enum_cls):
        for member in enum_cls:
            assert enum_cls.from_display(member.display) is member

    def test_exact_match(self):
        assert FermentableType.from_display("Dry Extract") is FermentableType.DRY_EXTRACT

    def test_case_sensitive(self):
        with pytest.raises(UnknownVariantError):
            FermentableType.from_display("grain")

    def test_member_name_is_not_a_token(self):
        with pytest.raises(UnknownVariantError):
            FermentableType.from_display("DRY_EXTRACT")

    def test_error_carries_type_and_value(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            YeastForm.from_display("Frozen")
        err = exc_info.value
        assert err.type_name == "YeastForm"
        assert err.value == "Frozen"
        assert "YeastForm" in str(err)
        assert "Frozen" in str(err)

    def test_error_hierarchy(self):
        with pytest.raises(BrewcalcError):
            HopUse.from_display("")
        with pytest.raises(ValueError):
            HopUse.from_display("Whirlpool")


class TestYeastFormTokens:
    """Tests for yeast form spelling."""

    def test_slant(self):
        assert YeastForm.from_display("Slant") is YeastForm.SLANT

    def test_slate_is_not_a_token(self):
        with pytest.raises(UnknownVariantError):
            YeastForm.from_display("Slate")


class TestDefault:
    """Tests for default variants."""

    def test_defaults(self):
        assert FermentableType.default() is FermentableType.GRAIN
        assert YeastForm.default() is YeastForm.LIQUID
        assert YeastFlocculation.default() is YeastFlocculation.LOW
        assert HopUse.default() is HopUse.BOIL
