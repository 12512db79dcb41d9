"""Tests for the ColorIdentity value object."""

import pytest

from mtg_notation.domain.enums import Color
from mtg_notation.domain.value_objects import ColorIdentity, ManaCost
from mtg_notation.exceptions import ColorReadError


class TestColorIdentityCreation:
    """Test ColorIdentity creation and validation."""

    def test_new_identity_is_colorless(self) -> None:
        """Test an empty identity."""
        identity = ColorIdentity()
        assert identity.is_colorless
        assert len(identity) == 0
        assert identity.colors() == []

    def test_from_colors(self) -> None:
        """Test creating an identity from colors."""
        identity = ColorIdentity.from_colors(Color.GREEN, Color.WHITE)
        assert identity.has(Color.WHITE)
        assert identity.has(Color.GREEN)
        assert not identity.has(Color.RED)
        assert identity.bits == 0b10001

    def test_from_mana_cost(self) -> None:
        """Test colors are collected from every colored symbol."""
        cost = ManaCost.parse("{2}{C}{R/G}{U/P}{B/2}{S}{X}")
        identity = ColorIdentity.from_mana_cost(cost)
        assert identity.colors() == [Color.BLUE, Color.BLACK, Color.RED, Color.GREEN]

    @pytest.mark.parametrize("bits", [-1, 32, 0b100000])
    def test_invalid_bits(self, bits: int) -> None:
        """Test masks outside the five colors are rejected."""
        with pytest.raises(ValueError):
            ColorIdentity(bits)


class TestColorIdentityMutation:
    """Test adding and removing colors."""

    def test_add_and_remove(self) -> None:
        """Test colors toggle their bits."""
        identity = ColorIdentity()
        identity.add(Color.RED)
        identity.add(Color.RED)
        assert identity.bits == 0b01000

        identity.remove(Color.RED)
        identity.remove(Color.BLUE)
        assert identity.is_colorless

    def test_update(self) -> None:
        """Test adding several colors at once."""
        identity = ColorIdentity()
        identity.update([Color.BLACK, Color.BLUE])
        assert str(identity) == "UB"

    def test_copy_is_independent(self) -> None:
        """Test copies do not share state."""
        identity = ColorIdentity.from_colors(Color.WHITE)
        copy = identity.copy()
        copy.add(Color.BLUE)
        assert str(identity) == "W"
        assert str(copy) == "WU"


class TestColorIdentityRendering:
    """Test rendering and iteration order."""

    @pytest.mark.parametrize(
        "bits, expected",
        [(0b00000, "C"), (0b10001, "WG"), (0b01110, "UBR"), (0b01000, "R"), (0b11111, "WUBRG")],
    )
    def test_render(self, bits: int, expected: str) -> None:
        """Test rendering follows WUBRG order."""
        assert str(ColorIdentity(bits)) == expected

    def test_iteration_ignores_insertion_order(self) -> None:
        """Test iteration is always in ordinal order."""
        identity = ColorIdentity.from_colors(Color.GREEN, Color.BLACK, Color.WHITE)
        assert list(identity) == [Color.WHITE, Color.BLACK, Color.GREEN]

    def test_rendering_uses_ordinal_not_color_pie_order(self) -> None:
        """Test a wraparound pair still renders in WUBRG order."""
        assert str(ColorIdentity.from_colors(Color.WHITE, Color.GREEN)) == "WG"

    def test_classification(self) -> None:
        """Test mono- and multicolored checks."""
        assert ColorIdentity.from_colors(Color.RED).is_monocolored
        assert ColorIdentity.from_colors(Color.RED, Color.GREEN).is_multicolored
        assert not ColorIdentity().is_monocolored

    def test_contains_and_union(self) -> None:
        """Test membership and the union operator."""
        identity = ColorIdentity.from_colors(Color.RED) | ColorIdentity.from_colors(Color.BLUE)
        assert Color.RED in identity
        assert Color.BLUE in identity
        assert "R" not in identity
        assert str(identity) == "UR"


class TestColorIdentityParsing:
    """Test reading color identity text."""

    @pytest.mark.parametrize(
        "text, expected",
        [("C", "C"), ("WG", "WG"), ("GW", "WG"), ("RUB", "UBR"), ("GG", "G"), (" W ", "W")],
    )
    def test_parse(self, text: str, expected: str) -> None:
        """Test initials in any order parse to the canonical form."""
        assert str(ColorIdentity.parse(text)) == expected

    @pytest.mark.parametrize("text", ["", "Q", "WC", "w", "W U"])
    def test_parse_invalid(self, text: str) -> None:
        """Test malformed text raises ColorReadError."""
        with pytest.raises(ColorReadError):
            ColorIdentity.parse(text)

    def test_equality(self) -> None:
        """Test identities compare by their colors."""
        assert ColorIdentity.parse("GW") == ColorIdentity.from_colors(Color.WHITE, Color.GREEN)
        assert ColorIdentity.parse("G") != ColorIdentity.parse("W")
