"""Domain-specific pytest fixtures for type line and mana cost tests."""

from typing import List, Tuple

import pytest

from mtg_notation.domain.enums import (
    CardType,
    Color,
    CreatureType,
    EnchantmentType,
    LandType,
    PlanarType,
    PlaneswalkerType,
    SpellType,
    Supertype,
)
from mtg_notation.domain.value_objects import ManaSymbol, TypeLine


@pytest.fixture
def type_line_pairs() -> List[Tuple[TypeLine, str]]:
    """Type lines with their printed form, taken from real cards."""
    return [
        (
            TypeLine.from_iters(
                [Supertype.LEGENDARY],
                [CardType.ENCHANTMENT, CardType.CREATURE],
                [CreatureType.GOD],
            ),
            "Legendary Enchantment Creature — God",
        ),
        (
            TypeLine.from_iters([], [CardType.ARTIFACT, CardType.CREATURE], [CreatureType.CONSTRUCT]),
            "Artifact Creature — Construct",
        ),
        (
            TypeLine.from_iters([], [CardType.CREATURE], [CreatureType.MERFOLK, CreatureType.WIZARD]),
            "Creature — Merfolk Wizard",
        ),
        (TypeLine.from_iters([], [CardType.LAND], []), "Land"),
        (
            TypeLine.from_iters([Supertype.LEGENDARY], [CardType.PLANESWALKER], [PlaneswalkerType.KARN]),
            "Legendary Planeswalker — Karn",
        ),
        (
            TypeLine.from_iters([], [CardType.ENCHANTMENT], [EnchantmentType.AURA, EnchantmentType.CURSE]),
            "Enchantment — Aura Curse",
        ),
        (
            TypeLine.from_iters([Supertype.BASIC, Supertype.SNOW], [CardType.LAND], [LandType.MOUNTAIN]),
            "Basic Snow Land — Mountain",
        ),
        (
            TypeLine.from_iters([], [CardType.INSTANT], [SpellType.ARCANE]),
            "Instant — Arcane",
        ),
        (
            TypeLine.from_iters([], [CardType.PLANE], [PlanarType.BOLAS_MEDITATION_REALM]),
            "Plane — Bolas's Meditation Realm",
        ),
        (
            TypeLine.from_iters([], [CardType.TRIBAL, CardType.INSTANT], [CreatureType.FAERIE]),
            "Tribal Instant — Faerie",
        ),
    ]


@pytest.fixture
def invalid_type_lines() -> List[TypeLine]:
    """Type lines whose subtypes do not fit their card types."""
    return [
        TypeLine.from_iters([], [CardType.ARTIFACT], [CreatureType.HUMAN]),
        TypeLine.from_iters([], [CardType.ENCHANTMENT, CardType.CREATURE], [PlaneswalkerType.JACE]),
        TypeLine.from_iters([Supertype.LEGENDARY, Supertype.SNOW], [CardType.LAND], [EnchantmentType.CURSE]),
        TypeLine.from_iters([Supertype.LEGENDARY], [], []),
    ]


@pytest.fixture
def mixed_symbols() -> List[ManaSymbol]:
    """One symbol of every kind."""
    return [
        ManaSymbol.generic(3),
        ManaSymbol.colored(Color.RED),
        ManaSymbol.colorless(),
        ManaSymbol.variable(),
        ManaSymbol.hybrid(Color.GREEN, Color.WHITE),
        ManaSymbol.mono_hybrid(Color.BLUE),
        ManaSymbol.phyrexian(Color.BLACK),
        ManaSymbol.snow(),
    ]


@pytest.fixture
def mana_value_cases() -> List[Tuple[str, int]]:
    """Mana cost text with the expected mana value."""
    return [
        ("", 0),
        ("{0}", 0),
        ("{16}", 16),
        ("{W}", 1),
        ("{C}", 1),
        ("{2}{W}{W}", 4),
        ("{X}", 0),
        ("{X}{X}{R}", 1),
        ("{X}{2}{U}", 3),
        ("{W}{U}{B}{R}{G}", 5),
        ("{W/U}{W/U}", 2),
        ("{W/2}{U/2}{B/2}", 6),
        ("{G/P}{G/P}", 2),
        ("{S}{S}{1}", 3),
        ("{5}{C}{G}{W/B}", 8),
        ("{15}{G}{G}{G}{G}{G}{W}{W}{W}{W}{W}", 25),
    ]
