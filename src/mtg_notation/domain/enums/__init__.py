"""Closed vocabularies: colors, supertypes, card types and subtypes."""

from .card_types import CardType, Supertype
from .color import Color
from .subtypes import (
    SUBTYPE_CATEGORIES,
    ArtifactType,
    CreatureType,
    EnchantmentType,
    LandType,
    PlanarType,
    PlaneswalkerType,
    SpellType,
    Subtype,
    SubtypeCategory,
    is_subtype,
    parse_subtype,
)

__all__ = [
    "Color",
    "CardType",
    "Supertype",
    "Subtype",
    "SubtypeCategory",
    "SUBTYPE_CATEGORIES",
    "ArtifactType",
    "EnchantmentType",
    "LandType",
    "PlaneswalkerType",
    "SpellType",
    "CreatureType",
    "PlanarType",
    "is_subtype",
    "parse_subtype",
]
