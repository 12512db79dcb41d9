"""Supertypes and card types printed on the type line."""

from .vocabulary import Vocabulary


class Supertype(Vocabulary):
    """Supertypes (CR 205.4)."""

    BASIC = "Basic"
    LEGENDARY = "Legendary"
    ONGOING = "Ongoing"
    SNOW = "Snow"
    WORLD = "World"


class CardType(Vocabulary):
    """Card types (CR 205.2)."""

    ARTIFACT = "Artifact"
    CONSPIRACY = "Conspiracy"
    CREATURE = "Creature"
    ENCHANTMENT = "Enchantment"
    INSTANT = "Instant"
    LAND = "Land"
    PHENOMENON = "Phenomenon"
    PLANE = "Plane"
    PLANESWALKER = "Planeswalker"
    SCHEME = "Scheme"
    SORCERY = "Sorcery"
    TRIBAL = "Tribal"
    VANGUARD = "Vanguard"
