"""Type line, mana cost and color notation for Magic: The Gathering cards."""

__version__ = "0.1.0"

from mtg_notation.domain import (
    CardType,
    Color,
    ColorIdentity,
    ManaCost,
    ManaSymbol,
    Supertype,
    TypeLine,
)
from mtg_notation.models import CardFace

__all__ = [
    "CardFace",
    "CardType",
    "Color",
    "ColorIdentity",
    "ManaCost",
    "ManaSymbol",
    "Supertype",
    "TypeLine",
]
