"""Domain layer for Magic: The Gathering card notation.

This package contains the vocabularies and value objects, free from
dependencies on configuration, I/O or the command line.
"""

from .enums import CardType, Color, Supertype
from .value_objects import ColorIdentity, ManaCost, ManaSymbol, TypeLine

__all__ = [
    "CardType",
    "Color",
    "ColorIdentity",
    "ManaCost",
    "ManaSymbol",
    "Supertype",
    "TypeLine",
]
