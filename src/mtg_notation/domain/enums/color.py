"""Enumeration of the five Magic: The Gathering colors."""

from enum import Enum
from typing import Tuple

_INITIALS = "WUBRG"


class Color(Enum):
    """The five colors, valued by their fixed ordinal.

    The ordinal gives the canonical display order (WUBRG) and positions the
    colors on the color pie, where each color is adjacent to its ordinal
    neighbours and Green wraps around to White.
    """

    WHITE = 0
    BLUE = 1
    BLACK = 2
    RED = 3
    GREEN = 4

    def __str__(self) -> str:
        return self.initial

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def initial(self) -> str:
        """Single-letter symbol used in mana and color identity text."""
        return _INITIALS[self.value]

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_initial(cls, letter: str) -> "Color":
        """Create a Color from its single-letter symbol (W, U, B, R, G)."""
        if len(letter) != 1 or letter not in _INITIALS:
            raise ValueError(f"Invalid color symbol: {letter!r}")
        return cls(_INITIALS.index(letter))

    @staticmethod
    def color_pie_order(color1: "Color", color2: "Color") -> Tuple["Color", "Color"]:
        """Order two colors the short way around the color pie.

        A pair is kept as given when the second color is at most two steps
        clockwise from the first, otherwise it is flipped. The result does
        not depend on argument order: (White, Blue) stays as is while
        (White, Green) becomes (Green, White).
        """
        if (color2.value - color1.value) % len(_INITIALS) <= 2:
            return color1, color2
        return color2, color1
