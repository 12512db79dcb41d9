"""Value object for a single Magic: The Gathering mana symbol."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from mtg_notation.domain.enums.color import Color
from mtg_notation.exceptions import ManaCostReadError

SYMBOL_PATTERN = re.compile(r"\{([^{}]*)\}")
GENERIC_PATTERN = re.compile(r"[0-9]+")


class SymbolKind(Enum):
    """The kinds of mana symbol."""

    GENERIC = "generic"
    COLORED = "colored"
    COLORLESS = "colorless"
    VARIABLE = "variable"
    HYBRID = "hybrid"
    MONO_HYBRID = "mono_hybrid"
    PHYREXIAN = "phyrexian"
    SNOW = "snow"


_MANA_VALUES = {
    SymbolKind.COLORED: 1,
    SymbolKind.COLORLESS: 1,
    SymbolKind.VARIABLE: 0,
    SymbolKind.HYBRID: 1,
    SymbolKind.MONO_HYBRID: 2,
    SymbolKind.PHYREXIAN: 1,
    SymbolKind.SNOW: 1,
}

_FIXED_BODIES = {
    "C": SymbolKind.COLORLESS,
    "X": SymbolKind.VARIABLE,
    "S": SymbolKind.SNOW,
}

_COLORED_KINDS = frozenset(
    {
        SymbolKind.COLORED,
        SymbolKind.HYBRID,
        SymbolKind.MONO_HYBRID,
        SymbolKind.PHYREXIAN,
    }
)


@dataclass(frozen=True)
class ManaSymbol:
    """
    Immutable value object representing one mana symbol.

    Supported symbols:
    - Generic mana: {0}, {1}, {2}, ...
    - Colored mana: {W}, {U}, {B}, {R}, {G}
    - Colorless mana: {C}
    - Variable costs: {X}
    - Hybrid costs: {W/U}, {R/G}, ... (stored in color pie order)
    - Mono-hybrid costs: {W/2}, ...
    - Phyrexian mana: {W/P}, ...
    - Snow mana: {S}

    Build symbols through the classmethod constructors rather than the
    dataclass fields directly.
    """

    kind: SymbolKind
    amount: int = 0
    color: Optional[Color] = None
    second_color: Optional[Color] = None

    def __post_init__(self):
        """Validate the fields for the symbol kind and canonicalize hybrids."""
        if self.kind is SymbolKind.GENERIC:
            amount = self.amount
            if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                raise ValueError(f"Generic mana must be a non-negative integer: {self.amount!r}")
        elif self.amount:
            raise ValueError(f"Only generic mana carries an amount, not {self.kind.value}")

        if self.kind in _COLORED_KINDS:
            if not isinstance(self.color, Color):
                raise ValueError(f"{self.kind.value} mana needs a color")
        elif self.color is not None:
            raise ValueError(f"{self.kind.value} mana has no color")

        if self.kind is SymbolKind.HYBRID:
            if not isinstance(self.second_color, Color):
                raise ValueError("Hybrid mana needs two colors")
            if self.second_color is self.color:
                raise ValueError(f"Hybrid mana needs two distinct colors, got {self.color.name} twice")
            first, second = Color.color_pie_order(self.color, self.second_color)
            object.__setattr__(self, "color", first)
            object.__setattr__(self, "second_color", second)
        elif self.second_color is not None:
            raise ValueError(f"{self.kind.value} mana has a single color")

    @classmethod
    def generic(cls, amount: int) -> "ManaSymbol":
        return cls(SymbolKind.GENERIC, amount=amount)

    @classmethod
    def colored(cls, color: Color) -> "ManaSymbol":
        return cls(SymbolKind.COLORED, color=color)

    @classmethod
    def colorless(cls) -> "ManaSymbol":
        return cls(SymbolKind.COLORLESS)

    @classmethod
    def variable(cls) -> "ManaSymbol":
        return cls(SymbolKind.VARIABLE)

    @classmethod
    def hybrid(cls, color1: Color, color2: Color) -> "ManaSymbol":
        """Create a two-color hybrid symbol; argument order does not matter."""
        return cls(SymbolKind.HYBRID, color=color1, second_color=color2)

    @classmethod
    def mono_hybrid(cls, color: Color) -> "ManaSymbol":
        return cls(SymbolKind.MONO_HYBRID, color=color)

    @classmethod
    def phyrexian(cls, color: Color) -> "ManaSymbol":
        return cls(SymbolKind.PHYREXIAN, color=color)

    @classmethod
    def snow(cls) -> "ManaSymbol":
        return cls(SymbolKind.SNOW)

    @classmethod
    def parse(cls, text: str) -> "ManaSymbol":
        """
        Parse a single bracketed symbol such as ``"{2}"`` or ``"{G/U}"``.

        Raises:
            ManaCostReadError: if the text is not exactly one known symbol.
        """
        match = SYMBOL_PATTERN.fullmatch(text.strip())
        if not match:
            raise ManaCostReadError(f"Not a mana symbol: {text!r}")
        return cls.from_body(match.group(1))

    @classmethod
    def from_body(cls, body: str) -> "ManaSymbol":
        """
        Parse the text between the braces of a symbol.

        Hybrid bodies are accepted in either orientation. Mono-hybrid is
        accepted both as ``W/2`` and in the ``2/W`` form used by card
        catalogs.
        """
        if GENERIC_PATTERN.fullmatch(body):
            return cls.generic(int(body))
        if body in _FIXED_BODIES:
            return cls(_FIXED_BODIES[body])

        try:
            if len(body) == 1:
                return cls.colored(Color.from_initial(body))

            left, slash, right = body.partition("/")
            if slash and len(left) == 1 and len(right) == 1:
                if right == "P":
                    return cls.phyrexian(Color.from_initial(left))
                if right == "2":
                    return cls.mono_hybrid(Color.from_initial(left))
                if left == "2":
                    return cls.mono_hybrid(Color.from_initial(right))
                return cls.hybrid(Color.from_initial(left), Color.from_initial(right))
        except ValueError as e:
            raise ManaCostReadError(f"Unknown mana symbol: {{{body}}}") from e

        raise ManaCostReadError(f"Unknown mana symbol: {{{body}}}")

    @property
    def mana_value(self) -> int:
        """Contribution of this symbol to a cost's mana value."""
        if self.kind is SymbolKind.GENERIC:
            return self.amount
        return _MANA_VALUES[self.kind]

    @property
    def colors(self) -> Tuple[Color, ...]:
        """Colors this symbol can be paid with, in stored order."""
        if self.kind is SymbolKind.HYBRID:
            return (self.color, self.second_color)
        if self.color is not None:
            return (self.color,)
        return ()

    @property
    def body(self) -> str:
        """The symbol text without braces."""
        if self.kind is SymbolKind.GENERIC:
            return str(self.amount)
        if self.kind is SymbolKind.COLORED:
            return self.color.initial
        if self.kind is SymbolKind.HYBRID:
            return f"{self.color.initial}/{self.second_color.initial}"
        if self.kind is SymbolKind.MONO_HYBRID:
            return f"{self.color.initial}/2"
        if self.kind is SymbolKind.PHYREXIAN:
            return f"{self.color.initial}/P"
        for body, kind in _FIXED_BODIES.items():
            if kind is self.kind:
                return body
        raise AssertionError(f"Unhandled mana symbol kind: {self.kind}")

    def __str__(self) -> str:
        return f"{{{self.body}}}"

    def __repr__(self) -> str:
        return f"ManaSymbol('{self}')"
