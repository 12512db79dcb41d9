"""Value object for Magic: The Gathering mana costs."""

from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, NamedTuple, Optional, Tuple, Union

from mtg_notation.domain.enums.color import Color
from mtg_notation.exceptions import ManaCostReadError

from .color_identity import ColorIdentity
from .mana_symbol import SYMBOL_PATTERN, ManaSymbol, SymbolKind


class ManaCostSignature(NamedTuple):
    """Order-independent summary of a mana cost.

    Two costs are equivalent exactly when their signatures are equal. The
    mappings are stored as frozensets of ``(key, count)`` pairs so the
    signature is hashable.
    """

    generic: int
    variable: int
    snow: int
    colors: FrozenSet[Tuple[Optional[Color], int]]
    hybrids: FrozenSet[Tuple[Tuple[Color, Color], int]]
    mono_hybrids: FrozenSet[Tuple[Color, int]]
    phyrexian: FrozenSet[Tuple[Color, int]]


def cost_signature(symbols: Iterable[ManaSymbol]) -> ManaCostSignature:
    """
    Fold a sequence of symbols into its canonical signature.

    Generic symbols are summed, so ``{2}{3}`` and ``{5}`` share a signature.
    Colored and colorless symbols are counted together, keyed by color with
    ``None`` for colorless. Hybrid pairs are keyed in color pie order and
    counted apart from mono-hybrid and Phyrexian symbols.
    """
    generic = variable = snow = 0
    colors: Counter = Counter()
    hybrids: Counter = Counter()
    mono_hybrids: Counter = Counter()
    phyrexian: Counter = Counter()

    for symbol in symbols:
        kind = symbol.kind
        if kind is SymbolKind.GENERIC:
            generic += symbol.amount
        elif kind is SymbolKind.VARIABLE:
            variable += 1
        elif kind is SymbolKind.SNOW:
            snow += 1
        elif kind is SymbolKind.COLORED:
            colors[symbol.color] += 1
        elif kind is SymbolKind.COLORLESS:
            colors[None] += 1
        elif kind is SymbolKind.HYBRID:
            hybrids[Color.color_pie_order(symbol.color, symbol.second_color)] += 1
        elif kind is SymbolKind.MONO_HYBRID:
            mono_hybrids[symbol.color] += 1
        elif kind is SymbolKind.PHYREXIAN:
            phyrexian[symbol.color] += 1

    return ManaCostSignature(
        generic=generic,
        variable=variable,
        snow=snow,
        colors=frozenset(colors.items()),
        hybrids=frozenset(hybrids.items()),
        mono_hybrids=frozenset(mono_hybrids.items()),
        phyrexian=frozenset(phyrexian.items()),
    )


@dataclass(frozen=True, eq=False)
class ManaCost:
    """
    Immutable value object representing a Magic: The Gathering mana cost.

    Symbols keep the order they were given in, which is the order they
    render in. Equality ignores that order: two costs are equal when their
    ``signature`` matches, so ``{G}{1}`` equals ``{1}{G}`` even though the
    two render differently.
    """

    symbols: Tuple[ManaSymbol, ...] = ()

    def __post_init__(self):
        """Store the symbols as a tuple."""
        if not isinstance(self.symbols, tuple):
            object.__setattr__(self, "symbols", tuple(self.symbols))

        for symbol in self.symbols:
            if not isinstance(symbol, ManaSymbol):
                raise TypeError(f"Expected ManaSymbol, got {type(symbol).__name__}")

    @classmethod
    def from_symbols(cls, symbols: Iterable[ManaSymbol]) -> "ManaCost":
        return cls(tuple(symbols))

    @classmethod
    def parse(cls, mana_string: str) -> "ManaCost":
        """
        Parse mana cost text such as ``"{5}{C}{G}{W/B}"``.

        Surrounding whitespace is ignored; anything between or around the
        bracketed symbols is not.

        Raises:
            ManaCostReadError: on text outside braces or an unknown symbol.
        """
        text = mana_string.strip()
        symbols = []
        position = 0

        for match in SYMBOL_PATTERN.finditer(text):
            if match.start() != position:
                break
            symbols.append(ManaSymbol.from_body(match.group(1)))
            position = match.end()

        if position != len(text):
            raise ManaCostReadError(
                f"Invalid mana cost format: {mana_string!r} (at {text[position:]!r})"
            )

        return cls(tuple(symbols))

    from_string = parse

    @property
    def signature(self) -> ManaCostSignature:
        return cost_signature(self.symbols)

    @property
    def mana_value(self) -> int:
        """
        Calculate the mana value (converted mana cost).

        Generic symbols add their amount, X adds nothing, mono-hybrid adds
        2 and every other symbol adds 1.
        """
        return sum(symbol.mana_value for symbol in self.symbols)

    @property
    def converted_mana_cost(self) -> int:
        return self.mana_value

    @property
    def colors(self) -> ColorIdentity:
        """The colors appearing in this cost."""
        return ColorIdentity.from_mana_cost(self)

    @property
    def generic_mana(self) -> int:
        return self.signature.generic

    @property
    def has_x_cost(self) -> bool:
        return any(symbol.kind is SymbolKind.VARIABLE for symbol in self.symbols)

    @property
    def is_free(self) -> bool:
        """Check if this cost has no symbols at all."""
        return not self.symbols

    def equivalent_to(self, other: "ManaCost") -> bool:
        return self.signature == other.signature

    def render(self) -> str:
        """Concatenate the symbols in their original order."""
        return "".join(str(symbol) for symbol in self.symbols)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ManaCost('{self}', mana_value={self.mana_value})"

    def __iter__(self) -> Iterator[ManaSymbol]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __bool__(self) -> bool:
        return bool(self.symbols)

    def __add__(self, other: Union["ManaCost", str]) -> "ManaCost":
        """Concatenate two mana costs."""
        if isinstance(other, str):
            other = ManaCost.parse(other)
        elif not isinstance(other, ManaCost):
            raise TypeError("Can only add ManaCost to ManaCost or str")

        return ManaCost(self.symbols + other.symbols)

    def __eq__(self, other) -> bool:
        """Compare signatures, ignoring symbol order."""
        if not isinstance(other, ManaCost):
            return NotImplemented
        return self.equivalent_to(other)

    def __hash__(self) -> int:
        return hash(self.signature)
