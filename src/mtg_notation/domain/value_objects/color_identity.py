"""Value object for a set of Magic: The Gathering colors."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List

from mtg_notation.domain.enums.color import Color
from mtg_notation.exceptions import ColorReadError

if TYPE_CHECKING:
    from .mana_cost import ManaCost

COLORLESS_SYMBOL = "C"
_ALL_BITS = (1 << len(Color)) - 1


@dataclass
class ColorIdentity:
    """
    A set of colors stored as a five-bit mask.

    Bit ``i`` is set when the color with ordinal ``i`` is present, so
    iteration and rendering always follow WUBRG order regardless of the
    order colors were added in. An empty identity is colorless and renders
    as ``"C"``.
    """

    bits: int = 0

    def __post_init__(self):
        """Reject masks with bits outside the five colors."""
        if not isinstance(self.bits, int) or self.bits & ~_ALL_BITS:
            raise ValueError(f"Invalid color identity bits: {self.bits!r}")

    @classmethod
    def from_colors(cls, *colors: Color) -> "ColorIdentity":
        """Create a ColorIdentity holding the given colors."""
        identity = cls()
        for color in colors:
            identity.add(color)
        return identity

    @classmethod
    def from_mana_cost(cls, mana_cost: "ManaCost") -> "ColorIdentity":
        """
        Collect the colors of every symbol in a mana cost.

        Colored, hybrid, mono-hybrid and Phyrexian symbols contribute their
        colors; generic, colorless, variable and snow symbols contribute
        nothing.
        """
        identity = cls()
        for symbol in mana_cost:
            for color in symbol.colors:
                identity.add(color)
        return identity

    @classmethod
    def parse(cls, text: str) -> "ColorIdentity":
        """
        Parse color identity text such as ``"WG"`` or ``"C"``.

        Initials may appear in any order; repeated initials are ignored.

        Raises:
            ColorReadError: if the text contains anything but color initials.
        """
        text = text.strip()
        if not text:
            raise ColorReadError("Empty color identity")
        if text == COLORLESS_SYMBOL:
            return cls()

        identity = cls()
        for letter in text:
            try:
                identity.add(Color.from_initial(letter))
            except ValueError:
                raise ColorReadError(
                    f"Invalid color symbol {letter!r} in {text!r}"
                ) from None
        return identity

    def add(self, color: Color) -> None:
        self.bits |= 1 << color.ordinal

    def remove(self, color: Color) -> None:
        self.bits &= ~(1 << color.ordinal)

    def has(self, color: Color) -> bool:
        return bool(self.bits & (1 << color.ordinal))

    @property
    def is_colorless(self) -> bool:
        return self.bits == 0

    @property
    def is_monocolored(self) -> bool:
        return len(self) == 1

    @property
    def is_multicolored(self) -> bool:
        return len(self) >= 2

    def colors(self) -> List[Color]:
        """Return the present colors in WUBRG order."""
        return [color for color in Color if self.has(color)]

    def copy(self) -> "ColorIdentity":
        return ColorIdentity(self.bits)

    def __str__(self) -> str:
        """Return the initials in WUBRG order, or "C" when colorless."""
        if self.is_colorless:
            return COLORLESS_SYMBOL
        return "".join(color.initial for color in self)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors())

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __contains__(self, color: object) -> bool:
        return isinstance(color, Color) and self.has(color)

    def __or__(self, other: "ColorIdentity") -> "ColorIdentity":
        """Union operator (|)."""
        if not isinstance(other, ColorIdentity):
            return NotImplemented
        return ColorIdentity(self.bits | other.bits)

    def update(self, colors: Iterable[Color]) -> None:
        for color in colors:
            self.add(color)
