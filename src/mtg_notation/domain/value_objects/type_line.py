"""Type line value object: supertypes, card types and subtypes."""

from typing import Dict, Iterable, List, Tuple, TypeVar

from mtg_notation.domain.enums.card_types import CardType, Supertype
from mtg_notation.domain.enums.subtypes import Subtype, is_subtype, parse_subtype
from mtg_notation.exceptions import ExtraPartsError, NotAnEmDashError

EM_DASH = "—"

# Separators that are easily typed in place of the em dash.
_DASH_LOOKALIKES = frozenset({"-", "--", "–", "―", "‒"})

T = TypeVar("T")


def _insert(items: Dict[T, None], item: T) -> None:
    items.setdefault(item, None)


class TypeLine:
    """
    The type line of a card, e.g. "Legendary Enchantment Creature — God".

    Supertypes, types and subtypes are each kept as an ordered set: adding
    an element twice keeps its first position, and rendering follows
    insertion order. Equality ignores that order.

    Parsing only checks the grammar. Use ``is_valid()`` to also check that
    every subtype fits one of the card types present.
    """

    def __init__(self) -> None:
        self._supertypes: Dict[Supertype, None] = {}
        self._types: Dict[CardType, None] = {}
        self._subtypes: Dict[Subtype, None] = {}

    @classmethod
    def from_iters(
        cls,
        supertypes: Iterable[Supertype] = (),
        types: Iterable[CardType] = (),
        subtypes: Iterable[Subtype] = (),
    ) -> "TypeLine":
        type_line = cls()
        for supertype in supertypes:
            type_line.add_supertype(supertype)
        for card_type in types:
            type_line.add_type(card_type)
        for subtype in subtypes:
            type_line.add_subtype(subtype)
        return type_line

    @classmethod
    def parse(cls, text: str) -> "TypeLine":
        """
        Parse type line text.

        The grammar is ``supertype* type* ("—" subtype*)?`` with tokens
        separated by whitespace. Before the dash, supertypes are consumed
        first and types second. After the dash, the whole remainder is first
        tried as one subtype, which covers names with spaces such as
        "Bolas's Meditation Realm"; otherwise each word must be a subtype.

        Raises:
            ExtraPartsError: a token is not valid at its position, or the
                text holds a second em dash.
            NotAnEmDashError: subtypes are introduced by a hyphen or another
                dash character instead of an em dash.
        """
        type_line = cls()
        before_dash, dash, after_dash = text.partition(EM_DASH)

        if EM_DASH in after_dash:
            raise ExtraPartsError(EM_DASH)

        parts = before_dash.split()
        position = 0

        while position < len(parts):
            try:
                supertype = Supertype.from_string(parts[position])
            except ValueError:
                break
            type_line.add_supertype(supertype)
            position += 1

        while position < len(parts):
            try:
                card_type = CardType.from_string(parts[position])
            except ValueError:
                break
            type_line.add_type(card_type)
            position += 1

        if position < len(parts):
            token = parts[position]
            if token in _DASH_LOOKALIKES:
                raise NotAnEmDashError(token)
            raise ExtraPartsError(token)

        if dash:
            for subtype in cls._parse_subtypes(after_dash.strip()):
                type_line.add_subtype(subtype)

        return type_line

    from_string = parse

    @staticmethod
    def _parse_subtypes(text: str) -> List[Subtype]:
        try:
            return [parse_subtype(text)]
        except ValueError:
            pass

        subtypes = []
        for token in text.split():
            try:
                subtypes.append(parse_subtype(token))
            except ValueError:
                raise ExtraPartsError(token) from None
        return subtypes

    def add_supertype(self, supertype: Supertype) -> None:
        _insert(self._supertypes, supertype)

    def add_type(self, card_type: CardType) -> None:
        _insert(self._types, card_type)

    def add_subtype(self, subtype: Subtype) -> None:
        if not is_subtype(subtype):
            raise TypeError(f"Expected a subtype, got {subtype!r}")
        _insert(self._subtypes, subtype)

    def remove_supertype(self, supertype: Supertype) -> None:
        self._supertypes.pop(supertype, None)

    def remove_type(self, card_type: CardType) -> None:
        self._types.pop(card_type, None)

    def remove_subtype(self, subtype: Subtype) -> None:
        self._subtypes.pop(subtype, None)

    def has_supertype(self, supertype: Supertype) -> bool:
        return supertype in self._supertypes

    def has_type(self, card_type: CardType) -> bool:
        return card_type in self._types

    def has_subtype(self, subtype: Subtype) -> bool:
        return subtype in self._subtypes

    @property
    def supertypes(self) -> Tuple[Supertype, ...]:
        return tuple(self._supertypes)

    @property
    def types(self) -> Tuple[CardType, ...]:
        return tuple(self._types)

    @property
    def subtypes(self) -> Tuple[Subtype, ...]:
        return tuple(self._subtypes)

    def invalid_subtypes(self) -> List[Subtype]:
        """Subtypes that fit none of the card types present."""
        return [
            subtype
            for subtype in self._subtypes
            if not any(subtype.valid_for(card_type) for card_type in self._types)
        ]

    def is_valid(self) -> bool:
        """Check there is at least one type and every subtype fits a type."""
        return bool(self._types) and not self.invalid_subtypes()

    def copy(self) -> "TypeLine":
        return TypeLine.from_iters(self._supertypes, self._types, self._subtypes)

    def render(self) -> str:
        """Render the type line, e.g. "Basic Snow Land — Mountain"."""
        text = " ".join(str(part) for part in (*self._supertypes, *self._types))
        if self._subtypes:
            subtypes = " ".join(str(subtype) for subtype in self._subtypes)
            text = f"{text} {EM_DASH} {subtypes}"
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TypeLine('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypeLine):
            return NotImplemented
        return (
            self._supertypes.keys() == other._supertypes.keys()
            and self._types.keys() == other._types.keys()
            and self._subtypes.keys() == other._subtypes.keys()
        )

    __hash__ = None
