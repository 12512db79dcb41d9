"""Card face model holding parsed notation values."""

import logging
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator, field_validator, model_validator

from mtg_notation.config import settings
from mtg_notation.domain.enums import CardType
from mtg_notation.domain.value_objects import ColorIdentity, ManaCost, TypeLine

logger = logging.getLogger(__name__)


def _read_mana_cost(value: Any) -> ManaCost:
    if value is None:
        return ManaCost()
    if isinstance(value, str):
        return ManaCost.parse(value)
    if isinstance(value, ManaCost):
        return value
    raise ValueError(f"Expected mana cost text, got {type(value).__name__}")


def _read_type_line(value: Any) -> TypeLine:
    if isinstance(value, str):
        return TypeLine.parse(value)
    if isinstance(value, TypeLine):
        return value
    raise ValueError(f"Expected type line text, got {type(value).__name__}")


def _read_color_identity(value: Any) -> ColorIdentity:
    if isinstance(value, str):
        return ColorIdentity.parse(value)
    if isinstance(value, ColorIdentity):
        return value
    raise ValueError(f"Expected color identity text, got {type(value).__name__}")


# Fields read from and written back to their text forms
ManaCostField = Annotated[
    ManaCost, PlainValidator(_read_mana_cost), PlainSerializer(str, return_type=str)
]
TypeLineField = Annotated[
    TypeLine, PlainValidator(_read_type_line), PlainSerializer(str, return_type=str)
]
ColorIdentityField = Annotated[
    ColorIdentity,
    PlainValidator(_read_color_identity),
    PlainSerializer(str, return_type=str),
]


class CardFace(BaseModel):
    """One face of a Magic: The Gathering card.

    ``mana_cost``, ``type_line`` and ``color_indicator`` accept either the
    parsed value objects or their text forms, and serialize back to text.
    """

    name: str = Field(..., min_length=1)
    mana_cost: ManaCostField = Field(default_factory=ManaCost)
    type_line: TypeLineField
    color_indicator: Optional[ColorIdentityField] = None
    power: Optional[str] = Field(None, pattern=r"^[0-9*+\-]+$")
    toughness: Optional[str] = Field(None, pattern=r"^[0-9*+\-]+$")
    loyalty: Optional[int] = Field(None, ge=0)

    @field_validator("power", "toughness", mode="before")
    @classmethod
    def stringify_stat(cls, v: Any) -> Any:
        """Accept integer power and toughness values."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @model_validator(mode="after")
    def check_strict_type_line(self) -> "CardFace":
        if settings.strict_type_lines:
            self.validate_type_line()
        return self

    def validate_type_line(self) -> None:
        """Raise ValueError if the type line breaks subtype compatibility."""
        if not self.type_line.types:
            raise ValueError(f"{self.name}: type line has no card types")

        invalid = self.type_line.invalid_subtypes()
        if invalid:
            names = ", ".join(str(subtype) for subtype in invalid)
            raise ValueError(f"{self.name}: subtypes not allowed for {self.type_line}: {names}")

    @property
    def mana_value(self) -> int:
        return self.mana_cost.mana_value

    @property
    def colors(self) -> ColorIdentity:
        """The color indicator if present, otherwise the mana cost's colors."""
        if self.color_indicator is not None:
            return self.color_indicator.copy()
        return self.mana_cost.colors

    @property
    def is_creature(self) -> bool:
        return self.type_line.has_type(CardType.CREATURE)

    def to_dict(self) -> dict:
        """Convert the card face to a dictionary of text fields."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict) -> "CardFace":
        """Create a card face from a dictionary."""
        logger.debug(f"Reading card face: {data.get('name')}")
        return cls(**data)

    def __str__(self) -> str:
        """Return a string representation of the card face."""
        result = f"{self.name} {self.mana_cost}".rstrip() + "\n"
        result += str(self.type_line)
        if self.power is not None and self.toughness is not None:
            result += f" {self.power}/{self.toughness}"
        if self.loyalty is not None:
            result += f" [{self.loyalty}]"
        return result
