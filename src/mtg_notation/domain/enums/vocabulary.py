"""Base enumeration for closed textual vocabularies."""

from enum import Enum


class Vocabulary(Enum):
    """Enumeration whose member values are the canonical printed names.

    The value table is used both for rendering and for parsing, so any
    member always survives a ``from_string(str(member))`` round trip.
    """

    def __str__(self) -> str:
        """Return the printed name."""
        return self.value

    @classmethod
    def from_string(cls, value: str):
        """Look up a member by its exact printed name."""
        if not isinstance(value, str):
            raise ValueError(f"Expected string, got {type(value)}")

        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid {cls.__name__}: {value!r}") from None
