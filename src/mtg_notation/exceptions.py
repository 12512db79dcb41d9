"""Errors raised when reading type line, mana and color notation."""


class NotationError(ValueError):
    """Base class for malformed notation text."""


class TypeLineReadError(NotationError):
    """A type line could not be read.

    Attributes:
        token: The part of the input that could not be placed.
    """

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class ExtraPartsError(TypeLineReadError):
    """A token does not belong to the category expected at its position."""

    def __init__(self, token: str) -> None:
        super().__init__(token, f"Unexpected part in type line: {token!r}")


class NotAnEmDashError(TypeLineReadError):
    """Subtypes were separated with something other than an em dash."""

    def __init__(self, token: str) -> None:
        super().__init__(
            token, f"Expected an em dash (—) before subtypes, found {token!r}"
        )


class ManaCostReadError(NotationError):
    """A mana symbol or mana cost could not be read."""


class ColorReadError(NotationError):
    """A color identity could not be read."""
