"""ISBN error taxonomy.

Four kinds, each terminal:
- FORMAT: the raw string is not shaped like an ISBN10 or ISBN13.
- CHECK_DIGIT: the check character does not match the computed one.
- BOOKLAND: EAN prefix is not 978/979, or ISBN10 requested for a 979 number.
- RANGE: the number is outside every registered agency range.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Kind of ISBN failure."""

    FORMAT = "format"
    CHECK_DIGIT = "check_digit"
    BOOKLAND = "bookland"
    RANGE = "range"


class ISBNError(ValueError):
    """Base class for all ISBN failures. Carries only its :attr:`kind`."""

    kind: ClassVar[ErrorKind]

    @property
    def code(self) -> str:
        """Upper-case error code used by the service layer."""
        return self.kind.upper()


class ISBNFormatError(ISBNError):
    """String doesn't form a valid ISBN10 or ISBN13 encoding."""

    kind = ErrorKind.FORMAT


class CheckDigitError(ISBNError):
    """ISBN check digit is not valid."""

    kind = ErrorKind.CHECK_DIGIT


class BooklandError(ISBNError):
    """Bookland prefix is not 978/979, or is 979 when converting to ISBN10."""

    kind = ErrorKind.BOOKLAND


class RangeError(ISBNError):
    """ISBN doesn't belong to any registered agency range."""

    kind = ErrorKind.RANGE
