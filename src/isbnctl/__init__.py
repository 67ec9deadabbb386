"""isbnctl — ISBN validation, conversion, and formatting."""

from isbnctl.domain.errors import (
    BooklandError,
    CheckDigitError,
    ErrorKind,
    ISBNError,
    ISBNFormatError,
    RangeError,
)
from isbnctl.domain.isbn import ISBN, is_valid

__version__ = "0.1.0"

__all__ = [
    "ISBN",
    "BooklandError",
    "CheckDigitError",
    "ErrorKind",
    "ISBNError",
    "ISBNFormatError",
    "RangeError",
    "__version__",
    "is_valid",
]
