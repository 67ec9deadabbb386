"""The ISBN identifier type.

Stores, checks, and converts ISBNs in ISBN10 and ISBN13 form, and renders
them hyphenated, as RFC 2288 URNs, or DOI-style. The internal encoding is
always the 13-digit form.

INVARIANT: an ISBN instance is fully validated. There is no way to build a
partially-initialized one, and its state never changes after construction.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from isbnctl.domain.checksum import check10, check13, digit10
from isbnctl.domain.errors import (
    BooklandError,
    CheckDigitError,
    ISBNError,
    ISBNFormatError,
    RangeError,
)
from isbnctl.domain.ranges import default_range_table
from isbnctl.domain.segments import RangeSegmenter, Segments

logger = logging.getLogger(__name__)

BOOKLAND_PREFIXES: frozenset[str] = frozenset({"978", "979"})
ISBN10_PREFIX = "978"
URN_PREFIX = "URN:ISBN:"

# 9 digits each optionally followed by a separator, then either the ISBN10
# check unit or 3 more separated digits and a final digit.
_SHAPE = re.compile(r"(?:[0-9][- ]?){9}(?:[0-9Xx]|(?:[0-9][- ]?){3}[0-9])")
_NOT_ISBN_CHAR = re.compile(r"[^0-9X]")


def normalize(raw: Any) -> str:
    """Validate the shape of *raw* and strip it down to digits and ``X``.

    Returns a string of length 10 or 13.

    Raises:
        ISBNFormatError: *raw* is not an ASCII string shaped like an ISBN.
    """
    if not isinstance(raw, str) or not raw.isascii() or _SHAPE.fullmatch(raw) is None:
        raise ISBNFormatError(f"Not an ISBN10 or ISBN13 encoding: {raw!r}")
    return _NOT_ISBN_CHAR.sub("", raw.upper())


def canonicalize(raw: Any) -> str:
    """Return the canonical 13-digit form of *raw*, or raise an ISBNError."""
    nid = normalize(raw)

    if len(nid) == 13:
        if nid[:3] not in BOOKLAND_PREFIXES:
            raise BooklandError(f"Bookland prefix must be 978 or 979: {nid[:3]}")
        if nid[12] != check13(nid):
            raise CheckDigitError(f"Invalid ISBN13 check digit: {nid}")
        return nid

    if len(nid) == 10:
        if nid[9] != check10(nid):
            raise CheckDigitError(f"Invalid ISBN10 check digit: {nid}")
        body = ISBN10_PREFIX + nid[:9]
        return body + check13(body)

    raise AssertionError(f"normalize() returned {len(nid)} characters")


class ISBN:
    """A validated ISBN, stored in canonical 13-digit form.

    Usage::

        isbn = ISBN("0-12-345672-X")
        isbn.to13()    # "9780123456724"
        isbn.hyphen()  # "978-0-12-345672-4"

    Args:
        raw: ISBN10 or ISBN13 string; digits may be separated by single
            hyphens or spaces.
        segmenter: Range segmenter used by :meth:`hyphen` and :meth:`doi`.
            Defaults to the packaged range table.

    Raises:
        ISBNFormatError, CheckDigitError, BooklandError
    """

    __slots__ = ("_id", "_segmenter")

    def __init__(self, raw: str, *, segmenter: RangeSegmenter | None = None) -> None:
        self._id = canonicalize(raw)
        self._segmenter = segmenter

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ISBN):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"ISBN({self._id!r})"

    @property
    def prefix(self) -> str:
        """EAN Bookland prefix (``978`` or ``979``)."""
        return self._id[:3]

    # ------------------------------------------------------------------
    # Encodings
    # ------------------------------------------------------------------

    def to10(self) -> str:
        """Return the ISBN10 encoding.

        Raises:
            BooklandError: ISBN10 is only defined for the 978 prefix.
        """
        if self.prefix != ISBN10_PREFIX:
            raise BooklandError(f"No ISBN10 form for prefix {self.prefix}: {self._id}")
        body = self._id[3:12]
        return body + check10(body)

    def to13(self) -> str:
        """Return the ISBN13 encoding. Never fails."""
        return self._id

    def urn(self) -> str:
        """RFC 2288 URN encoding."""
        return URN_PREFIX + self._id

    def hyphen(self) -> str:
        """Return the hyphenated ISBN13.

        Raises:
            RangeError: the number is not in a registered range.
        """
        grp, reg, pbl = self._segments()
        nid = self._id
        return "-".join(
            [nid[:3], nid[3 : 3 + grp], nid[3 + grp : 3 + grp + reg], nid[12 - pbl : 12], nid[12]]
        )

    def doi(self) -> str:
        """Return the DOI-style form ``10.<prefix>.<group+registrant>/<publication+check>``.

        Raises:
            RangeError: the number is not in a registered range.
        """
        grp, reg, pbl = self._segments()
        nid = self._id
        return f"10.{nid[:3]}.{nid[3 : 3 + grp + reg]}/{nid[12 - pbl :]}"

    def _segments(self) -> Segments:
        segmenter = default_range_table() if self._segmenter is None else self._segmenter
        split = Segments(*segmenter.segments(self._id))
        if not split.registered:
            raise RangeError(f"ISBN is outside every registered range: {self._id}")
        return split

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def is_valid(raw: Any) -> bool:
        """Return whether *raw* is a valid ISBN. Never raises."""
        try:
            canonicalize(raw)
        except ISBNError as exc:
            logger.debug("Rejected %r: %s", raw, exc.kind)
            return False
        return True


def is_valid(raw: Any) -> bool:
    """Module-level alias for :meth:`ISBN.is_valid`."""
    return ISBN.is_valid(raw)
