"""Range segmentation contract.

A segmenter splits the 9-digit body of a canonical ISBN13 (the digits
between the EAN prefix and the check digit) into registration group,
registrant, and publication lengths.

INVARIANT: a registered split always sums to 9.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable


class Segments(NamedTuple):
    """Field widths of an ISBN body."""

    group: int
    registrant: int
    publication: int

    @property
    def registered(self) -> bool:
        return self.group != 0


UNREGISTERED = Segments(0, 0, 0)


@runtime_checkable
class RangeSegmenter(Protocol):
    """Anything that can split a canonical ISBN13 into field widths."""

    def segments(self, canonical13: str) -> Segments:
        """Return the split, or :data:`UNREGISTERED` when no range matches."""
        ...
