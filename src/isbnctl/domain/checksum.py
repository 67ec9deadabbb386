"""ISBN10 and ISBN13 check digit computation.

Both functions read only the digits they need (first 9 for ISBN10, first 12
for ISBN13), so a full identifier may be passed as-is.
"""

from __future__ import annotations


def digit10(body: str) -> int:
    """Return the ISBN10 check value (0-10) of the first 9 digits of *body*.

    The digit at position *i* (1-indexed from the left) is weighted by *i*,
    and the check value is the weighted sum mod 11.
    """
    return sum(i * int(d) for i, d in enumerate(body[:9], start=1)) % 11


def digit13(body: str) -> int:
    """Return the ISBN13 (EAN-13) check digit of the first 12 digits of *body*."""
    total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(body[:12]))
    return (10 - total % 10) % 10


def check10(body: str) -> str:
    """ISBN10 check character: ``"X"`` stands for 10."""
    value = digit10(body)
    return "X" if value == 10 else str(value)


def check13(body: str) -> str:
    """ISBN13 check character."""
    return str(digit13(body))
