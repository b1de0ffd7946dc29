"""Base-N conversion over an arbitrary ordered digit alphabet."""
from __future__ import annotations


def to_digits(value: int, digits: str) -> str:
    """Render ``value`` using ``digits`` as the symbol for 0..len(digits)-1.

    Zero renders as ``digits[0]``; the result is never empty.
    """

    base = len(digits)
    out: list[str] = []
    while True:
        value, remainder = divmod(value, base)
        out.append(digits[remainder])
        if value == 0:
            break
    return "".join(reversed(out))


def from_digits(text: str, digits: str) -> int:
    """Inverse of :func:`to_digits`; every character must occur in ``digits``."""

    base = len(digits)
    result = 0
    for char in text:
        result = result * base + digits.index(char)
    return result


__all__ = ["to_digits", "from_digits"]
