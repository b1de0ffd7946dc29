"""Deterministic, content-seeded permutation of an alphabet."""
from __future__ import annotations


def shuffle(alphabet: str) -> str:
    """Return a permutation of ``alphabet`` derived only from its contents.

    Each position ``i`` is swapped with ``r = (i * j + ord(a[i]) + ord(a[j])) % n``
    where ``j`` mirrors ``i`` from the end. Swaps are applied in place, so
    later steps read characters already moved by earlier ones. The formula
    must not change: every compatible implementation produces the same IDs.
    """

    chars = list(alphabet)
    length = len(chars)
    for i in range(length - 1):
        j = length - 1 - i
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
    return "".join(chars)


__all__ = ["shuffle"]
