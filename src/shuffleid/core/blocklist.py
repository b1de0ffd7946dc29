"""Blocklist filtering and matching."""
from __future__ import annotations

from typing import FrozenSet, Iterable

from ..utils.constants import MIN_BLOCKLIST_WORD_LENGTH


def filter_blocklist(words: Iterable[str], alphabet: str) -> FrozenSet[str]:
    """Keep the lowercased words that could ever appear in an ID over ``alphabet``."""

    lowercase_alphabet = set(alphabet.lower())
    filtered = set()
    for word in words:
        lowered = word.lower()
        if len(lowered) < MIN_BLOCKLIST_WORD_LENGTH:
            continue
        if all(char in lowercase_alphabet for char in lowered):
            filtered.add(lowered)
    return frozenset(filtered)


def _has_ascii_digit(word: str) -> bool:
    return any(char in "0123456789" for char in word)


def is_blocked(candidate: str, blocklist: Iterable[str]) -> bool:
    """Return ``True`` when ``candidate`` equals or contains a blocked word.

    Short IDs and short words only match exactly. Words containing digits
    only match at either end of the ID. Everything else matches as a
    substring.
    """

    lowered = candidate.lower()
    for word in blocklist:
        if len(word) > len(lowered):
            continue
        if len(lowered) <= 3 or len(word) <= 3:
            if lowered == word:
                return True
        elif _has_ascii_digit(word):
            if lowered.startswith(word) or lowered.endswith(word):
                return True
        elif word in lowered:
            return True
    return False


__all__ = ["filter_blocklist", "is_blocked"]
