"""Validation and canonicalisation of user supplied alphabets."""
from __future__ import annotations

from ..utils.constants import MIN_ALPHABET_LENGTH
from ..utils.errors import AlphabetLength, AlphabetMultibyteCharacters, AlphabetUniqueCharacters
from .shuffle import shuffle


def validate_alphabet(alphabet: str) -> None:
    """Raise the matching :class:`AlphabetError` when ``alphabet`` is unusable.

    Checks run in a fixed order: multibyte characters, length, duplicates.
    """

    if any(ord(char) > 127 for char in alphabet):
        raise AlphabetMultibyteCharacters()
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise AlphabetLength()
    if len(set(alphabet)) != len(alphabet):
        raise AlphabetUniqueCharacters()


def canonical_alphabet(alphabet: str) -> str:
    """Validate ``alphabet`` and return the shuffled form used for encoding."""

    validate_alphabet(alphabet)
    return shuffle(alphabet)


__all__ = ["validate_alphabet", "canonical_alphabet"]
