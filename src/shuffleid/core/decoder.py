"""Decoding pipeline: an ID string back to its numbers."""
from __future__ import annotations

from typing import List

from ..domain.models import CodecState
from ..utils.constants import MAX_NUMBER
from .digits import from_digits
from .encoder import working_alphabet
from .shuffle import shuffle


def decode_id(state: CodecState, id_: str) -> List[int]:
    """Recover the numbers encoded in ``id_``.

    Never raises. Unknown characters yield ``[]``; a malformed tail stops
    decoding and returns the numbers recovered so far.
    """

    numbers: List[int] = []
    if not id_:
        return numbers

    alphabet = state.alphabet
    if not set(id_) <= set(alphabet):
        return numbers

    offset = alphabet.index(id_[0])
    _, working = working_alphabet(alphabet, offset)

    remainder = id_[1:]
    while remainder:
        separator = working[0]
        chunks = remainder.split(separator)
        if not chunks[0]:
            return numbers

        value = from_digits(chunks[0], working[1:])
        if value > MAX_NUMBER:
            return numbers
        numbers.append(value)

        if len(chunks) > 1:
            working = shuffle(working)
        remainder = separator.join(chunks[1:])

    return numbers


__all__ = ["decode_id"]
