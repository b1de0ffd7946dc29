"""Encoding pipeline: numbers to a single ID string."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from ..domain.models import CodecState
from ..utils.constants import MAX_NUMBER
from ..utils.errors import BlocklistMaxAttempts, NumberOutOfRange
from ..utils.logging import get_logger
from .blocklist import is_blocked
from .digits import to_digits
from .shuffle import shuffle

LOG = get_logger()


def check_numbers(numbers: Sequence[int]) -> None:
    for value in numbers:
        if isinstance(value, bool) or not isinstance(value, int):
            raise NumberOutOfRange(f"expected an integer, got {value!r}")
        if not 0 <= value <= MAX_NUMBER:
            raise NumberOutOfRange(f"encoding supports numbers between 0 and {MAX_NUMBER} (got {value})")


def numbers_offset(alphabet: str, numbers: Sequence[int]) -> int:
    """Content-dependent starting rotation of ``alphabet`` for ``numbers``."""

    length = len(alphabet)
    acc = len(numbers)
    for index, value in enumerate(numbers):
        acc += ord(alphabet[value % length]) + index
    return acc % length


def working_alphabet(alphabet: str, offset: int) -> Tuple[str, str]:
    """Return ``(prefix, working)`` for a rotation starting at ``offset``.

    The prefix is the first character of the rotation; the working alphabet is
    the rotation reversed, so its first character is never the prefix.
    """

    rotated = alphabet[offset:] + alphabet[:offset]
    return rotated[0], rotated[::-1]


def _pad(candidate: str, working: str, min_length: int) -> str:
    candidate += working[0]
    while len(candidate) < min_length:
        working = shuffle(working)
        candidate += working[: min_length - len(candidate)]
    return candidate


def build_id(state: CodecState, numbers: Sequence[int], increment: int = 0) -> str:
    """Produce the ID for ``numbers`` at a given retry ``increment``, unchecked."""

    alphabet = state.alphabet
    offset = (numbers_offset(alphabet, numbers) + increment) % len(alphabet)
    prefix, working = working_alphabet(alphabet, offset)

    parts: List[str] = [prefix]
    last = len(numbers) - 1
    for index, value in enumerate(numbers):
        parts.append(to_digits(value, working[1:]))
        if index < last:
            parts.append(working[0])
            working = shuffle(working)

    candidate = "".join(parts)
    if len(candidate) < state.min_length:
        candidate = _pad(candidate, working, state.min_length)
    return candidate


def encode_numbers(state: CodecState, numbers: Sequence[int]) -> str:
    """Encode ``numbers``, retrying with a shifted offset while the ID is blocked.

    At most ``len(alphabet) + 1`` candidates are tried before
    :class:`BlocklistMaxAttempts` is raised.
    """

    if not numbers:
        return ""
    check_numbers(numbers)

    for increment in range(len(state.alphabet) + 1):
        candidate = build_id(state, numbers, increment)
        if not is_blocked(candidate, state.blocklist):
            return candidate
        LOG.debug("blocked id %r (increment=%d), retrying", candidate, increment)

    LOG.error("[ENC] no unblocked id after %d attempts for %d number(s)", len(state.alphabet) + 1, len(numbers))
    raise BlocklistMaxAttempts()


__all__ = ["check_numbers", "numbers_offset", "working_alphabet", "build_id", "encode_numbers"]
