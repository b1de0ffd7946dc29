"""Domain models for codec configuration and immutable codec state."""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from ..utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH
from ..utils.errors import InvalidConfigurationError


def _freeze_words(words: Iterable[str]) -> FrozenSet[str]:
    if isinstance(words, (str, bytes)):
        raise InvalidConfigurationError(f"blocklist must be a collection of words, not {type(words).__name__}")
    frozen = frozenset(words)
    bad = [word for word in frozen if not isinstance(word, str)]
    if bad:
        raise InvalidConfigurationError(f"blocklist entries must be strings (got {bad[0]!r})")
    return frozen


@dataclass(frozen=True)
class CodecOptions:
    """Construction-time configuration.

    ``blocklist=None`` selects the default word list; pass an empty
    collection to disable blocking altogether. Any other collection is
    stored as a ``frozenset``, so options stay hashable.
    """

    alphabet: str = DEFAULT_ALPHABET
    min_length: int = DEFAULT_MIN_LENGTH
    blocklist: Optional[FrozenSet[str]] = None

    def __post_init__(self) -> None:
        if self.blocklist is not None:
            object.__setattr__(self, "blocklist", _freeze_words(self.blocklist))


@dataclass(frozen=True)
class CodecState:
    """Validated, read-only inputs shared by every encode and decode call."""

    alphabet: str
    min_length: int
    blocklist: FrozenSet[str]


__all__ = ["CodecOptions", "CodecState"]
