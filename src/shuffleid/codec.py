"""Public codec: validated construction plus encode/decode entry points."""
from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Sequence

from .core.alphabet import canonical_alphabet
from .core.blocklist import filter_blocklist, is_blocked
from .core.decoder import decode_id
from .core.encoder import encode_numbers
from .domain.models import CodecOptions, CodecState
from .parser.blocklist_loader import default_blocklist
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, MIN_LENGTH_LIMIT
from .utils.errors import MinLengthOutOfRange


def build_state(options: CodecOptions) -> CodecState:
    """Validate ``options`` and derive the immutable codec state.

    Raises an :class:`AlphabetError` subclass or :class:`MinLengthOutOfRange`;
    nothing is built when validation fails.
    """

    min_length = options.min_length
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise MinLengthOutOfRange(f"min_length must be an integer (got {min_length!r})")
    if not 0 <= min_length <= MIN_LENGTH_LIMIT:
        raise MinLengthOutOfRange(f"min_length must be between 0 and {MIN_LENGTH_LIMIT} (got {min_length})")

    alphabet = canonical_alphabet(options.alphabet)
    words = default_blocklist() if options.blocklist is None else options.blocklist
    return CodecState(
        alphabet=alphabet,
        min_length=min_length,
        blocklist=filter_blocklist(words, options.alphabet),
    )


class IdCodec:
    """Encode integer sequences into short, non-sequential looking IDs.

    Instances are immutable once built and can be shared freely between
    threads.

    >>> codec = IdCodec()
    >>> codec.encode([1, 2, 3])
    '86Rf07'
    >>> codec.decode('86Rf07')
    [1, 2, 3]
    """

    __slots__ = ("_state",)

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Optional[Iterable[str]] = None,
    ) -> None:
        self._state = build_state(CodecOptions(alphabet=alphabet, min_length=min_length, blocklist=blocklist))

    @classmethod
    def from_options(cls, options: Optional[CodecOptions] = None) -> "IdCodec":
        options = options or CodecOptions()
        return cls(alphabet=options.alphabet, min_length=options.min_length, blocklist=options.blocklist)

    @property
    def state(self) -> CodecState:
        return self._state

    @property
    def alphabet(self) -> str:
        """The shuffled alphabet IDs are built from."""
        return self._state.alphabet

    @property
    def min_length(self) -> int:
        return self._state.min_length

    @property
    def blocklist(self) -> FrozenSet[str]:
        """Lowercased words kept after filtering against the alphabet."""
        return self._state.blocklist

    def encode(self, numbers: Sequence[int]) -> str:
        return encode_numbers(self._state, list(numbers))

    def decode(self, id_: str) -> List[int]:
        return decode_id(self._state, id_)

    def is_blocked(self, id_: str) -> bool:
        return is_blocked(id_, self._state.blocklist)

    def __repr__(self) -> str:
        return f"IdCodec(alphabet={self.alphabet!r}, min_length={self.min_length}, blocklist=<{len(self.blocklist)} words>)"


__all__ = ["IdCodec", "build_state"]
