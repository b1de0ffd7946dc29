"""Reversible encoding of integer sequences into short, shuffled IDs."""
from __future__ import annotations

from .codec import IdCodec, build_state
from .domain.models import CodecOptions, CodecState
from .parser.blocklist_loader import default_blocklist, load_blocklist
from .utils.errors import (
    AlphabetError,
    AlphabetLength,
    AlphabetMultibyteCharacters,
    AlphabetUniqueCharacters,
    BlocklistFileNotFound,
    BlocklistMaxAttempts,
    BlocklistValidationError,
    CodecError,
    InvalidConfigurationError,
    MinLengthOutOfRange,
    NumberOutOfRange,
)

__all__ = [
    "IdCodec",
    "build_state",
    "CodecOptions",
    "CodecState",
    "default_blocklist",
    "load_blocklist",
    "CodecError",
    "AlphabetError",
    "AlphabetLength",
    "AlphabetMultibyteCharacters",
    "AlphabetUniqueCharacters",
    "BlocklistFileNotFound",
    "BlocklistMaxAttempts",
    "BlocklistValidationError",
    "InvalidConfigurationError",
    "MinLengthOutOfRange",
    "NumberOutOfRange",
]
