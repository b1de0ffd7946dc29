"""Exception hierarchy shared across the codec."""
from __future__ import annotations


class CodecError(Exception):
    """Base class for all codec related failures."""


class AlphabetError(CodecError):
    """Raised while validating a candidate alphabet."""


class AlphabetMultibyteCharacters(AlphabetError):
    def __init__(self, message: str = "Alphabet cannot contain multibyte characters") -> None:
        super().__init__(message)


class AlphabetLength(AlphabetError):
    def __init__(self, message: str = "Alphabet length must be at least 3") -> None:
        super().__init__(message)


class AlphabetUniqueCharacters(AlphabetError):
    def __init__(self, message: str = "Alphabet must contain unique characters") -> None:
        super().__init__(message)


class InvalidConfigurationError(CodecError):
    pass


class MinLengthOutOfRange(InvalidConfigurationError):
    pass


class BlocklistMaxAttempts(CodecError):
    def __init__(self, message: str = "Reached max attempts to re-generate the ID") -> None:
        super().__init__(message)


class NumberOutOfRange(CodecError, ValueError):
    pass


class BlocklistFileNotFound(CodecError):
    pass


class BlocklistValidationError(CodecError):
    pass
