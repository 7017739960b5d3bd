"""
Exceptions raised while decoding Bencoded data.
"""
__all__ = [
    "BencodeDecodeError",
    "StreamExhausted",
    "UnexpectedEndOfStream",
    "MalformedInteger",
    "MalformedLength",
    "NonStringDictionaryKey",
    "NestingTooDeep",
]


class BencodeDecodeError(ValueError):
    """Base exception for Bencode decoding errors."""

    def __init__(self, message: str, position: int = None):
        if position is not None:
            message = f"{message} (at byte {position})"
        super().__init__(message)
        self.position = position


class StreamExhausted(BencodeDecodeError):
    """
    Input ended before the first byte of a value.

    At a top-level boundary this just means there is nothing more to read.
    """


class UnexpectedEndOfStream(BencodeDecodeError):
    """Input ended in the middle of a token."""


class MalformedInteger(BencodeDecodeError):
    """The body of an ``i...e`` token is not a signed 64-bit base-10 integer."""


class MalformedLength(BencodeDecodeError):
    """A string length prefix is not a non-negative base-10 integer."""


class NonStringDictionaryKey(BencodeDecodeError):
    """A dictionary key decoded to something other than a byte string."""


class NestingTooDeep(BencodeDecodeError):
    """Lists/dictionaries are nested deeper than the decoder allows."""
