"""
Bencode decoder for BitTorrent metainfo files.

Works as a pull parser over a ByteCursor: every token is read byte by byte
with at most one byte of lookahead, so the input can be a file that is never
loaded into memory as a whole.
"""
import logging
import re

from .cursor import ByteCursor
from .errors import (
    MalformedInteger,
    MalformedLength,
    NestingTooDeep,
    NonStringDictionaryKey,
    StreamExhausted,
    UnexpectedEndOfStream,
)
from .structure import INT64_MAX, INT64_MIN, BencodeDict, BencodeInt, BencodeList, BencodeString

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 512

_INT_RE = re.compile(rb"-?[0-9]+")
_LENGTH_RE = re.compile(rb"[0-9]+")

# longest decimal forms that can still fit in a signed 64-bit integer
MAX_INT_CHARS = 20
MAX_LENGTH_DIGITS = 19

_I = ord("i")
_L = ord("l")
_D = ord("d")
_E = ord("e")
_COLON = ord(":")


class BencodeDecoder:
    """
    Decodes Bencoded values from a byte source into BencodeType trees.
    """
    def __init__(self, source, max_depth: int = DEFAULT_MAX_DEPTH):
        self.cursor = source if isinstance(source, ByteCursor) else ByteCursor(source)
        self.max_depth = max_depth
        self._depth = 0

    def decode(self):
        """
        Decodes one value. Raises StreamExhausted if the input ends before
        the value starts; any other BencodeDecodeError means corrupt input.
        """
        start = self.cursor.position
        result = self._parse_value()
        logger.debug("Decoded %s spanning bytes %d-%d",
                     type(result).__name__, start, self.cursor.position)
        return result

    def __iter__(self):
        """Yields successive top-level values until the input runs out."""
        while True:
            try:
                yield self.decode()
            except StreamExhausted:
                return

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _next_in_token(self) -> int:
        """Reads a byte that must exist because a token is still open."""
        try:
            return self.cursor.read_byte()
        except StreamExhausted as exc:
            raise UnexpectedEndOfStream("Input ended inside a token", exc.position) from exc

    def _read_until(self, terminator: int) -> bytes:
        buf = bytearray()
        while True:
            ch = self._next_in_token()
            if ch == terminator:
                return bytes(buf)
            buf.append(ch)

    def _at_end_marker(self) -> bool:
        """Consumes the container terminator 'e' if it is next."""
        if self._next_in_token() == _E:
            return True
        self.cursor.unread_byte()
        return False

    def _enter(self, start: int):
        self._depth += 1
        if self._depth > self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels", start)

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self, nested: bool = False):
        # inside a container the input may not end before the value starts
        ch = self._next_in_token() if nested else self.cursor.read_byte()

        if ch == _I:
            return self._parse_int()

        if ch == _L:
            return self._parse_list()

        if ch == _D:
            return self._parse_dict()

        # Bencode strings start with their length, which is a digit
        self.cursor.unread_byte()
        return self._parse_string()

    def _parse_int(self):
        """Parses the body of an integer; the leading 'i' is already consumed."""
        start = self.cursor.position - 1
        number_bytes = self._read_until(_E)

        if not _INT_RE.fullmatch(number_bytes):
            raise MalformedInteger(f"Invalid integer format: {number_bytes!r}", start)
        if len(number_bytes) > MAX_INT_CHARS:
            raise MalformedInteger(f"Integer out of 64-bit range: {len(number_bytes)} characters", start)

        num = int(number_bytes)
        if not INT64_MIN <= num <= INT64_MAX:
            raise MalformedInteger(f"Integer out of 64-bit range: {number_bytes!r}", start)

        return BencodeInt(num)

    def _parse_string(self):
        """Parses a length-prefixed byte string."""
        start = self.cursor.position
        length_bytes = self._read_until(_COLON)

        if not _LENGTH_RE.fullmatch(length_bytes):
            raise MalformedLength(f"Invalid string length: {length_bytes!r}", start)
        if len(length_bytes) > MAX_LENGTH_DIGITS:
            raise MalformedLength(f"String length has {len(length_bytes)} digits", start)

        return BencodeString(self.cursor.read_exact(int(length_bytes)))

    def _parse_list(self):
        """Parses list items up to the closing 'e'; the 'l' is already consumed."""
        start = self.cursor.position - 1
        items = []

        try:
            self._enter(start)
            while not self._at_end_marker():
                items.append(self._parse_value(nested=True))
        finally:
            self._depth -= 1
        return BencodeList(items)

    def _parse_dict(self):
        """Parses key/value pairs up to the closing 'e'; the 'd' is already consumed."""
        start = self.cursor.position - 1
        obj = {}

        try:
            self._enter(start)
            while not self._at_end_marker():
                key_pos = self.cursor.position
                key = self._parse_value(nested=True)
                # keys MUST be strings
                if not isinstance(key, BencodeString):
                    raise NonStringDictionaryKey(
                        f"Dictionary key is {type(key).__name__}, expected BencodeString", key_pos
                    )
                obj[key.value] = self._parse_value(nested=True)
        finally:
            self._depth -= 1
        return BencodeDict(obj)


def decode(source, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Convenience function to decode a single Bencoded value from bytes or a
    binary stream. Bytes after the value are left unread.
    """
    return BencodeDecoder(source, max_depth=max_depth).decode()


def iter_decode(source, max_depth: int = DEFAULT_MAX_DEPTH):
    """Yields every top-level value in the source, in order."""
    return iter(BencodeDecoder(source, max_depth=max_depth))
