"""
Byte cursor with one byte of push-back, used by the decoder for lookahead.
"""
import io

from .errors import StreamExhausted, UnexpectedEndOfStream


class ByteCursor:
    """
    Reads single bytes from a binary stream or an in-memory buffer.

    Accepts ``bytes``/``bytearray``/``memoryview`` or any object with a
    ``read(n)`` method returning bytes. Only the most recently read byte can
    be pushed back.
    """

    def __init__(self, source, buffer_size: int = 64 * 1024):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        elif not hasattr(source, "read"):
            raise TypeError(f"Cannot read bencode from {type(source).__name__}")

        self._stream = source
        self._buffer_size = buffer_size
        self._buf = b""
        self._buf_pos = 0
        self._last = None      # last byte handed out, for unread_byte()
        self._pushed_back = False
        self.position = 0      # offset of the next byte to be read

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _fill(self) -> bool:
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return False
        if not isinstance(chunk, (bytes, bytearray)):
            raise TypeError("Bencode source must be opened in binary mode")
        self._buf = bytes(chunk)
        self._buf_pos = 0
        return True

    def read_byte(self) -> int:
        """Returns the next byte as an int, or raises StreamExhausted."""
        if self._pushed_back:
            self._pushed_back = False
        else:
            if self._buf_pos >= len(self._buf) and not self._fill():
                raise StreamExhausted("Unexpected end of input", self.position)
            self._last = self._buf[self._buf_pos]
            self._buf_pos += 1
        self.position += 1
        return self._last

    def unread_byte(self):
        """Pushes the last read byte back so the next read returns it again."""
        if self._last is None or self._pushed_back:
            raise RuntimeError("Only the last read byte can be unread")
        self._pushed_back = True
        self.position -= 1

    def peek_byte(self) -> int:
        ch = self.read_byte()
        self.unread_byte()
        return ch

    def read_exact(self, n: int) -> bytes:
        """Reads exactly n raw bytes; running out of input is corruption."""
        start = self.position
        out = bytearray()

        if n and self._pushed_back:
            out.append(self.read_byte())

        while len(out) < n:
            if self._buf_pos >= len(self._buf) and not self._fill():
                raise UnexpectedEndOfStream(
                    f"String body truncated: expected {n} bytes, got {len(out)}", start
                )
            take = min(n - len(out), len(self._buf) - self._buf_pos)
            out += self._buf[self._buf_pos:self._buf_pos + take]
            self._buf_pos += take
            self.position += take
            self._last = out[-1]

        return bytes(out)
