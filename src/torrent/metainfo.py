import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from bencode import decode
from bencode.decoder import DEFAULT_MAX_DEPTH
from bencode.structure import BencodeDict, BencodeInt, BencodeString

from .errors import MalformedField, MissingField, NotATorrentFile

logger = logging.getLogger(__name__)

PIECE_HASH_LEN = 20  # SHA-1 digest size


def chunk_pieces(blob: bytes, size: int = PIECE_HASH_LEN) -> List[bytes]:
    """
    Splits the concatenated piece hashes into consecutive `size`-byte chunks.
    A trailing remainder becomes a shorter final chunk.
    """
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [blob[i:i+size] for i in range(0, len(blob), size)]


@dataclass(frozen=True)
class FileInfo:
    piece_length: int
    pieces: Tuple[bytes, ...]
    length: int
    name: str


@dataclass(frozen=True)
class Torrent:
    announce: str
    info: FileInfo

    @property
    def num_pieces(self) -> int:
        return len(self.info.pieces)

    @property
    def expected_num_pieces(self) -> int:
        """Piece count implied by length and piece length (not checked on load)."""
        return -(-self.info.length // self.info.piece_length)

    @property
    def last_piece_length(self) -> int:
        if self.info.length == 0:
            return 0
        return (self.info.length % self.info.piece_length) or self.info.piece_length

    def __repr__(self):
        return (
            f"Torrent(name={self.info.name!r}, length={self.info.length}, "
            f"pieces={self.num_pieces}, announce={self.announce!r})"
        )


# ------------------------------------------------------------
#   Field extraction
# ------------------------------------------------------------

def _text(d: BencodeDict, key: bytes, wrong_type_is_missing: bool = False) -> str:
    field = key.decode()
    value_b = d.get(key)
    if value_b is None:
        raise MissingField(field)
    if not isinstance(value_b, BencodeString):
        if wrong_type_is_missing:
            raise MissingField(field)
        raise MalformedField(field, f"expected string, got {type(value_b).__name__}")
    try:
        return value_b.value.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedField(field, "not valid UTF-8") from exc


def _integer(d: BencodeDict, key: bytes, minimum: int) -> int:
    field = key.decode()
    value_b = d.get(key)
    if value_b is None:
        raise MissingField(field)
    if not isinstance(value_b, BencodeInt):
        raise MalformedField(field, f"expected integer, got {type(value_b).__name__}")
    if value_b.value < minimum:
        raise MalformedField(field, f"must be >= {minimum}, got {value_b.value}")
    return value_b.value


def _piece_hashes(d: BencodeDict) -> Tuple[bytes, ...]:
    pieces_b = d.get(b"pieces")
    if pieces_b is None:
        raise MissingField("pieces")
    if not isinstance(pieces_b, BencodeString):
        raise MalformedField("pieces", f"expected string, got {type(pieces_b).__name__}")

    raw_pieces = pieces_b.value
    if len(raw_pieces) % PIECE_HASH_LEN:
        raise MalformedField(
            "pieces", f"length {len(raw_pieces)} is not a multiple of {PIECE_HASH_LEN}"
        )
    return tuple(chunk_pieces(raw_pieces, PIECE_HASH_LEN))


def project(root) -> Torrent:
    """
    Maps a decoded metainfo tree onto a single-file Torrent.
    Raises a ProjectionError subclass naming the first violation found.
    """
    if not isinstance(root, BencodeDict):
        raise NotATorrentFile(f"Invalid torrent: root must be a dictionary, got {type(root).__name__}")

    # ------------------ INFO ------------------
    info_b = root.get(b"info")
    if not isinstance(info_b, BencodeDict):
        raise NotATorrentFile("Invalid torrent: 'info' must be a dictionary")

    # ------------------ ANNOUNCE URL ------------------
    # a non-string announce counts as no announce URL at all
    announce = _text(root, b"announce", wrong_type_is_missing=True)

    info = FileInfo(
        piece_length=_integer(info_b, b"piece length", minimum=1),
        pieces=_piece_hashes(info_b),
        length=_integer(info_b, b"length", minimum=0),
        name=_text(info_b, b"name"),
    )
    torrent = Torrent(announce=announce, info=info)

    if torrent.num_pieces != torrent.expected_num_pieces:
        logger.warning("%r has %d piece hashes, length implies %d",
                       info.name, torrent.num_pieces, torrent.expected_num_pieces)
    logger.debug("Projected %r", torrent)
    return torrent


def parse_torrent(source, max_depth: int = DEFAULT_MAX_DEPTH) -> Torrent:
    """Decodes bytes or a binary stream and projects it into a Torrent."""
    return project(decode(source, max_depth=max_depth))


def load_torrent(path, max_depth: int = DEFAULT_MAX_DEPTH) -> Torrent:
    """Reads a .torrent file from disk without loading it into memory first."""
    path = Path(path)
    with path.open("rb") as fp:
        return parse_torrent(fp, max_depth=max_depth)
