import pytest

from bencode import BencodeDecodeError, decode
from bencode.structure import BencodeDict, BencodeInt, BencodeList, BencodeString
from torrent.errors import MalformedField, MissingField, NotATorrentFile
from torrent.metainfo import chunk_pieces, load_torrent, parse_torrent, project

HASH_A = b"A" * 20
HASH_B = b"B" * 20


def make_torrent(announce=b"http://tracker.example/announce", **info) -> bytes:
    fields = {
        b"length": b"i32768e",
        b"name": b"8:file.iso",
        b"piece length": b"i16384e",
        b"pieces": b"40:" + HASH_A + HASH_B,
    }
    for key, raw in info.items():
        key = key.replace("_", " ").encode()
        if raw is None:
            fields.pop(key, None)
        else:
            fields[key] = raw

    body = b"".join(b"%d:%s%s" % (len(k), k, v) for k, v in sorted(fields.items()))
    out = b"d"
    if announce is not None:
        out += b"8:announce" + b"%d:%s" % (len(announce), announce)
    return out + b"4:infod" + body + b"ee"


def test_end_to_end():
    torrent = parse_torrent(make_torrent())

    assert torrent.announce == "http://tracker.example/announce"
    assert torrent.info.piece_length == 16384
    assert torrent.info.length == 32768
    assert torrent.info.name == "file.iso"
    assert torrent.info.pieces == (HASH_A, HASH_B)
    assert torrent.num_pieces == 2
    assert torrent.info.length // torrent.info.piece_length == 2
    assert torrent.expected_num_pieces == 2
    assert torrent.last_piece_length == 16384


def test_torrent_is_immutable():
    torrent = parse_torrent(make_torrent())
    with pytest.raises(AttributeError):
        torrent.announce = "udp://other"


def test_extra_keys_are_ignored():
    raw = make_torrent(private=b"i1e", files=b"le")
    assert parse_torrent(raw).info.name == "file.iso"


def test_chunk_pieces_clamps_trailing_remainder():
    chunks = chunk_pieces(bytes(range(45)))
    assert [len(c) for c in chunks] == [20, 20, 5]
    assert b"".join(chunks) == bytes(range(45))
    assert chunk_pieces(b"") == []


def test_pieces_not_multiple_of_20():
    with pytest.raises(MalformedField) as exc_info:
        parse_torrent(make_torrent(pieces=b"45:" + b"x" * 45))
    assert exc_info.value.field == "pieces"


def test_root_list_is_not_a_torrent():
    with pytest.raises(NotATorrentFile):
        project(decode(b"l4:spame"))


def test_info_must_be_dict():
    with pytest.raises(NotATorrentFile):
        project(BencodeDict({b"announce": BencodeString(b"x")}))
    with pytest.raises(NotATorrentFile):
        project(BencodeDict({b"info": BencodeList([])}))


def test_missing_announce():
    with pytest.raises(MissingField) as exc_info:
        parse_torrent(make_torrent(announce=None))
    assert exc_info.value.field == "announce"

    root = decode(make_torrent())
    root.value[b"announce"] = BencodeInt(1)
    with pytest.raises(MissingField):
        project(root)


def test_announce_not_utf8():
    with pytest.raises(MalformedField):
        parse_torrent(make_torrent(announce=b"\xff\xfe"))


@pytest.mark.parametrize("field", ["piece_length", "length", "name", "pieces"])
def test_missing_info_field(field):
    with pytest.raises(MissingField) as exc_info:
        parse_torrent(make_torrent(**{field: None}))
    assert exc_info.value.field == field.replace("_", " ")


@pytest.mark.parametrize("field, raw", [
    ("piece_length", b"i0e"),
    ("piece_length", b"i-5e"),
    ("piece_length", b"5:16384"),
    ("length", b"i-1e"),
    ("length", b"le"),
    ("name", b"i7e"),
    ("name", b"2:\xc3\x28"),
    ("pieces", b"i20e"),
])
def test_malformed_info_field(field, raw):
    with pytest.raises(MalformedField) as exc_info:
        parse_torrent(make_torrent(**{field: raw}))
    assert exc_info.value.field == field.replace("_", " ")


def test_zero_length_torrent():
    torrent = parse_torrent(make_torrent(length=b"i0e", pieces=b"0:"))
    assert torrent.info.pieces == ()
    assert torrent.expected_num_pieces == 0
    assert torrent.last_piece_length == 0


def test_load_torrent(tmp_path):
    path = tmp_path / "sample.torrent"
    path.write_bytes(make_torrent())

    torrent = load_torrent(path)
    assert torrent.info.name == "file.iso"


def test_load_corrupt_torrent(tmp_path):
    path = tmp_path / "broken.torrent"
    path.write_bytes(make_torrent()[:50])

    with pytest.raises(BencodeDecodeError):
        load_torrent(path)
