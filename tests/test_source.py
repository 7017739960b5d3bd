import aiohttp
import pytest

from torrent.errors import TorrentSourceError
from torrent.source import is_url, read_torrent_bytes


class FakeResp:
    def __init__(self, status, body):
        self.status = status
        self.body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc, val, tb):
        pass

    async def read(self):
        return self.body


class FakeSession:
    def __init__(self, status=200, body=b"d8:announce3:urle", error=None):
        self.status = status
        self.body = body
        self.error = error
        self.requested = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc, val, tb):
        pass

    def get(self, url, **kwargs):
        self.requested.append(url)
        if self.error:
            raise self.error
        return FakeResp(self.status, self.body)


def test_is_url():
    assert is_url("http://example.com/a.torrent")
    assert is_url("https://example.com/a.torrent")
    assert not is_url("torrents/a.torrent")
    assert not is_url("udp://tracker:80")


@pytest.mark.asyncio
async def test_fetch_url(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(aiohttp, "ClientSession", lambda **kwargs: session)

    data = await read_torrent_bytes("http://fake/file.torrent")

    assert data == b"d8:announce3:urle"
    assert session.requested == ["http://fake/file.torrent"]


@pytest.mark.asyncio
async def test_fetch_url_http_error(monkeypatch):
    monkeypatch.setattr(aiohttp, "ClientSession", lambda **kwargs: FakeSession(status=404))

    with pytest.raises(TorrentSourceError):
        await read_torrent_bytes("https://fake/missing.torrent")


@pytest.mark.asyncio
async def test_fetch_url_connection_error(monkeypatch):
    error = aiohttp.ClientConnectionError("refused")
    monkeypatch.setattr(aiohttp, "ClientSession", lambda **kwargs: FakeSession(error=error))

    with pytest.raises(TorrentSourceError):
        await read_torrent_bytes("http://fake/file.torrent")


@pytest.mark.asyncio
async def test_read_file(tmp_path):
    path = tmp_path / "a.torrent"
    path.write_bytes(b"de")

    assert await read_torrent_bytes(path) == b"de"

    with pytest.raises(TorrentSourceError):
        await read_torrent_bytes(tmp_path / "missing.torrent")
