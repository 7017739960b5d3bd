"""
Loads raw .torrent bytes from a local path or an HTTP(S) URL.
"""
import logging
from pathlib import Path
from urllib.parse import urlparse

import aiohttp

from .errors import TorrentSourceError

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    return urlparse(str(location)).scheme in ("http", "https")


async def fetch_torrent(url: str, timeout: float = 30.0) -> bytes:
    logger.info("[Source] Fetching %s", url)

    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        try:
            async with session.get(url) as resp:
                if resp.status != 200:
                    raise TorrentSourceError(f"GET {url} returned HTTP {resp.status}")
                data = await resp.read()
        except aiohttp.ClientError as exc:
            raise TorrentSourceError(f"GET {url} failed: {exc}") from exc

    logger.debug("[Source] Received %d bytes", len(data))
    return data


def read_file(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise TorrentSourceError(f"Cannot read {path}: {exc}") from exc


async def read_torrent_bytes(location, timeout: float = 30.0) -> bytes:
    """Returns the raw bytes behind `location`, a file path or http(s) URL."""
    if is_url(location):
        return await fetch_torrent(str(location), timeout=timeout)
    return read_file(location)
