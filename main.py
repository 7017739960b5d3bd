import asyncio
import logging
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

import config
from bencode import BencodeDecodeError
from torrent import ProjectionError, TorrentSourceError, parse_torrent, read_torrent_bytes
from utils.logger import setup_logger

logger = logging.getLogger("main")


def print_torrent(torrent, out=None):
    out = out or sys.stdout
    info = torrent.info
    print(info.length, file=out)
    print(info.piece_length, file=out)
    print(info.length // info.piece_length, file=out)
    print([p.hex() for p in info.pieces], file=out)
    print(info.name, file=out)
    print(torrent.announce, file=out)


async def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    source = argv[0] if argv else config.TORRENT_SOURCE

    try:
        raw = await read_torrent_bytes(source, timeout=config.FETCH_TIMEOUT)
        torrent = parse_torrent(raw, max_depth=config.MAX_NESTING_DEPTH)
    except TorrentSourceError as e:
        logger.error("[Main] %s", e)
        return 1
    except (BencodeDecodeError, ProjectionError) as e:
        logger.error("[Main] %s is not a valid torrent: %s", source, e)
        return 1

    print_torrent(torrent)
    return 0


if __name__ == "__main__":
    setup_logger(config.LOG_LEVEL, config.LOG_FORMAT)
    sys.exit(asyncio.run(main()))
