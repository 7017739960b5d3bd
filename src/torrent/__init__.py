"""
Torrent package: projects decoded metainfo into a typed Torrent.
"""
from .errors import MalformedField, MissingField, NotATorrentFile, ProjectionError, TorrentSourceError
from .metainfo import FileInfo, Torrent, chunk_pieces, load_torrent, parse_torrent, project
from .source import read_torrent_bytes

__all__ = [
    'Torrent', 'FileInfo', 'project', 'parse_torrent', 'load_torrent', 'chunk_pieces',
    'read_torrent_bytes',
    'ProjectionError', 'NotATorrentFile', 'MissingField', 'MalformedField', 'TorrentSourceError',
]
