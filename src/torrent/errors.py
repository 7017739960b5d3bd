"""
Exceptions raised while turning decoded Bencode into a Torrent.
"""


class ProjectionError(ValueError):
    """Base class for metainfo schema violations."""


class NotATorrentFile(ProjectionError):
    """The root value or its 'info' entry is not a dictionary."""


class MissingField(ProjectionError):
    def __init__(self, field: str):
        super().__init__(f"Torrent missing '{field}'")
        self.field = field


class MalformedField(ProjectionError):
    def __init__(self, field: str, reason: str = "invalid value"):
        super().__init__(f"Torrent field '{field}': {reason}")
        self.field = field
        self.reason = reason


class TorrentSourceError(Exception):
    """The torrent bytes could not be read from a file or URL."""
