"""
Logging configuration
"""

import logging


def setup_logger(level: str = "INFO", fmt: str = None) -> logging.Logger:
    """
    Attach a console handler to the root logger so the bencode and torrent
    module loggers are shown.

    Args:
        level: Level name, e.g. "DEBUG"
        fmt: logging.Formatter format string

    Returns:
        The root logger
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(
        fmt or '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
