"""
Configuration settings for the torrent inspector.
Loads configuration from .env file with fallback to defaults.
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ===== Input =====
TORRENT_SOURCE = os.getenv('TORRENT_SOURCE', 'ubuntu-24.04-desktop-amd64.iso.torrent')
FETCH_TIMEOUT = float(os.getenv('FETCH_TIMEOUT', '30'))  # seconds, URL sources only

# ===== Decoder =====
MAX_NESTING_DEPTH = int(os.getenv('MAX_NESTING_DEPTH', '512'))

# ===== Application Settings =====
DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 't')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO' if not DEBUG else 'DEBUG')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
