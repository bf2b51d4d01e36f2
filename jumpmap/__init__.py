"""jumpmap - directory bookmarks for your shell."""

__version__ = "0.1.0"

from jumpmap.config import Config
from jumpmap.store import BookmarkStore

__all__ = ["BookmarkStore", "Config", "__version__"]
