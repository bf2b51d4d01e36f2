"""Bookmark persistence store."""

from __future__ import annotations

import contextlib
import json
import os
from pathlib import Path
from typing import Any

from jumpmap.exceptions import CorruptStoreError, PersistenceError
from jumpmap.logging import get_logger

log = get_logger(__name__)


def decode_bookmark_map(raw: Any, path: str = "<memory>") -> dict[str, str]:
    """Validate a parsed JSON document as an ``{alias: path}`` object.

    Raises:
        CorruptStoreError: if the document is not an object of
            non-empty string keys to string values.
    """
    if not isinstance(raw, dict):
        raise CorruptStoreError(path, f"expected a JSON object, got {type(raw).__name__}")

    bookmarks: dict[str, str] = {}
    for alias, target in raw.items():
        if not isinstance(alias, str) or not alias:
            raise CorruptStoreError(path, "aliases must be non-empty strings")
        if not isinstance(target, str):
            raise CorruptStoreError(path, f"path for '{alias}' is not a string")
        bookmarks[alias] = target
    return bookmarks


class BookmarkStore:
    """Alias to directory bookmarks (``{alias: path}``) kept in one JSON file.

    ``load()`` always succeeds: a missing file is an empty map, and an
    unreadable or malformed file is logged and treated as empty.
    ``save()`` rewrites the whole document through a temporary file.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # -- core I/O -------------------------------------------------------------

    def load(self) -> dict[str, str]:
        """Read the bookmark map from disk, returning ``{}`` on any error."""
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            bookmarks = decode_bookmark_map(raw, str(self.path))
        except FileNotFoundError:
            log.debug("bookmark store missing", path=str(self.path))
            return {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, CorruptStoreError) as e:
            log.warning(
                "bookmark store unreadable, starting empty",
                path=str(self.path),
                error=str(e),
            )
            return {}
        log.debug("bookmark store loaded", path=str(self.path), count=len(bookmarks))
        return bookmarks

    def save(self, bookmarks: dict[str, str]) -> None:
        """Persist the full bookmark map, replacing the file atomically.

        Raises:
            PersistenceError: if the file (or its directory) cannot be written.
        """
        payload = json.dumps(bookmarks, indent=2, ensure_ascii=False, sort_keys=True) + "\n"
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise PersistenceError(str(self.path), e.strerror or str(e)) from e
        log.debug("bookmark store saved", path=str(self.path), count=len(bookmarks))
