"""Alias completion for interactive shells."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

from jumpmap.store import BookmarkStore


class AliasCandidate(NamedTuple):
    """Completion candidate; ``path`` is shown as the description/tooltip."""

    alias: str
    path: str


def complete_aliases(prefix: str, bookmarks: Mapping[str, str]) -> list[AliasCandidate]:
    """Return the aliases starting with *prefix*, alphabetically."""
    prefix = prefix or ""
    return [
        AliasCandidate(alias, bookmarks[alias])
        for alias in sorted(bookmarks)
        if alias.startswith(prefix)
    ]


class AliasCompleter:
    """Completion provider backed by the bookmark store.

    The store is re-read on every call; ``BookmarkStore.load`` already
    degrades a missing or corrupt file to an empty map.
    """

    def __init__(self, store: BookmarkStore) -> None:
        self.store = store

    def candidates(self, prefix: str = "") -> list[AliasCandidate]:
        return complete_aliases(prefix, self.store.load())

    def click_items(self, incomplete: str) -> list[tuple[str, str]]:
        """Typer ``autocompletion`` adapter: ``(value, help)`` pairs."""
        return [(c.alias, c.path) for c in self.candidates(incomplete)]

    def lines(self, prefix: str = "") -> list[str]:
        """Tab-separated ``alias<TAB>path`` lines for shell scripts."""
        return [f"{c.alias}\t{c.path}" for c in self.candidates(prefix)]
