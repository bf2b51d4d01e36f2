"""Bookmark commands: list, jump, set and remove.

Every handler takes the caller's :class:`ShellContext` and a
:class:`BookmarkStore`, performs a single read-modify-write against the
store and returns a :class:`CommandResult`. Lookup failures are raised as
:class:`~jumpmap.exceptions.BookmarkError` subclasses for the CLI to report.
"""

from __future__ import annotations

from pathlib import Path

from jumpmap.context import BookmarkEntry, CommandResult, ShellContext
from jumpmap.exceptions import AliasNotFoundError, StaleTargetError, ValidationError
from jumpmap.logging import get_logger
from jumpmap.store import BookmarkStore

log = get_logger(__name__)

EMPTY_HINT = "No bookmarks yet. Use 'setjump <alias>' to add one."


def _require_alias(alias: str) -> str:
    if not alias:
        raise ValidationError("Alias must be a non-empty string.")
    return alias


def _is_dir(path: str) -> bool:
    """Like ``Path.is_dir`` but false for paths that cannot be stat'ed."""
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def list_bookmarks(
    ctx: ShellContext,
    store: BookmarkStore,
    *,
    exists_marker: str = "✓",
    missing_marker: str = "✗",
) -> CommandResult:
    """List bookmarks sorted by alias, flagging targets that are gone."""
    bookmarks = store.load()
    if not bookmarks:
        return CommandResult(context=ctx, lines=[EMPTY_HINT], entries=[])

    width = max(len(alias) for alias in bookmarks)
    entries = [
        BookmarkEntry(alias=alias, path=path, exists=_is_dir(path))
        for alias, path in sorted(bookmarks.items())
    ]
    lines = [entry.render(width, exists_marker, missing_marker) for entry in entries]
    return CommandResult(context=ctx, lines=lines, entries=entries)


def jump(ctx: ShellContext, store: BookmarkStore, alias: str) -> CommandResult:
    """Resolve *alias* and return a context whose cwd is its target."""
    _require_alias(alias)
    bookmarks = store.load()
    if alias not in bookmarks:
        raise AliasNotFoundError(alias)

    target = bookmarks[alias]
    if not _is_dir(target):
        raise StaleTargetError(alias, target)

    log.debug("jump", alias=alias, target=target)
    return CommandResult(context=ctx.chdir(target), lines=[f"Jumped to '{alias}' -> {target}"])


def set_jump(ctx: ShellContext, store: BookmarkStore, alias: str) -> CommandResult:
    """Bookmark the context's current directory under *alias*."""
    _require_alias(alias)
    if ctx.cwd is None or not _is_dir(str(ctx.cwd)):
        raise ValidationError(
            "Current directory no longer exists; cd somewhere that does before running setjump."
        )
    current = str(ctx.cwd.absolute())
    bookmarks = store.load()

    warnings: list[str] = []
    previous = bookmarks.get(alias)
    if previous == current:
        return CommandResult(context=ctx, lines=[f"'{alias}' is already bookmarked here"])
    if previous is not None:
        warnings.append(f"Overwriting '{alias}' (was -> {previous})")

    bookmarks[alias] = current
    store.save(bookmarks)
    log.debug("bookmark set", alias=alias, target=current, overwritten=previous)
    return CommandResult(
        context=ctx,
        lines=[f"Bookmarked '{alias}' -> {current}"],
        warnings=warnings,
        changed=True,
    )


def remove_jump(ctx: ShellContext, store: BookmarkStore, alias: str) -> CommandResult:
    """Delete *alias*; every other bookmark is left untouched."""
    _require_alias(alias)
    bookmarks = store.load()
    if alias not in bookmarks:
        raise AliasNotFoundError(alias)

    target = bookmarks.pop(alias)
    store.save(bookmarks)
    log.debug("bookmark removed", alias=alias, target=target)
    return CommandResult(context=ctx, lines=[f"Removed '{alias}' (was -> {target})"], changed=True)
