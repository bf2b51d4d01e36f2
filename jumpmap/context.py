"""Explicit shell state passed through command handlers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ShellContext:
    """Working directory of the invoking shell.

    Handlers receive a context and hand back a (possibly new) one instead
    of mutating process state, so the shell wrapper decides what to apply.
    ``cwd`` is ``None`` when the shell sits in a directory that has since
    been deleted.
    """

    cwd: Path | None

    @classmethod
    def from_process(cls) -> "ShellContext":
        try:
            return cls(cwd=Path.cwd())
        except FileNotFoundError:
            return cls(cwd=None)

    def chdir(self, path: Path | str) -> "ShellContext":
        return dataclasses.replace(self, cwd=Path(path))


@dataclass
class BookmarkEntry:
    """One rendered row of the bookmark list."""

    alias: str
    path: str
    exists: bool

    def render(self, width: int, exists_marker: str, missing_marker: str) -> str:
        marker = exists_marker if self.exists else missing_marker
        return f"{marker} {self.alias.ljust(width)} -> {self.path}"


@dataclass
class CommandResult:
    """Outcome of a bookmark command."""

    context: ShellContext
    lines: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    entries: list[BookmarkEntry] | None = None
    changed: bool = False
