"""Filesystem scanning and per-entry classification for directory listings."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..formatting import format_modified_at, human_readable_size
from .types import EntryKind, ListedEntry

log = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"
_SKIPPED_NAMES = frozenset({".", ".."})
_IS_WINDOWS = os.name == "nt"


def _windows_executable_extensions() -> frozenset[str]:
    """Return lowercased ``PATHEXT`` suffixes used as the Windows executable check."""
    raw = os.environ.get("PATHEXT") or DEFAULT_PATHEXT
    return frozenset(part.strip().lower() for part in raw.split(";") if part.strip())


def is_executable(mode: int, name: str) -> bool:
    """Return whether a regular file counts as executable.

    POSIX checks the owner/group/other execute bits of ``mode``. Windows has
    no such bits, so the file suffix is matched against ``PATHEXT`` instead.
    """
    if _IS_WINDOWS:
        return os.path.splitext(name)[1].lower() in _windows_executable_extensions()
    return bool(mode & EXECUTE_BITS)


def entry_kind(mode: int, name: str) -> EntryKind:
    """Classify an entry from its (non-followed) ``st_mode``.

    Anything that is neither a directory nor a regular file (symlinks,
    sockets, FIFOs, devices) is listed as a plain file.
    """
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode) and is_executable(mode, name):
        return EntryKind.EXECUTABLE
    return EntryKind.FILE


def classify_entry(entry: os.DirEntry[str]) -> ListedEntry | None:
    """Build a ``ListedEntry`` for ``entry`` or ``None`` when it must be skipped."""
    name = entry.name
    if name in _SKIPPED_NAMES:
        return None
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        log.debug("skipping entry with undecodable name: %r", name)
        return None

    try:
        entry_stat = entry.stat(follow_symlinks=False)
    except OSError as exc:
        log.debug("skipping %s: cannot read metadata: %s", name, exc)
        return None

    try:
        modified_at = format_modified_at(entry_stat.st_mtime)
    except (OverflowError, OSError, ValueError) as exc:
        log.debug("skipping %s: unreadable modification time: %s", name, exc)
        return None

    return ListedEntry(
        name=name,
        formatted_size=human_readable_size(int(entry_stat.st_size)),
        formatted_modified_at=modified_at,
        kind=entry_kind(entry_stat.st_mode, name),
    )


def scan_directory(directory: Path) -> list[ListedEntry]:
    """List the immediate children of ``directory``.

    Entries that cannot be classified are dropped; the rest are returned in
    filesystem enumeration order. ``OSError`` from opening the directory
    itself propagates to the caller.
    """
    entries: list[ListedEntry] = []
    with os.scandir(directory) as children:
        for child in children:
            listed = classify_entry(child)
            if listed is not None:
                entries.append(listed)
    return entries


__all__ = [
    "EXECUTE_BITS",
    "is_executable",
    "entry_kind",
    "classify_entry",
    "scan_directory",
]
