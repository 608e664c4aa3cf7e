"""Glyph lookup for listing rows.

Directories and executables get a fixed glyph. Other files are matched by
their lowercased extension against ``FILE_ICONS``.
"""

from __future__ import annotations

from types import MappingProxyType

from .listing.types import EntryKind

DIRECTORY_ICON = "📁"
EXECUTABLE_ICON = "⚡"
DEFAULT_FILE_ICON = "📄"

FILE_ICONS = MappingProxyType(
    {
        "txt": "📝",
        "md": "⬇️",
        "rs": "🦀",
        "rb": "💎",
        "go": "🐹",
        "py": "🐍",
        "java": "☕",
        "zig": "⚡",
        "c": "💾",
        "cpp": "💾",
        "js": "📜",
        "html": "🌐",
        "css": "🎨",
        "json": "📑",
        "csv": "📊",
        "mp3": "🎵",
        "wav": "🎵",
        "mp4": "🎬",
        "png": "🖼️",
        "jpg": "📷",
        "jpeg": "📷",
        "gif": "🎞️",
        "zip": "📦",
        "jar": "📦",
        "tar": "📦",
        "pdf": "📕",
    }
)


def file_extension(name: str) -> str:
    """Return the lowercased text after the last ``.``, or ``""`` when absent."""
    _stem, dot, extension = name.rpartition(".")
    if not dot:
        return ""
    return extension.lower()


def file_icon(name: str) -> str:
    """Return the glyph for a plain file name."""
    return FILE_ICONS.get(file_extension(name), DEFAULT_FILE_ICON)


def icon_for_kind(kind: EntryKind, name: str) -> str:
    """Return the glyph for an entry; kind wins over extension."""
    if kind is EntryKind.DIRECTORY:
        return DIRECTORY_ICON
    if kind is EntryKind.EXECUTABLE:
        return EXECUTABLE_ICON
    return file_icon(name)


__all__ = [
    "DIRECTORY_ICON",
    "EXECUTABLE_ICON",
    "DEFAULT_FILE_ICON",
    "FILE_ICONS",
    "file_extension",
    "file_icon",
    "icon_for_kind",
]
