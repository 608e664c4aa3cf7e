"""Terminal cell measurement for aligned table output.

Widths are counted in terminal columns rather than code points so rows
containing emoji and wide characters line up.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters (which include most emoji) consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_display_width(text: str) -> int:
    """Return the display width of ``text``, ignoring ANSI escape sequences."""
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces up to ``width`` display columns."""
    return text + " " * max(0, width - text_display_width(text))


__all__ = ["ANSI_ESCAPE_RE", "char_display_width", "text_display_width", "pad_to_width"]
