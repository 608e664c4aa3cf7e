"""Aligned ``Modified | Size | Name`` table rendering for a listing.

Column widths come from one pass over the entries. Cells are padded to the
widest cell in their column plus ``COLUMN_PADDING`` spaces; the last column
is left unpadded.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from ..icons import icon_for_kind
from ..listing.types import ListedEntry
from ..ui_theme import PLAIN_THEME, UITheme, colorize_name
from .ansi import pad_to_width, text_display_width

HEADER = ("Modified", "Size", "Name")
MODIFIED_SEPARATOR_PREFIX = "---"
COLUMN_PADDING = 4


@dataclass(frozen=True)
class ColumnWidths:
    """Longest value per column, as the larger of display cells and characters."""

    modified_at: int = 0
    size: int = 0
    name: int = 0


def value_width(text: str) -> int:
    """Width used for dash counts: never less than ``len(text)`` or its display cells.

    Decomposed names (``"cafe\\u0301"``) occupy fewer cells than characters.
    """
    return max(text_display_width(text), len(text))


def column_widths(entries: Iterable[ListedEntry]) -> ColumnWidths:
    """Fold ``entries`` into the longest modified/size/name value widths."""
    widths = ColumnWidths()
    for entry in entries:
        widths = ColumnWidths(
            modified_at=max(widths.modified_at, value_width(entry.formatted_modified_at)),
            size=max(widths.size, value_width(entry.formatted_size)),
            name=max(widths.name, value_width(entry.display_name)),
        )
    return widths


def separator_row(widths: ColumnWidths) -> tuple[str, str, str]:
    """Dash cells covering each column's header title and longest value."""
    modified_title, size_title, name_title = HEADER
    return (
        MODIFIED_SEPARATOR_PREFIX + "-" * max(widths.modified_at, value_width(modified_title)),
        "-" * max(widths.size, value_width(size_title)),
        "-" * max(widths.name, value_width(name_title)),
    )


def entry_row(entry: ListedEntry) -> tuple[str, str, str]:
    """Plain-text cells for one entry."""
    icon = icon_for_kind(entry.kind, entry.name)
    return (
        f"{icon} {entry.formatted_modified_at}",
        entry.formatted_size,
        entry.display_name,
    )


def _format_row(cells: Sequence[str], widths: Sequence[int], last_cell: str | None = None) -> str:
    """Join cells with padding; ``last_cell`` replaces the final cell's text verbatim."""
    padded = [pad_to_width(cell, width + COLUMN_PADDING) for cell, width in zip(cells[:-1], widths)]
    final = cells[-1] if last_cell is None else last_cell
    line = "".join(padded) + final
    return line if final else line.rstrip()


def render_table(entries: Sequence[ListedEntry], theme: UITheme = PLAIN_THEME) -> str:
    """Render the full table, one ``\\n``-terminated line per row."""
    separator = separator_row(column_widths(entries))
    rows = [HEADER, separator, *(entry_row(entry) for entry in entries)]
    layout_widths = [max(text_display_width(row[idx]) for row in rows) for idx in range(len(HEADER) - 1)]

    lines = [_format_row(HEADER, layout_widths), _format_row(separator, layout_widths)]
    for entry, row in zip(entries, rows[2:]):
        name = colorize_name(theme, entry.kind, row[-1])
        lines.append(_format_row(row, layout_widths, last_cell=name))
    return "".join(f"{line}\n" for line in lines)


def print_table(entries: Sequence[ListedEntry], stream: TextIO, theme: UITheme = PLAIN_THEME) -> None:
    """Write the rendered table to ``stream`` and flush it."""
    stream.write(render_table(entries, theme))
    stream.flush()


__all__ = [
    "HEADER",
    "MODIFIED_SEPARATOR_PREFIX",
    "COLUMN_PADDING",
    "ColumnWidths",
    "value_width",
    "column_widths",
    "separator_row",
    "entry_row",
    "render_table",
    "print_table",
]
