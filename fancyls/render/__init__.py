"""Text rendering for directory listings."""

from __future__ import annotations

from .table import ColumnWidths, column_widths, print_table, render_table

__all__ = ["ColumnWidths", "column_widths", "print_table", "render_table"]
