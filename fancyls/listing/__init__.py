"""Directory listing domain: entry datatypes, scanning, and ordering.

This package holds the non-rendering half of the pipeline:
- ``EntryKind``/``ListedEntry`` records
- filesystem scan and per-entry classification
- listing sort order
"""

from __future__ import annotations

from .types import EntryKind, ListedEntry, Listing
from .fs import classify_entry, entry_kind, is_executable, scan_directory
from .sorting import listing_sort_key, sort_listing

__all__ = [
    "EntryKind",
    "ListedEntry",
    "Listing",
    "classify_entry",
    "entry_kind",
    "is_executable",
    "scan_directory",
    "listing_sort_key",
    "sort_listing",
]
