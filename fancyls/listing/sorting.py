"""Deterministic ordering for directory listings."""

from __future__ import annotations

from collections.abc import Iterable

from .types import ListedEntry


def listing_sort_key(entry: ListedEntry) -> tuple[int, str]:
    """Sort by kind (files, directories, executables), then by exact name."""
    return (int(entry.kind), entry.name)


def sort_listing(entries: Iterable[ListedEntry]) -> list[ListedEntry]:
    """Return ``entries`` as a new list in listing order.

    Names compare by code point, which matches byte order of their UTF-8
    encoding, so ``"B"`` sorts before ``"a"``.
    """
    return sorted(entries, key=listing_sort_key)


__all__ = ["listing_sort_key", "sort_listing"]
