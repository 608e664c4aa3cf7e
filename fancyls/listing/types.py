"""Domain datatypes for one directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class EntryKind(IntEnum):
    """Entry classification; member order is the listing sort order."""

    FILE = 0
    DIRECTORY = 1
    EXECUTABLE = 2


@dataclass(frozen=True)
class ListedEntry:
    """One directory child with pre-rendered size and modification time."""

    name: str
    formatted_size: str
    formatted_modified_at: str
    kind: EntryKind

    @property
    def display_name(self) -> str:
        """Name as shown in the table; directories carry a trailing ``/``."""
        if self.kind is EntryKind.DIRECTORY:
            return f"{self.name}/"
        return self.name


Listing = list[ListedEntry]


__all__ = [
    "EntryKind",
    "ListedEntry",
    "Listing",
]
