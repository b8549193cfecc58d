"""Pane sort keys and the entry comparator."""

from __future__ import annotations

from enum import Enum

from ..listing.types import Entry


class SortKey(Enum):
    NAME = "name"
    SIZE = "size"
    DATE = "date"


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> SortDirection:
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


def sort_entries(entries: list[Entry], key: SortKey, direction: SortDirection) -> list[Entry]:
    """Return ``entries`` sorted with any parent link pinned at index 0.

    Name order always keeps directories before files; the direction only
    reverses the name order inside each group. Size and date are plain
    comparisons reversed as a whole. Ties keep their listing order.
    """
    parents = [entry for entry in entries if entry.is_parent_link]
    rest = [entry for entry in entries if not entry.is_parent_link]
    descending = direction is SortDirection.DESCENDING

    if key is SortKey.NAME:
        rest.sort(key=lambda entry: entry.display_name.lower(), reverse=descending)
        rest.sort(key=lambda entry: not entry.is_directory)
    elif key is SortKey.SIZE:
        rest.sort(key=lambda entry: entry.size_bytes, reverse=descending)
    else:
        rest.sort(key=lambda entry: entry.mtime_ns, reverse=descending)

    return parents[:1] + rest


__all__ = ["SortKey", "SortDirection", "sort_entries"]
