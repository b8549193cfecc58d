"""Per-pane browsing state and its building blocks."""

from __future__ import annotations

from .history import MAX_HISTORY, NavigationHistory
from .selection import SelectionRange
from .sorting import SortDirection, SortKey, sort_entries
from .state import PaneState, canonical_directory

__all__ = [
    "MAX_HISTORY",
    "NavigationHistory",
    "SelectionRange",
    "SortDirection",
    "SortKey",
    "sort_entries",
    "PaneState",
    "canonical_directory",
]
