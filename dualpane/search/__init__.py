"""Recursive search over a directory subtree.

Stateless: every call walks the tree afresh and returns ``Entry`` rows.
"""

from __future__ import annotations

from .content import file_contains
from .criteria import SearchCriteria, TypeFilter
from .walker import entry_matches, search

__all__ = [
    "SearchCriteria",
    "TypeFilter",
    "entry_matches",
    "file_contains",
    "search",
]
