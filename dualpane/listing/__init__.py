"""Directory-listing primitives shared by panes and search.

This package contains non-UI listing pieces:
- the ``Entry`` row type and its optional VCS tag
- single-directory scanning with a synthetic parent link
- aggregate stats and column formatting helpers
"""

from __future__ import annotations

from .types import PARENT_NAME, DirectoryStats, Entry, VcsStatus
from .fs import (
    default_start_path,
    directory_stats,
    entry_from_dir_entry,
    has_parent,
    list_directory,
    list_directory_children,
)
from .formatting import format_date, format_size

__all__ = [
    "PARENT_NAME",
    "DirectoryStats",
    "Entry",
    "VcsStatus",
    "default_start_path",
    "directory_stats",
    "entry_from_dir_entry",
    "has_parent",
    "list_directory",
    "list_directory_children",
    "format_date",
    "format_size",
]
