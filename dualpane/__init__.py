"""Public package surface for dualpane.

Re-exports the pane, search, and diff entry points. Exports ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .diff import DiffResult, compare
from .errors import ComparisonError, DualPaneError, FileAccessError, InvalidPathError, IsDirectoryError
from .listing import Entry, VcsStatus, list_directory
from .pane import PaneState, SortDirection, SortKey
from .search import SearchCriteria, TypeFilter, search
from .session import DualPaneSession


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "ComparisonError",
    "DiffResult",
    "DualPaneError",
    "DualPaneSession",
    "Entry",
    "FileAccessError",
    "InvalidPathError",
    "IsDirectoryError",
    "PaneState",
    "SearchCriteria",
    "SortDirection",
    "SortKey",
    "TypeFilter",
    "VcsStatus",
    "compare",
    "list_directory",
    "main",
    "search",
]
