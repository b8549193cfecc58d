"""Recursive attribute/content search below one root directory.

The walk is depth-first pre-order: each child is tested, then (if it is a
directory) its subtree is walked before the next sibling. Filters only decide
whether an entry is reported; they never stop the walk from descending into
a directory. An explicit stack replaces recursion so deep trees cannot
exhaust the interpreter stack.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from datetime import datetime, timedelta
from pathlib import Path

from ..errors import FileAccessError
from ..listing.fs import entry_from_dir_entry
from ..listing.types import EPOCH, Entry
from .content import file_contains
from .criteria import SearchCriteria, TypeFilter

logger = logging.getLogger(__name__)


def _scan(directory: Path) -> tuple[list[os.DirEntry], OSError | None]:
    """Read raw children of ``directory`` in filesystem order."""
    try:
        with os.scandir(directory) as entries:
            return list(entries), None
    except OSError as exc:
        return [], exc


def _timestamp_us(moment: datetime) -> int:
    """Microseconds since the epoch; naive datetimes are taken as local time."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (moment - EPOCH) // timedelta(microseconds=1)


def _name_matches(name: str, criteria: SearchCriteria) -> bool:
    if not criteria.filename_substring:
        return True
    if criteria.case_sensitive:
        return criteria.filename_substring in name
    return criteria.filename_substring.lower() in name.lower()


def entry_matches(entry: Entry, criteria: SearchCriteria) -> bool:
    """Apply type, name, size, date, then content tests to one entry."""
    if criteria.type_filter is TypeFilter.FILES_ONLY and entry.is_directory:
        return False
    if criteria.type_filter is TypeFilter.DIRECTORIES_ONLY and not entry.is_directory:
        return False
    if not _name_matches(entry.display_name, criteria):
        return False
    if criteria.min_size is not None and entry.size_bytes < criteria.min_size:
        return False
    if criteria.max_size is not None and entry.size_bytes > criteria.max_size:
        return False
    if criteria.modified_after is not None and entry.mtime_ns // 1000 < _timestamp_us(criteria.modified_after):
        return False
    if criteria.modified_before is not None and entry.mtime_ns // 1000 > _timestamp_us(criteria.modified_before):
        return False
    if criteria.content_substring and not entry.is_directory:
        return file_contains(entry.absolute_path, criteria.content_substring, criteria.case_sensitive)
    return True


def search(criteria: SearchCriteria) -> list[Entry]:
    """Return entries below ``criteria.root`` that pass every filter, in visitation order.

    Raises ``FileAccessError`` only when the root itself cannot be opened.
    Unreadable subdirectories and entries with unreadable metadata are skipped.
    """
    root = Path(criteria.root).expanduser().absolute()
    root_children, scan_error = _scan(root)
    if scan_error is not None:
        raise FileAccessError(root, scan_error) from scan_error

    results: list[Entry] = []
    stack: list[Iterator[os.DirEntry]] = [iter(root_children)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        if not criteria.include_hidden and child.name.startswith("."):
            continue

        entry = entry_from_dir_entry(child)
        if entry is None:
            continue

        if entry_matches(entry, criteria):
            results.append(entry)

        if entry.is_directory:
            grandchildren, scan_error = _scan(entry.absolute_path)
            if scan_error is not None:
                logger.debug("skipping unreadable directory %s: %s", entry.absolute_path, scan_error)
                continue
            stack.append(iter(grandchildren))

    logger.debug("search under %s found %d entries", root, len(results))
    return results


__all__ = ["entry_matches", "search"]
