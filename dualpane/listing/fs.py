"""Directory scanning: one directory's children as ``Entry`` rows."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable, Mapping
from pathlib import Path

from ..errors import FileAccessError
from .types import DirectoryStats, Entry, VcsStatus

logger = logging.getLogger(__name__)


def entry_from_dir_entry(child: os.DirEntry, vcs_overlay: Mapping[Path, VcsStatus] | None = None) -> Entry | None:
    """Build an ``Entry`` from a scandir child, ``None`` when its metadata is unreadable.

    Symlinks are not followed: a link to a directory is reported as a
    non-directory entry with the link's own metadata.
    """
    try:
        st = child.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug("skipping %s: %s", child.path, exc)
        return None

    child_path = Path(child.path)
    vcs_status: VcsStatus | None = None
    if vcs_overlay is not None:
        vcs_status = vcs_overlay.get(child_path, VcsStatus.UNMODIFIED)

    return Entry(
        display_name=child.name,
        absolute_path=child_path,
        is_directory=stat.S_ISDIR(st.st_mode),
        size_bytes=int(st.st_size),
        mtime_ns=int(st.st_mtime_ns),
        vcs_status=vcs_status,
    )


def list_directory_children(
    directory: Path,
    vcs_overlay: Mapping[Path, VcsStatus] | None = None,
) -> tuple[list[Entry], OSError | None]:
    """List immediate children in default order (directories first, then name).

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory itself cannot be opened; children whose metadata cannot be read
    are left out without an error.
    """
    children: list[Entry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                entry = entry_from_dir_entry(child, vcs_overlay)
                if entry is not None:
                    children.append(entry)
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_directory, item.display_name.lower()))
    return children, None


def list_directory(
    path: Path | str,
    vcs_overlay: Mapping[Path, VcsStatus] | None = None,
) -> list[Entry]:
    """Return ``[..] + children`` for ``path``.

    The parent link is always prepended; callers decide whether to drop it for
    a filesystem root. Raises ``FileAccessError`` when the directory cannot be
    opened.
    """
    directory = Path(path).absolute()
    children, scan_error = list_directory_children(directory, vcs_overlay)
    if scan_error is not None:
        raise FileAccessError(directory, scan_error) from scan_error
    return [Entry.parent_link(directory), *children]


def has_parent(path: Path) -> bool:
    """Return whether ``path`` is below a filesystem root."""
    return path.parent != path


def directory_stats(entries: Iterable[Entry]) -> DirectoryStats:
    """Count folders and files and sum file sizes, ignoring the parent link."""
    folder_count = 0
    file_count = 0
    total_size = 0
    for entry in entries:
        if entry.is_parent_link:
            continue
        if entry.is_directory:
            folder_count += 1
        else:
            file_count += 1
            total_size += entry.size_bytes
    return DirectoryStats(
        total_items=folder_count + file_count,
        folder_count=folder_count,
        file_count=file_count,
        total_size=total_size,
    )


def default_start_path() -> Path:
    """Home directory, else the working directory, else the filesystem root."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError):
        home = None
    if home is not None and home.is_dir():
        return home
    try:
        return Path.cwd()
    except OSError:
        return Path(os.path.abspath(os.sep))


__all__ = [
    "entry_from_dir_entry",
    "list_directory_children",
    "list_directory",
    "has_parent",
    "directory_stats",
    "default_start_path",
]
