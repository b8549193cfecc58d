"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from pathlib import Path

PARENT_NAME = ".."
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class VcsStatus(Enum):
    """Per-entry version-control tag supplied by an external collaborator."""

    UNMODIFIED = "unmodified"
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"
    UNTRACKED = "untracked"
    IGNORED = "ignored"

    @property
    def icon(self) -> str:
        """One-letter marker shown next to a decorated entry."""
        return _VCS_ICONS[self]


_VCS_ICONS = {
    VcsStatus.UNMODIFIED: "",
    VcsStatus.MODIFIED: "M",
    VcsStatus.ADDED: "A",
    VcsStatus.DELETED: "D",
    VcsStatus.RENAMED: "R",
    VcsStatus.COPIED: "C",
    VcsStatus.UNTRACKED: "?",
    VcsStatus.IGNORED: "!",
}


@dataclass(frozen=True)
class Entry:
    """One row of a listing or search result."""

    display_name: str
    absolute_path: Path
    is_directory: bool
    size_bytes: int = 0
    mtime_ns: int = 0
    vcs_status: VcsStatus | None = None

    @property
    def is_parent_link(self) -> bool:
        return self.display_name == PARENT_NAME

    @property
    def is_hidden(self) -> bool:
        return self.display_name.startswith(".") and not self.is_parent_link

    @property
    def modified_at(self) -> datetime:
        """Modification time as an aware UTC datetime, truncated to microseconds."""
        return EPOCH + timedelta(microseconds=self.mtime_ns // 1000)

    @classmethod
    def parent_link(cls, directory: Path) -> Entry:
        """Synthetic ``..`` row pointing at the parent of ``directory``."""
        return cls(
            display_name=PARENT_NAME,
            absolute_path=directory.parent,
            is_directory=True,
            size_bytes=0,
            mtime_ns=0,
        )


@dataclass(frozen=True)
class DirectoryStats:
    """Aggregate counts for one listing, excluding the parent link."""

    total_items: int
    folder_count: int
    file_count: int
    total_size: int


__all__ = [
    "PARENT_NAME",
    "VcsStatus",
    "Entry",
    "DirectoryStats",
]
