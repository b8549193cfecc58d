"""Search request description."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class TypeFilter(Enum):
    ALL = "all"
    FILES_ONLY = "files"
    DIRECTORIES_ONLY = "dirs"


@dataclass(frozen=True)
class SearchCriteria:
    """Filters applied to every entry below ``root``.

    Empty substrings and ``None`` bounds disable the corresponding test.
    ``filename_substring`` is a plain substring, not a glob.
    """

    root: Path
    filename_substring: str = ""
    content_substring: str = ""
    min_size: int | None = None
    max_size: int | None = None
    modified_after: datetime | None = None
    modified_before: datetime | None = None
    type_filter: TypeFilter = TypeFilter.ALL
    case_sensitive: bool = False
    include_hidden: bool = False


__all__ = ["TypeFilter", "SearchCriteria"]
