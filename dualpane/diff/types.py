"""Result datatypes for line-aligned file comparison."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DiffKind(Enum):
    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class DiffLine:
    """One aligned row; line numbers are 1-based and ``None`` on the absent side."""

    kind: DiffKind
    left_line_number: int | None
    right_line_number: int | None
    left_text: str = ""
    right_text: str = ""


@dataclass(frozen=True)
class DiffCounts:
    equal: int = 0
    added: int = 0
    removed: int = 0
    modified: int = 0

    @classmethod
    def tally(cls, lines: Iterable[DiffLine]) -> DiffCounts:
        counts = {kind: 0 for kind in DiffKind}
        for line in lines:
            counts[line.kind] += 1
        return cls(
            equal=counts[DiffKind.EQUAL],
            added=counts[DiffKind.ADDED],
            removed=counts[DiffKind.REMOVED],
            modified=counts[DiffKind.MODIFIED],
        )

    @property
    def changed(self) -> int:
        return self.added + self.removed + self.modified


@dataclass(frozen=True)
class DiffResult:
    left_path: Path
    right_path: Path
    identical: bool
    lines: tuple[DiffLine, ...] = ()
    counts: DiffCounts = field(default_factory=DiffCounts)


__all__ = ["DiffKind", "DiffLine", "DiffCounts", "DiffResult"]
