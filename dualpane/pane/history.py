"""Bounded back/forward navigation history for one pane.

This module has no filesystem concerns; it only tracks visited paths and a
current position.
"""

from __future__ import annotations

from pathlib import Path

MAX_HISTORY = 50


class NavigationHistory:
    """Visited paths plus a cursor pointing at the current one.

    Pushing a new path drops any forward entries first. Adjacent duplicates
    are suppressed and the oldest entries are evicted past ``max_entries``,
    which is capped at ``MAX_HISTORY``.
    """

    def __init__(self, start: Path | None = None, max_entries: int = MAX_HISTORY) -> None:
        self.max_entries = max(1, min(max_entries, MAX_HISTORY))
        self.paths: list[Path] = []
        self.cursor = 0
        if start is not None:
            self.paths.append(start)

    def __len__(self) -> int:
        return len(self.paths)

    @property
    def current(self) -> Path | None:
        if not self.paths:
            return None
        return self.paths[self.cursor]

    def can_go_back(self) -> bool:
        return self.cursor > 0

    def can_go_forward(self) -> bool:
        return self.cursor < len(self.paths) - 1

    def push(self, path: Path) -> None:
        """Record ``path`` as the new current location."""
        if self.can_go_forward():
            del self.paths[self.cursor + 1 :]
        if self.paths and self.paths[-1] == path:
            self.cursor = len(self.paths) - 1
            return
        self.paths.append(path)
        overflow = len(self.paths) - self.max_entries
        if overflow > 0:
            del self.paths[:overflow]
        self.cursor = len(self.paths) - 1

    def peek(self, step: int) -> Path | None:
        """Return the path ``step`` positions away, or ``None`` when out of range."""
        target = self.cursor + step
        if target < 0 or target >= len(self.paths):
            return None
        return self.paths[target]

    def snapshot(self) -> tuple[list[Path], int]:
        return list(self.paths), self.cursor

    def restore(self, snapshot: tuple[list[Path], int]) -> None:
        paths, cursor = snapshot
        self.paths = list(paths)
        self.cursor = cursor


__all__ = ["MAX_HISTORY", "NavigationHistory"]
