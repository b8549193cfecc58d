"""Anchor-to-active selection spans used by shift-extend multi-select."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionRange:
    anchor: int
    active: int

    @property
    def start(self) -> int:
        return min(self.anchor, self.active)

    @property
    def end(self) -> int:
        return max(self.anchor, self.active)

    def bounds(self) -> tuple[int, int]:
        """Inclusive ``(start, end)`` index span."""
        return self.start, self.end

    def indices(self) -> range:
        return range(self.start, self.end + 1)

    def contains(self, index: int) -> bool:
        return self.start <= index <= self.end


__all__ = ["SelectionRange"]
