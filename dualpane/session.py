"""Left/right pane pair with an active-pane pointer.

The two panes never share mutable state. Cross-pane file operations live in
the front end; afterwards it calls ``refresh_all`` or refreshes one pane.
"""

from __future__ import annotations

from pathlib import Path

from . import config
from .pane.state import PaneState


class DualPaneSession:
    """Two independent ``PaneState`` values, one of them active."""

    def __init__(self, left: PaneState, right: PaneState) -> None:
        self.left = left
        self.right = right
        self.active_index = 0

    @classmethod
    def from_config(cls, left_path: Path | str | None = None, right_path: Path | str | None = None) -> DualPaneSession:
        """Open both panes with the persisted sort, hidden-file, and history settings."""
        sort_key, sort_direction = config.load_sort_preference()
        options = {
            "sort_key": sort_key,
            "sort_direction": sort_direction,
            "show_hidden": config.load_show_hidden(),
            "history_limit": config.load_history_limit(),
        }
        return cls(PaneState(left_path, **options), PaneState(right_path, **options))

    @property
    def panes(self) -> tuple[PaneState, PaneState]:
        return self.left, self.right

    @property
    def active(self) -> PaneState:
        return self.panes[self.active_index]

    @property
    def inactive(self) -> PaneState:
        return self.panes[1 - self.active_index]

    def switch_pane(self) -> None:
        self.active_index = 1 - self.active_index

    def refresh_all(self) -> None:
        """Refresh both panes, re-raising the first failure after trying both."""
        first_error: Exception | None = None
        for pane in self.panes:
            try:
                pane.refresh()
            except Exception as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error


__all__ = ["DualPaneSession"]
