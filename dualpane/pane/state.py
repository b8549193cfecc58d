"""Browsing state for one pane: listing, cursor, sort, filter, history, selection.

Every mutating operation is transactional. A listing failure raises and
leaves the previously displayed entries, cursor, path, and history untouched,
so a transient read error never blanks the pane.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from ..errors import InvalidPathError
from ..listing.fs import default_start_path, has_parent, list_directory
from ..listing.types import Entry, VcsStatus
from .history import MAX_HISTORY, NavigationHistory
from .selection import SelectionRange
from .sorting import SortDirection, SortKey, sort_entries

logger = logging.getLogger(__name__)

Lister = Callable[..., list[Entry]]
VcsStatusProvider = Callable[[Path], Mapping[Path, VcsStatus]]


def canonical_directory(path: Path | str) -> Path:
    """Resolve ``path`` to an absolute canonical path or raise ``InvalidPathError``."""
    candidate = Path(path).expanduser()
    try:
        return candidate.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise InvalidPathError(candidate) from exc


class PaneState:
    """One independent directory-browsing session."""

    def __init__(
        self,
        start_path: Path | str | None = None,
        *,
        sort_key: SortKey = SortKey.NAME,
        sort_direction: SortDirection = SortDirection.ASCENDING,
        show_hidden: bool = False,
        history_limit: int = MAX_HISTORY,
        lister: Lister = list_directory,
        vcs_status_provider: VcsStatusProvider | None = None,
    ) -> None:
        """Bind the pane to ``start_path`` (default: home, cwd, or root) and list it.

        Raises ``InvalidPathError`` or ``FileAccessError`` when the starting
        directory cannot be listed.
        """
        self.current_path = canonical_directory(start_path if start_path is not None else default_start_path())
        self.entries: list[Entry] = []
        self.cursor = 0
        self.scroll_offset = 0
        self.sort_key = sort_key
        self.sort_direction = sort_direction
        self.filter_substring = ""
        self.show_hidden = show_hidden
        self.selection_range: SelectionRange | None = None
        self.history = NavigationHistory(self.current_path, max_entries=history_limit)
        self._lister = lister
        self._vcs_status_provider = vcs_status_provider
        self.refresh()

    @property
    def history_cursor(self) -> int:
        return self.history.cursor

    def refresh(self) -> None:
        """Re-list ``current_path`` and re-apply the active sort."""
        overlay = None
        if self._vcs_status_provider is not None:
            overlay = self._vcs_status_provider(self.current_path)
        entries = self._lister(self.current_path, overlay)
        if not has_parent(self.current_path):
            entries = [entry for entry in entries if not entry.is_parent_link]

        self.entries = sort_entries(entries, self.sort_key, self.sort_direction)
        self.cursor = self._clamp(self.cursor)
        if self.selection_range is not None and self.selection_range.end >= len(self.entries):
            self.selection_range = None

    def navigate_to(self, path: Path | str) -> None:
        """Show ``path`` and record it in history.

        On failure the previous path, entries, and history are kept and the
        error is re-raised.
        """
        target = canonical_directory(path)
        previous_path = self.current_path
        self.current_path = target
        try:
            self.refresh()
        except Exception:
            self.current_path = previous_path
            raise

        self._reset_view()
        self.history.push(target)
        logger.info("navigated to %s", target)

    def navigate_back(self) -> None:
        self._step_history(-1)

    def navigate_forward(self) -> None:
        self._step_history(1)

    def can_go_back(self) -> bool:
        return self.history.can_go_back()

    def can_go_forward(self) -> bool:
        return self.history.can_go_forward()

    def _step_history(self, step: int) -> None:
        """Move one history step; a no-op at either boundary."""
        target = self.history.peek(step)
        if target is None:
            return

        snapshot = self.history.snapshot()
        previous_path = self.current_path
        self.history.cursor += step
        self.current_path = target
        try:
            self.refresh()
        except Exception:
            self.history.restore(snapshot)
            self.current_path = previous_path
            raise

        self._reset_view()
        logger.info("history moved to %s", target)

    def enter_selected(self) -> None:
        """Open the directory under the cursor; files are left to the caller."""
        entry = self.selected_entry()
        if entry is None or not entry.is_directory:
            return
        if entry.is_parent_link:
            target = self.current_path.parent
        else:
            target = entry.absolute_path
        self.navigate_to(canonical_directory(target))

    def _reset_view(self) -> None:
        self.cursor = 0
        self.scroll_offset = 0
        self.selection_range = None

    def _clamp(self, index: int) -> int:
        if not self.entries:
            return 0
        return max(0, min(index, len(self.entries) - 1))

    def move_cursor(self, delta: int) -> None:
        self.cursor = self._clamp(self.cursor + delta)
        self.selection_range = None

    def extend_selection(self, delta: int) -> None:
        """Move the cursor while growing a selection anchored where it started."""
        if not self.entries:
            return
        anchor = self.selection_range.anchor if self.selection_range is not None else self.cursor
        self.cursor = self._clamp(self.cursor + delta)
        self.selection_range = SelectionRange(anchor=anchor, active=self.cursor)

    def clear_selection(self) -> None:
        self.selection_range = None

    def is_selected(self, index: int) -> bool:
        return self.selection_range is not None and self.selection_range.contains(index)

    def toggle_sort(self, key: SortKey) -> None:
        """Flip direction for the active key, or switch to ``key`` ascending."""
        if key is self.sort_key:
            self.sort_direction = self.sort_direction.flipped()
        else:
            self.sort_key = key
            self.sort_direction = SortDirection.ASCENDING
        self.entries = sort_entries(self.entries, self.sort_key, self.sort_direction)

    def apply_filter(self, substring: str) -> None:
        """Store a case-insensitive display filter; ``entries`` is not touched."""
        self.filter_substring = substring

    def visible_entries(self) -> list[tuple[int, Entry]]:
        """``(index, entry)`` pairs passing the hidden-name rule and filter.

        The parent link is always visible. Indices refer to ``entries``.
        """
        needle = self.filter_substring.lower()
        visible: list[tuple[int, Entry]] = []
        for index, entry in enumerate(self.entries):
            if entry.is_parent_link:
                visible.append((index, entry))
                continue
            if needle and needle not in entry.display_name.lower():
                continue
            if not self.show_hidden and entry.is_hidden:
                continue
            visible.append((index, entry))
        return visible

    def selected_entry(self) -> Entry | None:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def selected_entries(self) -> list[Entry]:
        """Entries covered by the selection range, else the entry under the cursor."""
        if self.selection_range is not None:
            return [self.entries[index] for index in self.selection_range.indices() if index < len(self.entries)]
        entry = self.selected_entry()
        return [entry] if entry is not None else []

    def update_scroll(self, viewport_height: int) -> None:
        """Scroll just enough to keep the cursor inside a viewport of ``viewport_height`` rows."""
        viewport_height = max(1, viewport_height)
        if self.cursor < self.scroll_offset:
            self.scroll_offset = self.cursor
        elif self.cursor >= self.scroll_offset + viewport_height:
            self.scroll_offset = self.cursor - viewport_height + 1


__all__ = ["PaneState", "canonical_directory"]
