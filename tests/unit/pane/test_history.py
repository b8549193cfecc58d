"""Tests for bounded navigation history."""

from __future__ import annotations

import unittest
from pathlib import Path

from dualpane.pane import NavigationHistory


class NavigationHistoryTests(unittest.TestCase):
    def test_push_suppresses_adjacent_duplicates(self) -> None:
        history = NavigationHistory(Path("/a"))

        history.push(Path("/a"))
        history.push(Path("/b"))
        history.push(Path("/b"))

        self.assertEqual(history.paths, [Path("/a"), Path("/b")])
        self.assertEqual(history.current, Path("/b"))

    def test_push_after_stepping_back_drops_forward_entries(self) -> None:
        history = NavigationHistory(Path("/a"))
        history.push(Path("/b"))
        history.push(Path("/c"))
        history.cursor = 0

        history.push(Path("/d"))

        self.assertEqual(history.paths, [Path("/a"), Path("/d")])
        self.assertEqual(history.cursor, 1)

    def test_push_returning_to_head_after_truncation_keeps_single_copy(self) -> None:
        history = NavigationHistory(Path("/a"))
        history.push(Path("/b"))
        history.cursor = 0

        history.push(Path("/a"))

        self.assertEqual(history.paths, [Path("/a")])
        self.assertEqual(history.cursor, 0)

    def test_overflow_evicts_oldest(self) -> None:
        history = NavigationHistory(max_entries=2)
        for name in ("a", "b", "c"):
            history.push(Path("/") / name)

        self.assertEqual(history.paths, [Path("/b"), Path("/c")])
        self.assertEqual(history.cursor, 1)

    def test_limit_above_maximum_is_capped(self) -> None:
        history = NavigationHistory(max_entries=100)
        for index in range(80):
            history.push(Path("/") / str(index))

        self.assertEqual(history.max_entries, 50)
        self.assertEqual(len(history), 50)
        self.assertEqual(history.current, Path("/79"))

    def test_peek_is_bounded(self) -> None:
        history = NavigationHistory(Path("/a"))
        history.push(Path("/b"))

        self.assertEqual(history.peek(-1), Path("/a"))
        self.assertIsNone(history.peek(1))
        self.assertIsNone(history.peek(-2))

    def test_empty_history_has_no_current(self) -> None:
        history = NavigationHistory()

        self.assertIsNone(history.current)
        self.assertFalse(history.can_go_back())
        self.assertFalse(history.can_go_forward())

    def test_restore_reverts_snapshot(self) -> None:
        history = NavigationHistory(Path("/a"))
        history.push(Path("/b"))
        snapshot = history.snapshot()

        history.push(Path("/c"))
        history.restore(snapshot)

        self.assertEqual(history.paths, [Path("/a"), Path("/b")])
        self.assertEqual(history.cursor, 1)


if __name__ == "__main__":
    unittest.main()
