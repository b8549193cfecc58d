"""Tests for the greedy line aligner and file comparison."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dualpane.diff import DiffCounts, DiffKind, DiffLine, compare, compute_diff, decode_text, split_lines
from dualpane.errors import ComparisonError, FileAccessError, IsDirectoryError

E = DiffKind.EQUAL
A = DiffKind.ADDED
R = DiffKind.REMOVED
M = DiffKind.MODIFIED


def _kinds(lines: list[DiffLine]) -> list[DiffKind]:
    return [line.kind for line in lines]


class ComputeDiffTests(unittest.TestCase):
    def test_single_changed_line_is_modified(self) -> None:
        lines = compute_diff(["a", "b", "c"], ["a", "x", "c"])

        self.assertEqual(_kinds(lines), [E, M, E])
        self.assertEqual(lines[1], DiffLine(M, 2, 2, "b", "x"))
        self.assertEqual(DiffCounts.tally(lines), DiffCounts(equal=2, added=0, removed=0, modified=1))

    def test_removed_line_resyncs_with_one_line_lookahead(self) -> None:
        lines = compute_diff(["a", "b", "c"], ["a", "c"])

        self.assertEqual(_kinds(lines), [E, R, E])
        self.assertEqual(lines[1], DiffLine(R, 2, None, "b", ""))
        self.assertEqual(lines[2], DiffLine(E, 3, 2, "c", "c"))

    def test_added_line_resyncs_with_one_line_lookahead(self) -> None:
        lines = compute_diff(["a", "c"], ["a", "b", "c"])

        self.assertEqual(_kinds(lines), [E, A, E])
        self.assertEqual(lines[1], DiffLine(A, None, 2, "", "b"))

    def test_removed_side_wins_ties_at_same_distance(self) -> None:
        lines = compute_diff(["x", "y"], ["y", "x"])

        self.assertEqual(_kinds(lines), [R, E, A])
        self.assertEqual([(line.left_line_number, line.right_line_number) for line in lines], [(1, None), (2, 1), (None, 2)])

    def test_smallest_distance_wins(self) -> None:
        lines = compute_diff(["p", "q", "r", "s"], ["s", "z", "p"])

        self.assertEqual(_kinds(lines), [A, A, E, R, R, R])

    def test_multi_line_removal_emits_numbered_rows(self) -> None:
        lines = compute_diff(["a", "b1", "b2", "b3", "c"], ["a", "c"])

        self.assertEqual(_kinds(lines), [E, R, R, R, E])
        self.assertEqual([line.left_line_number for line in lines[1:4]], [2, 3, 4])
        self.assertEqual([line.left_text for line in lines[1:4]], ["b1", "b2", "b3"])

    def test_resync_beyond_window_pairs_lines_as_modified(self) -> None:
        left = ["a", "1", "2", "3", "4", "5", "6", "z"]
        right = ["z"]

        lines = compute_diff(left, right)

        self.assertEqual(_kinds(lines), [M, R, R, R, R, R, R, R])
        self.assertEqual(lines[0], DiffLine(M, 1, 1, "a", "z"))

    def test_resync_exactly_at_window_edge(self) -> None:
        left = ["1", "2", "3", "4", "5", "z"]
        right = ["z"]

        self.assertEqual(_kinds(compute_diff(left, right)), [R, R, R, R, R, E])

    def test_exhausted_sides(self) -> None:
        self.assertEqual(_kinds(compute_diff([], ["a", "b"])), [A, A])
        self.assertEqual(_kinds(compute_diff(["a", "b"], [])), [R, R])
        self.assertEqual(compute_diff([], []), [])

    def test_lookahead_window_is_adjustable(self) -> None:
        self.assertEqual(_kinds(compute_diff(["a", "b", "c"], ["a", "c"], lookahead=0)), [E, M, R])


class LineSplittingTests(unittest.TestCase):
    def test_trailing_newline_does_not_add_empty_line(self) -> None:
        self.assertEqual(split_lines("a\nb\n"), ["a", "b"])

    def test_trailing_partial_line_is_kept(self) -> None:
        self.assertEqual(split_lines("a\nb"), ["a", "b"])

    def test_crlf_is_stripped(self) -> None:
        self.assertEqual(split_lines("a\r\nb\r\n"), ["a", "b"])

    def test_carriage_return_on_unterminated_last_line_is_kept(self) -> None:
        self.assertEqual(split_lines("a\r\nb\r"), ["a", "b\r"])

    def test_blank_lines_are_kept(self) -> None:
        self.assertEqual(split_lines("a\n\n\nb\n"), ["a", "", "", "b"])
        self.assertEqual(split_lines(""), [])

    def test_decode_falls_back_to_latin1(self) -> None:
        self.assertEqual(decode_text("café".encode("utf-8")), "café")
        self.assertEqual(decode_text(b"caf\xe9"), "café")


class CompareFilesTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, name: str, text: str) -> Path:
        path = self.root / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    def test_byte_identical_files_short_circuit(self) -> None:
        left = self.write("left.txt", "same\ncontent\n")
        right = self.write("right.txt", "same\ncontent\n")

        result = compare(left, right)

        self.assertTrue(result.identical)
        self.assertEqual(result.lines, ())
        self.assertEqual(result.counts, DiffCounts())
        self.assertEqual(result.left_path, left)
        self.assertEqual(result.right_path, right)

    def test_same_length_different_bytes_fall_through_to_lines(self) -> None:
        left = self.write("left.txt", "a\nb\nc\n")
        right = self.write("right.txt", "a\nx\nc\n")

        result = compare(left, right)

        self.assertFalse(result.identical)
        self.assertEqual(_kinds(list(result.lines)), [E, M, E])
        self.assertEqual(result.counts, DiffCounts(equal=2, added=0, removed=0, modified=1))

    def test_different_lengths(self) -> None:
        left = self.write("left.txt", "a\nb\nc\n")
        right = self.write("right.txt", "a\nc\n")

        result = compare(left, right)

        self.assertEqual(_kinds(list(result.lines)), [E, R, E])
        self.assertEqual(result.counts.removed, 1)
        self.assertFalse(result.identical)

    def test_line_ending_only_differences_are_identical_line_wise(self) -> None:
        left = self.write("left.txt", "a\r\nb\r\n")
        right = self.write("right.txt", "a\nb\n")

        result = compare(left, right)

        self.assertTrue(result.identical)
        self.assertEqual(_kinds(list(result.lines)), [E, E])
        self.assertEqual(result.counts.equal, 2)

    def test_directory_operand_raises(self) -> None:
        left = self.write("left.txt", "a\n")
        folder = self.root / "folder"
        folder.mkdir()

        with self.assertRaises(IsDirectoryError) as ctx:
            compare(left, folder)
        self.assertIsInstance(ctx.exception, ComparisonError)
        self.assertEqual(ctx.exception.path, folder)

        with self.assertRaises(IsDirectoryError):
            compare(folder, left)

    def test_missing_file_raises_file_access_error(self) -> None:
        left = self.write("left.txt", "a\n")

        with self.assertRaises(FileAccessError):
            compare(left, self.root / "missing.txt")


if __name__ == "__main__":
    unittest.main()
