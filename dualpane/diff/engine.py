"""Greedy line aligner for comparing two text files.

After a mismatch the aligner looks at most ``DIFF_LOOKAHEAD`` lines ahead on
each side for a resync point. At each distance the removed side is tried
before the added side and the smallest distance wins; with no resync the two
current lines are paired as modified. The output is not a minimal edit
script and must keep exactly this tie-break order.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..errors import FileAccessError, IsDirectoryError
from .types import DiffCounts, DiffKind, DiffLine, DiffResult

logger = logging.getLogger(__name__)

DIFF_LOOKAHEAD = 5


def decode_text(data: bytes) -> str:
    """Decode as UTF-8, falling back to latin-1 for non-UTF-8 bytes."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def split_lines(text: str) -> list[str]:
    """Split on ``\\n``, dropping the ``\\r`` of each ``\\r\\n`` terminator.

    A final newline does not produce an empty last line; a trailing partial
    line is kept as is, including a lone trailing ``\\r``.
    """
    *terminated, tail = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if tail:
        lines.append(tail)
    return lines


def compute_diff(left: Sequence[str], right: Sequence[str], lookahead: int = DIFF_LOOKAHEAD) -> list[DiffLine]:
    """Align two line sequences into ``DiffLine`` rows."""
    out: list[DiffLine] = []
    i = 0
    j = 0
    while i < len(left) or j < len(right):
        if i >= len(left):
            out.append(DiffLine(DiffKind.ADDED, None, j + 1, "", right[j]))
            j += 1
            continue
        if j >= len(right):
            out.append(DiffLine(DiffKind.REMOVED, i + 1, None, left[i], ""))
            i += 1
            continue
        if left[i] == right[j]:
            out.append(DiffLine(DiffKind.EQUAL, i + 1, j + 1, left[i], right[j]))
            i += 1
            j += 1
            continue

        resynced = False
        for distance in range(1, lookahead + 1):
            if i + distance < len(left) and left[i + distance] == right[j]:
                for _ in range(distance):
                    out.append(DiffLine(DiffKind.REMOVED, i + 1, None, left[i], ""))
                    i += 1
                resynced = True
                break
            if j + distance < len(right) and left[i] == right[j + distance]:
                for _ in range(distance):
                    out.append(DiffLine(DiffKind.ADDED, None, j + 1, "", right[j]))
                    j += 1
                resynced = True
                break

        if not resynced:
            out.append(DiffLine(DiffKind.MODIFIED, i + 1, j + 1, left[i], right[j]))
            i += 1
            j += 1
    return out


def _stat_regular(path: Path) -> os.stat_result:
    try:
        st = path.stat()
    except OSError as exc:
        raise FileAccessError(path, exc) from exc
    if path.is_dir():
        raise IsDirectoryError(path)
    return st


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileAccessError(path, exc) from exc


def compare(left_path: Path | str, right_path: Path | str) -> DiffResult:
    """Compare two files line by line.

    Raises ``IsDirectoryError`` when either side is a directory and
    ``FileAccessError`` when either side cannot be read. Byte-identical files
    short-circuit to an empty, identical result.
    """
    left_path = Path(left_path)
    right_path = Path(right_path)
    left_stat = _stat_regular(left_path)
    right_stat = _stat_regular(right_path)

    left_data = _read_bytes(left_path)
    right_data = _read_bytes(right_path)
    if left_stat.st_size == right_stat.st_size and left_data == right_data:
        logger.debug("%s and %s are byte-identical", left_path, right_path)
        return DiffResult(left_path=left_path, right_path=right_path, identical=True)

    lines = compute_diff(split_lines(decode_text(left_data)), split_lines(decode_text(right_data)))
    counts = DiffCounts.tally(lines)
    return DiffResult(
        left_path=left_path,
        right_path=right_path,
        identical=counts.changed == 0,
        lines=tuple(lines),
        counts=counts,
    )


__all__ = ["DIFF_LOOKAHEAD", "compare", "compute_diff", "decode_text", "split_lines"]
