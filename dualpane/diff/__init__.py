"""Line-oriented file comparison and its text reports."""

from __future__ import annotations

from .engine import DIFF_LOOKAHEAD, compare, compute_diff, decode_text, split_lines
from .report import format_diff, highlight_diff, sanitize_terminal_text, summary_line
from .types import DiffCounts, DiffKind, DiffLine, DiffResult

__all__ = [
    "DIFF_LOOKAHEAD",
    "DiffCounts",
    "DiffKind",
    "DiffLine",
    "DiffResult",
    "compare",
    "compute_diff",
    "decode_text",
    "format_diff",
    "highlight_diff",
    "sanitize_terminal_text",
    "split_lines",
    "summary_line",
]
