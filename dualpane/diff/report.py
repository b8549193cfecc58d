"""Text reports for comparison results, optionally highlighted with Pygments.

Modified rows are printed as a ``-``/``+`` pair so the report reads like a
unified diff body. Terminal control bytes in file text are escaped before
anything is written to a terminal.
"""

from __future__ import annotations

import re

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import DiffLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .types import DiffKind, DiffResult

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FALLBACK_STYLE = "monokai"
_FORMATTERS: dict[str, TerminalFormatter] = {}


def sanitize_terminal_text(text: str) -> str:
    """Escape C0/C1 control characters (bell, cursor moves, etc.) as ``\\xNN``."""
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def summary_line(result: DiffResult) -> str:
    if result.identical:
        return f"{result.left_path} and {result.right_path} are identical"
    counts = result.counts
    return (
        f"{result.left_path} -> {result.right_path}: "
        f"{counts.equal} equal, {counts.modified} modified, "
        f"{counts.added} added, {counts.removed} removed"
    )


def format_diff(result: DiffResult) -> str:
    """Render ``result`` as ``---``/``+++`` headers followed by prefixed rows."""
    out = [f"--- {result.left_path}\n", f"+++ {result.right_path}\n"]
    for line in result.lines:
        left_text = sanitize_terminal_text(line.left_text)
        right_text = sanitize_terminal_text(line.right_text)
        if line.kind is DiffKind.EQUAL:
            out.append(f" {left_text}\n")
        elif line.kind is DiffKind.REMOVED:
            out.append(f"-{left_text}\n")
        elif line.kind is DiffKind.ADDED:
            out.append(f"+{right_text}\n")
        else:
            out.append(f"-{left_text}\n")
            out.append(f"+{right_text}\n")
    return "".join(out)


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return _FALLBACK_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    """Return cached Pygments terminal formatter for style name."""
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_diff(report: str, style: str = _FALLBACK_STYLE) -> str:
    """Colour a ``format_diff`` report for a terminal; unknown styles use monokai."""
    formatter = _formatter_for_style(_normalize_style(style))
    return highlight(report, DiffLexer(), formatter)


__all__ = ["format_diff", "highlight_diff", "sanitize_terminal_text", "summary_line"]
