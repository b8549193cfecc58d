"""Human-readable size and timestamp labels for listing columns."""

from __future__ import annotations

from datetime import datetime

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


def format_size(size: int) -> str:
    """Format a byte count using 1024-based units with two decimals above bytes."""
    if size >= _GB:
        return f"{size / _GB:.2f} GB"
    if size >= _MB:
        return f"{size / _MB:.2f} MB"
    if size >= _KB:
        return f"{size / _KB:.2f} KB"
    return f"{size} B"


def format_date(mtime_ns: int) -> str:
    """Format a nanosecond timestamp as local ``YYYY-MM-DD HH:MM``."""
    return datetime.fromtimestamp(mtime_ns / 1_000_000_000).strftime("%Y-%m-%d %H:%M")


__all__ = ["format_size", "format_date"]
