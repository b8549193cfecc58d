"""Whole-file text matching for content-filtered searches."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def file_contains(path: Path, needle: str, case_sensitive: bool) -> bool:
    """Return whether the whole UTF-8 text of ``path`` contains ``needle``.

    Unreadable files and files that are not valid UTF-8 never match.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("content check skipped %s: %s", path, exc)
        return False

    if case_sensitive:
        return needle in text
    return needle.lower() in text.lower()


__all__ = ["file_contains"]
