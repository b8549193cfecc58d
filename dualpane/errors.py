"""Exceptions raised by the browsing, search, and diff engines.

Every public operation either returns normally or raises one of these.
Callers can catch ``DualPaneError`` to handle all engine failures at once.
"""

from __future__ import annotations

from pathlib import Path


class DualPaneError(Exception):
    """Base class for engine failures."""


class FileAccessError(DualPaneError):
    """A directory or file could not be opened, read, or stat'ed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{self.path}: {reason}")


class InvalidPathError(DualPaneError):
    """A navigation target does not exist or cannot be canonicalized."""

    def __init__(self, path: Path, reason: str = "no such directory") -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {reason}")


class ComparisonError(DualPaneError):
    """Two paths cannot be compared line by line."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class IsDirectoryError(ComparisonError):
    """One side of a comparison is a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"cannot compare directories: {Path(path)}")


__all__ = [
    "DualPaneError",
    "FileAccessError",
    "InvalidPathError",
    "ComparisonError",
    "IsDirectoryError",
]
