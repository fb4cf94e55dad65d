"""Exception hierarchy for directory comparison failures.

Every I/O problem met while inspecting either tree surfaces as a
``DirDiffError`` subclass carrying the root and path involved. A detected
difference is never reported through these types.
"""

from __future__ import annotations

from pathlib import Path


class DirDiffError(Exception):
    """Base error for failures that prevent a comparison from completing."""

    def __init__(self, message: str, *, root: Path | None = None, path: Path | None = None) -> None:
        self.message = message
        self.root = root
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.root is not None:
            parts.append(f"root: {self.root}")
        if self.path is not None and self.path != self.root:
            parts.append(f"path: {self.path}")
        cause = self.__cause__
        if cause is not None:
            parts.append(f"cause: {cause}")
        return "\n  ".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, root={self.root!r}, path={self.path!r})"


class WalkError(DirDiffError):
    """Traversal of a root failed (missing, not a directory, unreadable, ...)."""


class ReadError(DirDiffError):
    """A discovered file could not be read in full."""


__all__ = [
    "DirDiffError",
    "WalkError",
    "ReadError",
]
