"""Side-by-side pairing of entries from two trees.

Iterating ``DirDiff`` yields each left entry with its right counterpart at
the same relative path, then the right entries that have no left
counterpart. ``check_entry``/``assert_entry`` classify a single pair, which
lets fixtures report every differing path rather than stopping at the first.
"""

from __future__ import annotations

import enum
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .compare import PathInput, read_file_bytes
from .errors import WalkError
from .walk import relative_to_root, walk_tree


class FileKind(enum.Enum):
    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    OTHER = "other"


class AssertionKind(enum.Enum):
    """Why a ``DiffEntry`` failed ``check_entry``."""

    MISSING = "missing"
    FILE_TYPE = "file-type"
    CONTENT = "content"


@dataclass(frozen=True)
class SideEntry:
    """One side of a pair; ``kind`` is ``None`` when the path does not exist."""

    path: Path
    kind: FileKind | None

    @property
    def exists(self) -> bool:
        return self.kind is not None


@dataclass(frozen=True)
class DiffEntry:
    left: SideEntry
    right: SideEntry


def _kind_from_mode(mode: int) -> FileKind:
    if stat.S_ISLNK(mode):
        return FileKind.SYMLINK
    if stat.S_ISDIR(mode):
        return FileKind.DIR
    if stat.S_ISREG(mode):
        return FileKind.FILE
    return FileKind.OTHER


def side_entry(path: Path, root: Path) -> SideEntry:
    """``lstat`` ``path``; a missing path yields a ``SideEntry`` with no kind."""
    try:
        mode = os.lstat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return SideEntry(path=path, kind=None)
    except OSError as exc:
        raise WalkError("cannot stat entry", root=root, path=path) from exc
    return SideEntry(path=path, kind=_kind_from_mode(mode))


class DirDiff:
    """Iterable of ``DiffEntry`` pairs covering both trees."""

    def __init__(self, left_root: PathInput, right_root: PathInput, *, follow_symlinks: bool = False) -> None:
        self.left_root = Path(left_root)
        self.right_root = Path(right_root)
        self.follow_symlinks = follow_symlinks

    def __repr__(self) -> str:
        return f"DirDiff(left_root={self.left_root!r}, right_root={self.right_root!r})"

    def __iter__(self) -> Iterator[DiffEntry]:
        for entry in walk_tree(self.left_root, follow_symlinks=self.follow_symlinks):
            relative = relative_to_root(self.left_root, entry.path)
            yield DiffEntry(
                left=side_entry(entry.path, self.left_root),
                right=side_entry(self.right_root / relative, self.right_root),
            )

        for entry in walk_tree(self.right_root, follow_symlinks=self.follow_symlinks):
            relative = relative_to_root(self.right_root, entry.path)
            left = side_entry(self.left_root / relative, self.left_root)
            # pairs with both sides present were produced by the left walk
            if not left.exists:
                yield DiffEntry(left=left, right=side_entry(entry.path, self.right_root))


class EntryAssertionError(AssertionError):
    """A ``DiffEntry`` whose two sides differ.

    ``cause`` optionally holds the error met while deciding the difference.
    """

    def __init__(
        self,
        kind: AssertionKind,
        entry: DiffEntry,
        msg: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.entry = entry
        self.msg = msg
        self.cause = cause
        super().__init__(kind, entry)

    def with_msg(self, msg: str) -> EntryAssertionError:
        self.msg = msg
        return self

    def with_cause(self, cause: BaseException) -> EntryAssertionError:
        self.cause = cause
        return self

    def __str__(self) -> str:
        left = self.entry.left
        right = self.entry.right
        msg = self.msg or ""
        if self.kind is AssertionKind.MISSING:
            text = f"One side is missing: {msg}\n  left: {left.path}\n  right: {right.path}"
        elif self.kind is AssertionKind.FILE_TYPE:
            text = (
                f"File types differ: {msg}\n"
                f"  left: {left.path} is {_display_kind(left.kind)}\n"
                f"  right: {right.path} is {_display_kind(right.kind)}"
            )
        else:
            text = f"Content differs: {msg}\n  left: {left.path}\n  right: {right.path}"
        if self.cause is not None:
            text += f"\ncause: {self.cause}"
        return text


def _display_kind(kind: FileKind | None) -> str:
    return kind.value if kind is not None else "missing"


def check_entry(entry: DiffEntry) -> AssertionKind | None:
    """Classify a pair; ``None`` means both sides match."""
    if not entry.left.exists or not entry.right.exists:
        return AssertionKind.MISSING
    if entry.left.kind is not entry.right.kind:
        return AssertionKind.FILE_TYPE
    if entry.left.kind is FileKind.FILE:
        if read_file_bytes(entry.left.path) != read_file_bytes(entry.right.path):
            return AssertionKind.CONTENT
    return None


def assert_entry(entry: DiffEntry) -> None:
    """Raise ``EntryAssertionError`` when ``check_entry`` finds a difference."""
    kind = check_entry(entry)
    if kind is not None:
        raise EntryAssertionError(kind, entry)


__all__ = [
    "FileKind",
    "AssertionKind",
    "SideEntry",
    "DiffEntry",
    "DirDiff",
    "EntryAssertionError",
    "side_entry",
    "check_entry",
    "assert_entry",
]
