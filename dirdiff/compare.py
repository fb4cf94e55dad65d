"""Tree comparison: walk both roots, sort, then compare positionally.

Comparison is index-aligned after sorting rather than keyed by name, so one
extra file shifts every later position. Any discrepancy still yields
``True``; the first reported cause is just not always the most specific one.
Directories are traversed but never recorded, so an empty directory present
on one side only goes unnoticed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from .config import CompareOptions
from .errors import ReadError
from .walk import Walker, relative_to_root, sort_key, walk_tree

logger = logging.getLogger(__name__)

PathInput = str | os.PathLike[str]


@dataclass(frozen=True)
class DirectoryEntryRecord:
    """One regular file found under a root, keyed by its root-relative path."""

    relative_path: PurePath
    path: Path
    is_file: bool = True

    @property
    def key(self) -> bytes:
        return sort_key(self.relative_path)


WalkResult = tuple[DirectoryEntryRecord, ...]


def resolve_walker(walker: Walker | None, options: CompareOptions | None) -> Walker:
    """Return ``walker`` or a ``walk_tree`` bound to ``options``."""
    if walker is not None:
        return walker
    follow_symlinks = (options or CompareOptions()).follow_symlinks
    return lambda root: walk_tree(root, follow_symlinks=follow_symlinks)


def collect_records(root: PathInput, walker: Walker) -> WalkResult:
    """Walk ``root`` and return its regular files sorted by relative path bytes."""
    root_path = Path(root)
    records = [
        DirectoryEntryRecord(relative_path=relative_to_root(root_path, entry.path), path=Path(entry.path))
        for entry in walker(root_path)
        if entry.is_file
    ]
    records.sort(key=lambda record: record.key)
    logger.debug("collected %d file(s) under %s", len(records), root_path)
    return tuple(records)


def read_file_bytes(path: Path, root: Path | None = None) -> bytes:
    """Read the whole of ``path``; failures raise ``ReadError``."""
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise ReadError("cannot read file", root=root, path=path) from exc


def is_different(
    root_a: PathInput,
    root_b: PathInput,
    *,
    walker: Walker | None = None,
    options: CompareOptions | None = None,
) -> bool:
    """Return whether two directory trees differ in file names or contents.

    Raises ``DirDiffError`` (``WalkError`` or ``ReadError``) when either tree
    cannot be fully inspected.
    """
    walk = resolve_walker(walker, options)
    root_a = Path(root_a)
    root_b = Path(root_b)
    records_a = collect_records(root_a, walk)
    records_b = collect_records(root_b, walk)

    if len(records_a) != len(records_b):
        logger.debug("file count differs: %d vs %d", len(records_a), len(records_b))
        return True

    for a, b in zip(records_a, records_b):
        if a.key != b.key:
            logger.debug("path differs: %s vs %s", a.relative_path, b.relative_path)
            return True
        if read_file_bytes(a.path, root_a) != read_file_bytes(b.path, root_b):
            logger.debug("content differs: %s", a.relative_path)
            return True

    return False


__all__ = [
    "DirectoryEntryRecord",
    "WalkResult",
    "resolve_walker",
    "collect_records",
    "read_file_bytes",
    "is_different",
]
