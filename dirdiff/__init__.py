"""Public package surface for dirdiff.

Answers whether two directory trees differ in file names or contents.
``is_different`` is the main entry point; ``see_difference`` and ``DirDiff``
give more detail for failing test fixtures.
"""

from __future__ import annotations

from .compare import DirectoryEntryRecord, collect_records, is_different
from .config import CompareOptions, load_compare_options
from .errors import DirDiffError, ReadError, WalkError
from .pairs import AssertionKind, DiffEntry, DirDiff, EntryAssertionError, FileKind, SideEntry, assert_entry, check_entry
from .report import Mismatch, MismatchKind, TreeMismatchError, assert_same, see_difference
from .walk import WalkEntry, walk_tree

__all__ = [
    "is_different",
    "see_difference",
    "assert_same",
    "DirDiff",
    "DiffEntry",
    "SideEntry",
    "FileKind",
    "AssertionKind",
    "check_entry",
    "assert_entry",
    "EntryAssertionError",
    "Mismatch",
    "MismatchKind",
    "TreeMismatchError",
    "DirectoryEntryRecord",
    "collect_records",
    "WalkEntry",
    "walk_tree",
    "CompareOptions",
    "load_compare_options",
    "DirDiffError",
    "WalkError",
    "ReadError",
]
