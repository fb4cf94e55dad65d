"""First-mismatch reporting for test fixtures.

``see_difference`` walks both roots exactly like ``is_different`` but returns
a description of the first discrepancy instead of a bare boolean. Text files
are compared line by line so a failing fixture points at the offending line.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from .compare import PathInput, collect_records, read_file_bytes, resolve_walker
from .config import CompareOptions
from .walk import Walker

logger = logging.getLogger(__name__)


class MismatchKind(enum.Enum):
    MISSING_FILES = "missing-files"
    FILE_NAME = "file-name"
    BINARY_CONTENT = "binary-content"
    LINE_COUNT = "line-count"
    LINE_CONTENT = "line-content"


@dataclass(frozen=True)
class Mismatch:
    """First difference found between two trees.

    Paths are root-relative. ``line_number`` is 0-based and, like the two
    line fields, only set for ``LINE_CONTENT``.
    """

    kind: MismatchKind
    a_path: PurePath | None = None
    b_path: PurePath | None = None
    line_number: int | None = None
    a_line: str | None = None
    b_line: str | None = None

    def describe(self) -> str:
        if self.kind is MismatchKind.MISSING_FILES:
            return "one directory has more or fewer files than the other"
        if self.kind is MismatchKind.FILE_NAME:
            return f"file names differ: {self.a_path} vs {self.b_path}"
        if self.kind is MismatchKind.BINARY_CONTENT:
            return f"binary content differs: {self.a_path}"
        if self.kind is MismatchKind.LINE_COUNT:
            return f"line count differs: {self.a_path}"
        return f"line {self.line_number} differs in {self.a_path}:\n  a: {self.a_line!r}\n  b: {self.b_line!r}"


class TreeMismatchError(AssertionError):
    """Raised by ``assert_same`` when two trees differ."""

    def __init__(self, mismatch: Mismatch, root_a: Path, root_b: Path) -> None:
        self.mismatch = mismatch
        self.root_a = root_a
        self.root_b = root_b
        super().__init__(f"{root_a} and {root_b} differ: {mismatch.describe()}")


def _decode(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _compare_contents(relative_path: PurePath, data_a: bytes, data_b: bytes) -> Mismatch | None:
    text_a = _decode(data_a)
    text_b = _decode(data_b)
    if text_a is None or text_b is None:
        if text_a is None and text_b is None and data_a == data_b:
            return None
        return Mismatch(MismatchKind.BINARY_CONTENT, relative_path, relative_path)

    lines_a = text_a.splitlines()
    lines_b = text_b.splitlines()
    if len(lines_a) != len(lines_b):
        return Mismatch(MismatchKind.LINE_COUNT, relative_path, relative_path)
    for line_number, (line_a, line_b) in enumerate(zip(lines_a, lines_b)):
        if line_a != line_b:
            return Mismatch(
                MismatchKind.LINE_CONTENT,
                relative_path,
                relative_path,
                line_number=line_number,
                a_line=line_a,
                b_line=line_b,
            )
    return None


def see_difference(
    root_a: PathInput,
    root_b: PathInput,
    *,
    walker: Walker | None = None,
    options: CompareOptions | None = None,
) -> Mismatch | None:
    """Return the first ``Mismatch`` between two trees, or ``None`` when equal.

    Raises ``DirDiffError`` when either tree cannot be fully inspected.
    """
    walk = resolve_walker(walker, options)
    root_a = Path(root_a)
    root_b = Path(root_b)
    records_a = collect_records(root_a, walk)
    records_b = collect_records(root_b, walk)

    if len(records_a) != len(records_b):
        return Mismatch(MismatchKind.MISSING_FILES)

    for a, b in zip(records_a, records_b):
        if a.key != b.key:
            return Mismatch(MismatchKind.FILE_NAME, a.relative_path, b.relative_path)
        mismatch = _compare_contents(a.relative_path, read_file_bytes(a.path, root_a), read_file_bytes(b.path, root_b))
        if mismatch is not None:
            logger.debug("%s", mismatch.describe())
            return mismatch

    return None


def assert_same(
    root_a: PathInput,
    root_b: PathInput,
    *,
    walker: Walker | None = None,
    options: CompareOptions | None = None,
) -> None:
    """Raise ``TreeMismatchError`` unless both trees hold the same files."""
    mismatch = see_difference(root_a, root_b, walker=walker, options=options)
    if mismatch is not None:
        raise TreeMismatchError(mismatch, Path(root_a), Path(root_b))


__all__ = [
    "MismatchKind",
    "Mismatch",
    "TreeMismatchError",
    "see_difference",
    "assert_same",
]
