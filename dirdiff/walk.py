"""Lazy recursive directory traversal plus relative-path helpers.

``walk_tree`` is the default traversal primitive. Comparators accept any
``Walker`` callable so tests can substitute an in-memory sequence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path, PurePath

from .errors import WalkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    """One filesystem entry observed below a walk root."""

    path: Path
    depth: int
    is_file: bool
    is_dir: bool


Walker = Callable[[Path], Iterable[WalkEntry]]


def walk_tree(root: str | os.PathLike[str], *, follow_symlinks: bool = False) -> Iterator[WalkEntry]:
    """Yield every entry below ``root`` using an explicit stack.

    The root itself is not yielded. All entries of a directory are yielded
    before any of its subdirectories are listed, so nesting depth is bounded
    only by the filesystem. Any directory that cannot be listed raises
    ``WalkError``, including the root when it is missing or not a directory.
    """
    root_path = Path(root)
    logger.debug("walking %s", root_path)
    stack: list[tuple[Path, int]] = [(root_path, 0)]
    while stack:
        directory, depth = stack.pop()
        subdirectories: list[Path] = []
        for entry in _list_directory(root_path, directory, depth, follow_symlinks):
            yield entry
            if entry.is_dir:
                subdirectories.append(entry.path)
        # reversed so the first subdirectory is popped first
        stack.extend((subdirectory, depth + 1) for subdirectory in reversed(subdirectories))


def _list_directory(root: Path, directory: Path, depth: int, follow_symlinks: bool) -> list[WalkEntry]:
    try:
        with os.scandir(directory) as it:
            children = list(it)
    except NotADirectoryError as exc:
        raise WalkError("not a directory", root=root, path=directory) from exc
    except FileNotFoundError as exc:
        raise WalkError("directory not found", root=root, path=directory) from exc
    except OSError as exc:
        raise WalkError("cannot list directory", root=root, path=directory) from exc

    entries: list[WalkEntry] = []
    for child in children:
        try:
            is_dir = child.is_dir(follow_symlinks=follow_symlinks)
            is_file = child.is_file(follow_symlinks=follow_symlinks)
        except OSError as exc:
            raise WalkError("cannot stat entry", root=root, path=Path(child.path)) from exc
        entries.append(WalkEntry(path=Path(child.path), depth=depth, is_file=is_file, is_dir=is_dir))
    return entries


def relative_to_root(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> PurePath:
    """Strip the ``root`` prefix from ``path``.

    Raises ``WalkError`` when ``path`` does not live under ``root``.
    """
    root_path = Path(root)
    try:
        return Path(path).relative_to(root_path)
    except ValueError as exc:
        raise WalkError("entry is not under its walk root", root=root_path, path=Path(path)) from exc


def sort_key(relative_path: PurePath) -> bytes:
    """Byte-order key for a relative path (case-sensitive, platform independent)."""
    return os.fsencode(relative_path.as_posix())


__all__ = [
    "WalkEntry",
    "Walker",
    "walk_tree",
    "relative_to_root",
    "sort_key",
]
