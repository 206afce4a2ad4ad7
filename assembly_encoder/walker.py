"""
Directory Walker - Recursive, ordered traversal of the input tree.

Yields one Entry per directory entry, depth first, starting with the root
itself. Entries within a directory are visited in lexicographic name order so
that "first match" lookups and file listings are reproducible across runs and
filesystems.

Symlinked directories are listed but not descended into. Unreadable
directories and dangling symlinks raise TraversalError; nothing is skipped.
"""

import os
from pathlib import Path
from typing import Iterator, NamedTuple

from loguru import logger

from .errors import TraversalError


class Entry(NamedTuple):
    path: Path
    name: str
    is_file: bool


def walk(root) -> Iterator[Entry]:
    """
    Walk a directory tree.

    Args:
        root: Path to start from (str or Path)

    Yields:
        Entry(path, name, is_file) for the root and everything below it
    """
    root_path = Path(root)
    if not root_path.exists():
        raise TraversalError(f"Input root not found: {root_path}")

    yield Entry(root_path, root_path.name, root_path.is_file())

    if root_path.is_dir():
        yield from _walk_dir(root_path)


def _walk_dir(directory: Path) -> Iterator[Entry]:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.error(f'Cannot list directory {directory}: {e}')
        raise TraversalError(f"Cannot list directory {directory}: {e}") from e

    for child in children:
        path = Path(child.path)
        try:
            if child.is_symlink() and not path.exists():
                raise TraversalError(f"Broken symlink: {path}")
            is_dir = child.is_dir(follow_symlinks=False)
            is_file = child.is_file()
        except OSError as e:
            logger.error(f'Cannot stat {path}: {e}')
            raise TraversalError(f"Cannot stat {path}: {e}") from e

        yield Entry(path, child.name, is_file)

        if is_dir:
            yield from _walk_dir(path)


def iter_files(root) -> Iterator[Entry]:
    """Walk a tree, yielding only regular files (symlinks to files included)."""
    for entry in walk(root):
        if entry.is_file:
            yield entry
