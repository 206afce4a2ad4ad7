"""
Metadata Validator - Confirm an assembly package is complete.

An NCBI datasets download carries a fixed set of metadata files next to the
sequence data. The check passes only if every required name appears as a
regular file somewhere under the input root, at any depth.
"""

from pathlib import Path
from typing import Iterable, Set

from loguru import logger

from .config import REQUIRED_METADATA_FILES
from .walker import iter_files


def find_missing_metadata(
    root,
    required: Iterable[str] = REQUIRED_METADATA_FILES,
) -> Set[str]:
    """
    Return the required file names that are not present under root.

    A root that doesn't exist or isn't a directory is missing everything.
    Traversal errors propagate as TraversalError.
    """
    missing = set(required)
    root_path = Path(root)

    if not root_path.is_dir():
        logger.warning(f'Input root is not a directory: {root_path}')
        return missing

    for entry in iter_files(root_path):
        missing.discard(entry.name)

    return missing


def validate_metadata(
    root,
    required: Iterable[str] = REQUIRED_METADATA_FILES,
) -> bool:
    """True iff every required metadata file exists under root."""
    missing = find_missing_metadata(root, required)
    if missing:
        logger.warning(f'Missing metadata files: {", ".join(sorted(missing))}')
        return False
    logger.info(f'All metadata files present under {root}')
    return True
