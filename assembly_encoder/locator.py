"""
Assembly Locator - Find the GCA_ assembly directory in the input tree.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from .config import ASSEMBLY_PREFIX
from .walker import walk


def is_assembly_name(name: str) -> bool:
    return name.startswith(ASSEMBLY_PREFIX)


def locate_assembly_dir(root) -> Optional[Path]:
    """
    Return the path of the first entry whose name starts with GCA_.

    Files and directories are both considered, and the root itself is checked
    first. Order is the walker's: depth first, lexicographic within each
    directory. Returns None if nothing matches.
    """
    for entry in walk(root):
        if is_assembly_name(entry.name):
            logger.info(f'Found assembly entry: {entry.path}')
            return entry.path

    logger.warning(f'No {ASSEMBLY_PREFIX}* entry under {root}')
    return None
