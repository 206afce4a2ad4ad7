"""
Sequence File Selector - Pick the per-chromosome FASTA files.

A sequence file is a regular file named chr*.fna. Other .fna files in an
assembly package (unplaced scaffolds, unlocalized contigs) are left out.
"""

from typing import List

from .config import SEQUENCE_PREFIX, SEQUENCE_SUFFIX
from .walker import iter_files


def is_sequence_file(name: str) -> bool:
    return name.startswith(SEQUENCE_PREFIX) and name.endswith(SEQUENCE_SUFFIX)


def select_sequence_files(root) -> List[str]:
    """
    List sequence file names (not paths) under root, in walk order.
    """
    return [entry.name for entry in iter_files(root) if is_sequence_file(entry.name)]
