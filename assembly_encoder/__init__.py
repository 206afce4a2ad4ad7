"""
Assembly Encoder Module

Locates a genome assembly's sequence files inside an NCBI datasets download
and converts the nucleotide text into a two-bit-per-base representation.

Workflow:
1. validate_metadata() - Confirm the package's metadata files are present
2. locate_assembly_dir() - Find the GCA_ assembly directory
3. select_sequence_files() - Pick the chr*.fna files inside it
4. encode_assembly() - Read and encode them, concatenated in file order
"""

from .encoder import encode, encode_sequence, pack_pairs
from .errors import (
    AssemblyEncoderError,
    AssemblyNotFoundError,
    MetadataMissingError,
    SequenceReadError,
    TraversalError,
)
from .locator import locate_assembly_dir
from .pipeline import encode_assembly, run_pipeline, scan_input
from .selector import select_sequence_files
from .validator import find_missing_metadata, validate_metadata

__version__ = "0.1.0"
__all__ = [
    'encode', 'encode_sequence', 'pack_pairs',
    'validate_metadata', 'find_missing_metadata',
    'locate_assembly_dir', 'select_sequence_files',
    'encode_assembly', 'run_pipeline', 'scan_input',
    'AssemblyEncoderError', 'AssemblyNotFoundError', 'MetadataMissingError',
    'SequenceReadError', 'TraversalError',
]
