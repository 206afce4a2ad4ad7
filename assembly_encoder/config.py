"""
Configuration for Assembly Encoder.

Default paths and naming conventions for NCBI genome assembly downloads.
"""

from pathlib import Path

# Input root, relative to the working directory
DEFAULT_INPUT_DIR = Path("input")

# Metadata files that ship with every assembly package
REQUIRED_METADATA_FILES = frozenset({
    "assembly_data_report.jsonl",
    "dataset_catalog.json",
    "sequence_report.jsonl",
    "unplaced.scaf.fna",
})

# Assembly directory structure
ASSEMBLY_PREFIX = "GCA_"
SEQUENCE_PREFIX = "chr"
SEQUENCE_SUFFIX = ".fna"

# Characters read per chunk when encoding sequence files (~1 MB)
READ_CHUNK_SIZE = 1 << 20
