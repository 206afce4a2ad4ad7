"""
Assembly Encoding Pipeline.

Steps:
1. Check that the required metadata files are present
2. Locate the GCA_ assembly directory
3. Select the chr*.fna sequence files inside it
4. Read each file in chunks and encode it, two bits per base
5. Concatenate the per-file encodings in file order

The metadata check is reported but doesn't stop the run unless strict=True.
Every other failure raises and nothing is returned.
"""

from collections import Counter
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from loguru import logger

from .config import DEFAULT_INPUT_DIR, READ_CHUNK_SIZE, REQUIRED_METADATA_FILES
from .encoder import EncodedUnit, count_unrecognized, iter_encoded, packed_length
from .errors import AssemblyNotFoundError, MetadataMissingError, SequenceReadError
from .locator import is_assembly_name, locate_assembly_dir
from .selector import is_sequence_file, select_sequence_files
from .validator import find_missing_metadata
from .walker import walk


def read_chunks(path: Path, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[str]:
    """
    Yield the text of a file in chunks of at most chunk_size characters.

    Line endings are passed through untranslated. The file is closed however
    iteration ends.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                yield chunk
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f'Failed to read sequence file {path}: {e}')
        raise SequenceReadError(f"Failed to read sequence file {path}: {e}") from e


def encode_file(path: Path, chunk_size: int = READ_CHUNK_SIZE) -> List[EncodedUnit]:
    """Encode one sequence file."""
    encoded = []
    unrecognized = 0
    for chunk in read_chunks(path, chunk_size):
        unrecognized += count_unrecognized(chunk)
        encoded.extend(iter_encoded([chunk]))

    if unrecognized:
        logger.warning(
            f'{path.name}: {unrecognized:,} of {len(encoded):,} characters are not '
            f'A/C/G/T and were encoded as (0, 0)'
        )
    return encoded


def run_pipeline(
    input_dir=DEFAULT_INPUT_DIR,
    strict: bool = False,
    chunk_size: int = READ_CHUNK_SIZE,
    required: Iterable[str] = REQUIRED_METADATA_FILES,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> dict:
    """
    Run the full pipeline on an input directory.

    Args:
        input_dir: Root of the downloaded assembly package
        strict: Abort with MetadataMissingError if metadata files are missing
        chunk_size: Characters read per chunk
        required: Metadata file names to check for
        progress_callback: Optional callback(file_name, current, total)

    Returns:
        Dict with keys 'metadata_ok', 'missing_metadata', 'assembly_dir',
        'sequence_files' and 'encoded'
    """
    input_path = Path(input_dir)
    logger.info(f'Encoding assembly under {input_path}')

    missing = find_missing_metadata(input_path, required)
    if missing:
        if strict:
            logger.error(f'Metadata check failed for {input_path}')
            raise MetadataMissingError(input_path, missing)
        logger.warning(f'Metadata check failed, continuing: {", ".join(sorted(missing))}')
    else:
        logger.info('Metadata check passed')

    assembly_dir = locate_assembly_dir(input_path)
    if assembly_dir is None:
        logger.error(f'No assembly directory under {input_path}')
        raise AssemblyNotFoundError(f"No assembly directory found under {input_path}")
    if not assembly_dir.is_dir():
        logger.error(f'Assembly entry is not a directory: {assembly_dir}')
        raise AssemblyNotFoundError(f"Assembly entry is not a directory: {assembly_dir}")

    sequence_files = select_sequence_files(assembly_dir)
    total = len(sequence_files)
    logger.info(f'Selected {total} sequence files in {assembly_dir}')

    encoded: List[EncodedUnit] = []
    for idx, file_name in enumerate(sequence_files, 1):
        if progress_callback:
            progress_callback(file_name, idx, total)
        logger.debug(f'[{idx}/{total}] Reading {file_name}')
        encoded.extend(encode_file(assembly_dir / file_name, chunk_size))

    logger.info(f'Encoded {len(encoded):,} bases from {total} files')

    return {
        'metadata_ok': not missing,
        'missing_metadata': missing,
        'assembly_dir': assembly_dir,
        'sequence_files': sequence_files,
        'encoded': encoded,
    }


def encode_assembly(input_dir=DEFAULT_INPUT_DIR, **kwargs) -> List[EncodedUnit]:
    """Run the pipeline and return only the encoded sequence."""
    return run_pipeline(input_dir, **kwargs)['encoded']


def scan_input(root, required: Iterable[str] = REQUIRED_METADATA_FILES) -> dict:
    """
    Collect metadata, assembly and sequence file information in one walk.

    Unlike run_pipeline, sequence files are gathered from the whole tree.
    """
    required = set(required)
    found = set()
    assembly_dir = None
    sequence_files = []

    for entry in walk(root):
        if assembly_dir is None and is_assembly_name(entry.name):
            assembly_dir = entry.path
        if not entry.is_file:
            continue
        if entry.name in required:
            found.add(entry.name)
        if is_sequence_file(entry.name):
            sequence_files.append(entry.name)

    return {
        'metadata_found': found,
        'metadata_missing': required - found,
        'assembly_dir': assembly_dir,
        'sequence_files': sequence_files,
    }


def summarize(encoded: List[EncodedUnit]) -> dict:
    """Count units per code and report the packed size."""
    counts = Counter(encoded)
    return {
        'units': len(encoded),
        'packed_bytes': packed_length(len(encoded)),
        'A': counts[(1, 1)],
        'C': counts[(1, 0)],
        'G': counts[(0, 1)],
        'T_or_other': counts[(0, 0)],
    }
