#!/usr/bin/env python3
"""
Command-line interface for the Assembly Encoder.

Usage:
    python -m assembly_encoder.cli check --input DIR
    python -m assembly_encoder.cli locate --input DIR
    python -m assembly_encoder.cli list --input DIR
    python -m assembly_encoder.cli status --input DIR
    python -m assembly_encoder.cli encode --input DIR [--strict] [--show N] [--hex]
"""

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_INPUT_DIR, READ_CHUNK_SIZE, REQUIRED_METADATA_FILES
from .encoder import pack_pairs
from .errors import AssemblyEncoderError
from .locator import locate_assembly_dir
from .pipeline import run_pipeline, scan_input, summarize
from .selector import select_sequence_files
from .validator import find_missing_metadata


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return n


def non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be zero or a positive integer: {value}")
    return n


def cmd_check(args):
    """Check for the required metadata files."""
    missing = find_missing_metadata(args.input)
    for name in sorted(REQUIRED_METADATA_FILES):
        mark = 'MISSING' if name in missing else 'found'
        print(f"  {name:<30} {mark}")

    if missing:
        print("No data files found!")
        return 1
    print("Found data files!")
    return 0


def cmd_locate(args):
    """Print the assembly directory."""
    assembly_dir = locate_assembly_dir(args.input)
    if assembly_dir is None:
        print(f"No assembly directory found under {args.input}", file=sys.stderr)
        return 1
    print(assembly_dir)
    return 0


def cmd_list(args):
    """List sequence files in the assembly directory."""
    assembly_dir = locate_assembly_dir(args.input)
    if assembly_dir is None:
        print(f"No assembly directory found under {args.input}", file=sys.stderr)
        return 1
    for name in select_sequence_files(assembly_dir):
        print(name)
    return 0


def cmd_status(args):
    """Single-pass summary of the input directory."""
    info = scan_input(args.input)

    print("=" * 60)
    print(f"Input: {args.input}")
    print("=" * 60)
    print(f"Metadata files found:   {len(info['metadata_found'])}/{len(REQUIRED_METADATA_FILES)}")
    for name in sorted(info['metadata_missing']):
        print(f"  missing: {name}")
    print(f"Assembly directory:     {info['assembly_dir'] or '-'}")
    print(f"Sequence files:         {len(info['sequence_files'])}")
    for name in info['sequence_files']:
        print(f"  {name}")
    return 0


def cmd_encode(args):
    """Run the full pipeline and report the result."""
    def progress(file_name, current, total):
        print(f"[{current}/{total}] Reading file: {file_name}")

    result = run_pipeline(
        args.input,
        strict=args.strict,
        chunk_size=args.chunk_size,
        progress_callback=progress,
    )
    encoded = result['encoded']

    print("Found data files!" if result['metadata_ok'] else "No data files found!")
    print(f"Assembly directory: {result['assembly_dir']}")

    stats = summarize(encoded)
    print("-" * 50)
    print(f"  Bases encoded: {stats['units']:,}")
    print(f"  Packed size:   {stats['packed_bytes']:,} bytes")
    print(f"  A: {stats['A']:,}  C: {stats['C']:,}  G: {stats['G']:,}  "
          f"T/other: {stats['T_or_other']:,}")

    if args.show:
        print(encoded[:args.show])
    if args.hex:
        print(pack_pairs(encoded).hex())
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Two-bit encoder for NCBI genome assembly packages",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    def add_input(p):
        p.add_argument('--input', type=Path, default=DEFAULT_INPUT_DIR,
                       help=f'Input directory (default: {DEFAULT_INPUT_DIR})')

    # Check command
    p_check = subparsers.add_parser('check', help='Check for required metadata files')
    add_input(p_check)
    p_check.set_defaults(func=cmd_check)

    # Locate command
    p_locate = subparsers.add_parser('locate', help='Print the GCA_ assembly directory')
    add_input(p_locate)
    p_locate.set_defaults(func=cmd_locate)

    # List command
    p_list = subparsers.add_parser('list', help='List chr*.fna sequence files')
    add_input(p_list)
    p_list.set_defaults(func=cmd_list)

    # Status command
    p_status = subparsers.add_parser('status', help='Summarize the input directory')
    add_input(p_status)
    p_status.set_defaults(func=cmd_status)

    # Encode command
    p_encode = subparsers.add_parser('encode', help='Encode the assembly sequence files')
    add_input(p_encode)
    p_encode.add_argument('--strict', action='store_true',
                          help='Abort if metadata files are missing')
    p_encode.add_argument('--chunk-size', type=positive_int, default=READ_CHUNK_SIZE,
                          help=f'Characters read per chunk (default: {READ_CHUNK_SIZE})')
    p_encode.add_argument('--show', type=non_negative_int, default=0,
                          help='Print the first N encoded units')
    p_encode.add_argument('--hex', action='store_true',
                          help='Print the packed encoding as hex')
    p_encode.set_defaults(func=cmd_encode)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        status = args.func(args)
    except AssemblyEncoderError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
