"""
Nucleotide Encoder - Convert sequence text to two bits per base.

    A -> (1, 1)
    C -> (1, 0)
    G -> (0, 1)
    T -> (0, 0)

Matching is case-sensitive. Anything else (lowercase bases, N, IUPAC codes,
whitespace, newlines, FASTA header text) also encodes as (0, 0), so it is
indistinguishable from T after encoding. Callers that care should check
count_unrecognized() on the input first.
"""

from typing import Iterable, Iterator, List, Tuple

EncodedUnit = Tuple[int, int]

UNRECOGNIZED: EncodedUnit = (0, 0)

BASE_TO_BITS = {
    'A': (1, 1),
    'C': (1, 0),
    'G': (0, 1),
    'T': (0, 0),
}


def encode(symbol: str) -> EncodedUnit:
    """Encode a single character."""
    return BASE_TO_BITS.get(symbol, UNRECOGNIZED)


def encode_sequence(sequence: str) -> List[EncodedUnit]:
    """Encode every character of a string, in order."""
    return [encode(c) for c in sequence]


def iter_encoded(chunks: Iterable[str]) -> Iterator[EncodedUnit]:
    """
    Encode a stream of text chunks.

    The result is the same as encode_sequence(''.join(chunks)); there is no
    state carried between characters, so chunk boundaries don't matter.
    """
    for chunk in chunks:
        for c in chunk:
            yield encode(c)


def count_unrecognized(sequence: str) -> int:
    """Number of characters that are not one of A, C, G, T."""
    return sum(1 for c in sequence if c not in BASE_TO_BITS)


def packed_length(n_units: int) -> int:
    """Bytes needed to pack n_units encoded units."""
    return (n_units + 3) // 4


def pack_pairs(pairs: Iterable[EncodedUnit]) -> bytes:
    """
    Pack encoded units four to a byte.

    The first unit goes in the two most significant bits. A trailing partial
    byte is padded with (0, 0) units.
    """
    packed = bytearray()
    byte = 0
    n = 0
    for high, low in pairs:
        byte = (byte << 2) | (high << 1) | low
        n += 1
        if n == 4:
            packed.append(byte)
            byte = 0
            n = 0
    if n:
        packed.append(byte << (2 * (4 - n)))
    return bytes(packed)
