"""
Little-endian word packing.

Each group of four bytes ``b0 b1 b2 b3`` becomes the 32-bit word
``b0 + b1*256 + b2*65536 + b3*16777216``.
"""
from __future__ import annotations

from typing import List, Sequence

_WORD_SIZE = 4


def pack_words(data: Sequence[int]) -> List[int]:
    """Pack *data* (length a multiple of 4) into little-endian 32-bit words."""
    if len(data) % _WORD_SIZE:
        raise ValueError(
            f"cannot pack {len(data)} bytes into 32-bit words "
            f"(length must be a multiple of {_WORD_SIZE})"
        )
    return [
        int.from_bytes(bytes(data[i : i + _WORD_SIZE]), "little")
        for i in range(0, len(data), _WORD_SIZE)
    ]
