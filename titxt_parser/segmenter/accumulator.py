"""
ByteAccumulator
===============

Pending byte buffer for the active address section.  Bytes are appended in
source order and removed from the front as whole blocks are sliced off by
:class:`~titxt_parser.segmenter.segmenter.BlockSegmenter`.
"""
from __future__ import annotations

from typing import Iterable


class ByteAccumulator:
    """Ordered byte buffer with front removal and zero padding."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def __bool__(self) -> bool:
        return bool(self._buf)

    def __repr__(self) -> str:
        return f"ByteAccumulator(pending={len(self._buf)})"

    @property
    def pending(self) -> bytes:
        return bytes(self._buf)

    def append(self, values: Iterable[int]) -> None:
        self._buf.extend(values)

    def reset(self) -> None:
        self._buf.clear()

    def take(self, count: int) -> bytes:
        """Remove and return the first *count* bytes."""
        head = bytes(self._buf[:count])
        del self._buf[:count]
        return head

    def pad_to(self, multiple: int) -> int:
        """
        Right-pad with zero bytes up to the next multiple of *multiple*.

        Returns the number of padding bytes added (0 when already aligned).
        """
        remainder = len(self._buf) % multiple
        if not remainder:
            return 0
        padding = multiple - remainder
        self._buf.extend(bytes(padding))
        return padding
