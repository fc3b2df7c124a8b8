"""
Core data models for the TI-TXT block parser.

Blocks are the output unit; :class:`ParseState` is the single mutable
record threaded through one parse; the classified-line records are what
:class:`~titxt_parser.parser.line_classifier.LineClassifier` hands to the
driver.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .segmenter.accumulator import ByteAccumulator

ADDRESS_MASK = 0xFFFFFFFF
BYTES_PER_WORD = 4


# ---------------------------------------------------------------------------
# Block – the final output unit
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Block:
    """
    A fixed-size run of 32-bit little-endian words tagged with the byte
    address of its first word.
    """

    address: int
    word_count: int
    words: Tuple[int, ...]

    @property
    def byte_length(self) -> int:
        return self.word_count * BYTES_PER_WORD

    @property
    def end_address(self) -> int:
        """Address of the byte following the block (wrapped to 32 bits)."""
        return (self.address + self.byte_length) & ADDRESS_MASK

    def to_bytes(self) -> bytes:
        return b"".join(w.to_bytes(BYTES_PER_WORD, "little") for w in self.words)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "address_hex": f"0x{self.address:08X}",
            "length": self.word_count,
            "data": list(self.words),
        }

    def __repr__(self) -> str:
        return (
            f"Block(address=0x{self.address:08X}, "
            f"word_count={self.word_count})"
        )


# ---------------------------------------------------------------------------
# Parse state
# ---------------------------------------------------------------------------


@dataclass
class ParseState:
    """Mutable state for one parse: the active address and pending bytes."""

    current_address: Optional[int] = None
    accumulator: ByteAccumulator = field(default_factory=ByteAccumulator)

    @property
    def in_section(self) -> bool:
        return self.current_address is not None


# ---------------------------------------------------------------------------
# Classified input lines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressDirective:
    """An ``@ADDRESS`` line; *hex_text* holds only the hex digits."""

    hex_text: str
    raw_text: str


@dataclass(frozen=True)
class EndOfStream:
    """The ``q`` sentinel."""

    raw_text: str = "q"


@dataclass(frozen=True)
class DataLine:
    """A data line and the two-digit hex tokens found in it."""

    tokens: Tuple[str, ...]
    raw_text: str

    @property
    def bytes(self) -> List[int]:
        return [int(token, 16) for token in self.tokens]
