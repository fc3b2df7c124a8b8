"""
BlockSegmenter
==============

Slices fixed-size blocks off the front of the pending byte buffer.

:meth:`BlockSegmenter.drain` runs after every data line and before a new
address directive takes over; :meth:`BlockSegmenter.finish` runs once at
end of stream, zero-padding the last partial block first.

The running address advances by ``bytes_per_block`` per emitted block and
wraps modulo 2**32.
"""
from __future__ import annotations

import logging
from typing import List

from ..models import ADDRESS_MASK, BYTES_PER_WORD, Block, ParseState
from .packing import pack_words

logger = logging.getLogger(__name__)


class BlockSegmenter:
    """
    Turns accumulated bytes into :class:`~titxt_parser.models.Block` objects.

    Parameters
    ----------
    words_per_block:
        Number of 32-bit words per block.  Validated by the caller.
    """

    def __init__(self, words_per_block: int) -> None:
        self.words_per_block = words_per_block
        self.bytes_per_block = words_per_block * BYTES_PER_WORD

    def drain(self, state: ParseState) -> List[Block]:
        """
        Emit every complete block held in *state*'s accumulator.

        On return fewer than ``bytes_per_block`` bytes remain pending.
        """
        blocks: List[Block] = []
        pending = state.accumulator
        while len(pending) >= self.bytes_per_block:
            chunk = pending.take(self.bytes_per_block)
            block = Block(
                address=state.current_address,
                word_count=self.words_per_block,
                words=tuple(pack_words(chunk)),
            )
            blocks.append(block)
            state.current_address = self._advance(state.current_address)
        return blocks

    def finish(self, state: ParseState) -> List[Block]:
        """End-of-stream flush: pad any remainder with zeros and drain."""
        pending = state.accumulator
        if not pending:
            return []
        if not state.in_section:
            logger.warning(
                "Discarding %d byte(s) of data with no preceding address directive",
                len(pending),
            )
            pending.reset()
            return []
        padding = pending.pad_to(self.bytes_per_block)
        logger.debug(
            "End of stream: padded final block at 0x%08X with %d zero byte(s)",
            state.current_address,
            padding,
        )
        return self.drain(state)

    def _advance(self, address: int) -> int:
        nxt = address + self.bytes_per_block
        if nxt > ADDRESS_MASK:
            logger.debug("Address counter wrapped past 0xFFFFFFFF at 0x%08X", address)
        return nxt & ADDRESS_MASK
