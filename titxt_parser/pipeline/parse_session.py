"""
ParseSession
============

Top-level driver for one parse.  A session owns the
:class:`~titxt_parser.models.ParseState` and the output block list and
moves through three states:

``NO_ADDRESS``
    Initial state; no ``@`` directive seen yet.
``IN_SECTION``
    An address is active; complete blocks are emitted as data arrives.
``DONE``
    ``q`` was seen or the input ran out; the end-of-stream flush has run.

Each transition method updates the state and the output list together, so
a section flushed by a new directive always lands in the result.

Pipeline per line:

1. :class:`~titxt_parser.passes.trim.TrimPass` – trim, skip blank lines.
2. :class:`~titxt_parser.parser.line_classifier.LineClassifier` – classify.
3. Transition on the classified line, draining through
   :class:`~titxt_parser.segmenter.segmenter.BlockSegmenter`.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..models import AddressDirective, Block, DataLine, EndOfStream, ParseState
from ..parser.line_classifier import LineClassifier
from ..passes.trim import TrimPass
from ..segmenter.segmenter import BlockSegmenter

logger = logging.getLogger(__name__)

NO_ADDRESS = "NO_ADDRESS"
IN_SECTION = "IN_SECTION"
DONE = "DONE"


class ParseSession:
    """
    Single-use parse of one line stream.

    Parameters
    ----------
    words_per_block:
        Number of 32-bit words per emitted block (already validated).
    """

    def __init__(self, words_per_block: int) -> None:
        self.words_per_block = words_per_block
        self.state = ParseState()
        self.blocks: List[Block] = []
        self.status = NO_ADDRESS
        self.lines_read = 0
        #: Data bytes seen before the first address directive (never buffered).
        self.discarded_bytes = 0
        self._started = False
        self._trim = TrimPass()
        self._classifier = LineClassifier()
        self._segmenter = BlockSegmenter(words_per_block)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def run(self, lines: Iterable[str]) -> List[Block]:
        """
        Consume *lines* and return the emitted blocks in completion order.

        Raises
        ------
        RuntimeError
            If the session has already been run, successfully or not.
        MalformedAddressDirective, UnparsableAddressValue
            On a fatal input error; no blocks are returned.
        """
        if self._started:
            raise RuntimeError("ParseSession objects cannot be reused")
        self._started = True

        try:
            for number, line in self._trim.run(lines):
                self.lines_read = number
                entry = self._classifier.classify(line, line_number=number)
                if isinstance(entry, EndOfStream):
                    logger.debug("line %d: end-of-stream sentinel", number)
                    break
                if isinstance(entry, AddressDirective):
                    self.on_address(entry, number)
                else:
                    self.on_data(entry)

            self.on_end()
        finally:
            self.status = DONE
        return self.blocks

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def on_address(self, directive: AddressDirective, line_number: Optional[int] = None) -> None:
        address = self._classifier.parse_address(directive, line_number=line_number)
        if self.status == IN_SECTION:
            self.blocks.extend(self._segmenter.drain(self.state))
            leftover = len(self.state.accumulator)
            if leftover:
                logger.warning(
                    "Dropping %d trailing byte(s) at 0x%08X before new address directive "
                    "(less than one %d-byte block)",
                    leftover,
                    self.state.current_address,
                    self._segmenter.bytes_per_block,
                )
        else:
            self._report_unaddressed()
        self.state.accumulator.reset()
        self.state.current_address = address
        self.status = IN_SECTION
        logger.debug("line %s: new section at 0x%08X", line_number, address)

    def on_data(self, data: DataLine) -> None:
        if not data.tokens:
            return
        if self.status != IN_SECTION:
            # No address to place these bytes at
            self.discarded_bytes += len(data.tokens)
            return
        self.state.accumulator.append(data.bytes)
        self.blocks.extend(self._segmenter.drain(self.state))

    def on_end(self) -> None:
        if self.status != IN_SECTION:
            self._report_unaddressed()
        self.blocks.extend(self._segmenter.finish(self.state))
        self.status = DONE

    def _report_unaddressed(self) -> None:
        if self.discarded_bytes:
            logger.warning(
                "Discarding %d byte(s) of data with no preceding address directive",
                self.discarded_bytes,
            )
