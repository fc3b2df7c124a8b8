"""
TITxtAnalysis
=============

High-level facade over :class:`~titxt_parser.pipeline.parse_session.ParseSession`.

Validates the block configuration once, then parses TI-TXT input supplied
as a file path, a string, or any iterable of lines.  Every call runs a
fresh session, so one analysis object can be reused for many inputs.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..errors import InvalidConfiguration
from ..models import ADDRESS_MASK, Block
from .parse_session import ParseSession

logger = logging.getLogger(__name__)


def validate_words_per_block(words_per_block: object) -> int:
    """Return *words_per_block* unchanged if it is a usable block size."""
    if words_per_block is None:
        raise InvalidConfiguration("words_per_block is required")
    if isinstance(words_per_block, bool) or not isinstance(words_per_block, int):
        raise InvalidConfiguration(
            f"words_per_block must be an integer, got {type(words_per_block).__name__}"
        )
    if not 0 < words_per_block <= ADDRESS_MASK:
        raise InvalidConfiguration(
            f"words_per_block must be between 1 and {ADDRESS_MASK}, got {words_per_block}"
        )
    return words_per_block


class TITxtAnalysis:
    """
    Parses TI-TXT hex dumps into fixed-size word blocks.

    Parameters
    ----------
    words_per_block:
        Number of 32-bit words in every emitted block.  Must be a positive
        integer.

    Raises
    ------
    InvalidConfiguration
        If *words_per_block* is missing, zero, negative or not an integer.
    """

    def __init__(self, words_per_block: int) -> None:
        self.words_per_block = validate_words_per_block(words_per_block)

    @property
    def bytes_per_block(self) -> int:
        return self.words_per_block * 4

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def parse_lines(self, lines: Iterable[str], source_name: str = "<lines>") -> List[Block]:
        """
        Parse an iterable of text lines.

        Lines are consumed lazily and reading stops at the ``q`` sentinel.

        Returns
        -------
        List[Block]
            Blocks in the order they were completed.
        """
        logger.info(
            "Parsing %s (%d words / %d bytes per block)",
            source_name,
            self.words_per_block,
            self.bytes_per_block,
        )
        session = ParseSession(self.words_per_block)
        blocks = session.run(lines)
        logger.info(
            "Parsed %s: %d block(s) from %d line(s)",
            source_name,
            len(blocks),
            session.lines_read,
        )
        return blocks

    def parse_text(self, source: str, source_name: str = "<inline>") -> List[Block]:
        """Parse TI-TXT content supplied as a string."""
        # Same line splitting as a file opened in text mode
        return self.parse_lines(io.StringIO(source, newline=None), source_name=source_name)

    def parse_file(self, file_path: Union[str, Path]) -> List[Block]:
        """
        Parse a TI-TXT file.

        The file is closed on every exit path, including fatal format errors.
        """
        path = Path(file_path)
        with path.open("r", encoding="ascii", errors="replace") as handle:
            return self.parse_lines(handle, source_name=str(path))
