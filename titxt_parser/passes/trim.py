"""
TrimPass
========

First normalisation step applied to raw input lines.

* Leading and trailing whitespace (including the line terminator) is
  removed.
* Lines that are empty after trimming are dropped.

The pass is lazy: it pulls one line at a time from the source, so a
``q`` sentinel stops reading the rest of the file.  Each surviving line is
paired with its 1-based line number in the original source for error
reporting.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Tuple


class TrimPass:
    """Trims every line and skips the blank ones."""

    def run(self, lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
        """
        Apply the pass to a sequence of source lines.

        Parameters
        ----------
        lines:
            Raw lines, with or without trailing newlines.

        Yields
        ------
        Tuple[int, str]
            ``(line_number, trimmed_line)`` for every non-blank line.
        """
        for number, line in enumerate(lines, start=1):
            trimmed = line.strip()
            if trimmed:
                yield number, trimmed
