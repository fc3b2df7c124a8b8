"""
LineClassifier
==============

Assigns a trimmed, non-empty TI-TXT line to one of three categories:

+--------------------+-----------------------------------------------------+
| Category           | Rule                                                |
+====================+=====================================================+
| AddressDirective   | Line starts with ``@``.  Every non-hex character of |
|                    | the remainder is removed; what is left is the       |
|                    | address text.                                       |
+--------------------+-----------------------------------------------------+
| EndOfStream        | Line is exactly ``q`` (case-sensitive).             |
+--------------------+-----------------------------------------------------+
| DataLine           | Anything else.  Two-digit hex tokens are collected  |
|                    | left to right; stray characters are ignored.        |
+--------------------+-----------------------------------------------------+

Blank lines never reach the classifier; :class:`~titxt_parser.passes.trim.TrimPass`
drops them first.
"""
from __future__ import annotations

import re
from typing import Optional, Union

from ..errors import MalformedAddressDirective, UnparsableAddressValue
from ..models import ADDRESS_MASK, AddressDirective, DataLine, EndOfStream

ClassifiedLine = Union[AddressDirective, EndOfStream, DataLine]

ADDRESS_PREFIX = "@"
END_SENTINEL = "q"

_NON_HEX_RE = re.compile(r"[^0-9A-Fa-f]")
_BYTE_TOKEN_RE = re.compile(r"[0-9A-Fa-f]{2}")


class LineClassifier:
    """Classifies TI-TXT lines and converts address text to integers."""

    def classify(self, line: str, line_number: Optional[int] = None) -> ClassifiedLine:
        """
        Classify a single trimmed line.

        Raises
        ------
        MalformedAddressDirective
            If an ``@`` line carries no hex digits at all.
        """
        if line.startswith(ADDRESS_PREFIX):
            hex_text = _NON_HEX_RE.sub("", line[len(ADDRESS_PREFIX):])
            if not hex_text:
                raise MalformedAddressDirective(
                    f"address directive has no hex digits: {line!r}",
                    line=line,
                    line_number=line_number,
                )
            return AddressDirective(hex_text=hex_text, raw_text=line)

        if line == END_SENTINEL:
            return EndOfStream(raw_text=line)

        return DataLine(tokens=tuple(_BYTE_TOKEN_RE.findall(line)), raw_text=line)

    @staticmethod
    def parse_address(
        directive: AddressDirective,
        line_number: Optional[int] = None,
    ) -> int:
        """Convert the directive's hex text to an unsigned 32-bit address."""
        try:
            value = int(directive.hex_text, 16)
        except ValueError:
            value = None
        if value is None or value > ADDRESS_MASK:
            raise UnparsableAddressValue(
                f"address {directive.hex_text!r} is not a 32-bit unsigned value",
                line=directive.raw_text,
                line_number=line_number,
            )
        return value
