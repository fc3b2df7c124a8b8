"""
Exceptions raised by the TI-TXT block parser.

Every fatal condition aborts the whole parse; callers never receive a
partial block list.
"""
from __future__ import annotations

from typing import Optional


class TITxtError(Exception):
    """Base class for all parser errors."""


class InvalidConfiguration(TITxtError, ValueError):
    """``words_per_block`` is missing, zero, or otherwise unusable."""


class TITxtFormatError(TITxtError):
    """A fatal problem with the input text."""

    def __init__(
        self,
        message: str,
        line: str = "",
        line_number: Optional[int] = None,
    ) -> None:
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedAddressDirective(TITxtFormatError):
    """An ``@`` line whose remainder contains no hex digits."""


class UnparsableAddressValue(TITxtFormatError):
    """An address that does not fit an unsigned 32-bit integer."""
