"""
TI-TXT Block Parser
===================

Parses TI-TXT hex dumps (``@ADDRESS`` lines, two-digit hex byte tokens,
optional ``q`` terminator) into fixed-size blocks of little-endian 32-bit
words, each tagged with its start address.

Quick start
-----------
>>> from titxt_parser import TITxtAnalysis
>>> analysis = TITxtAnalysis(words_per_block=2)
>>> blocks = analysis.parse_text("@100\\nAA BB CC\\nq\\n")
>>> [(hex(b.address), [hex(w) for w in b.words]) for b in blocks]
[('0x100', ['0xccbbaa', '0x0'])]
"""

from .errors import (
    InvalidConfiguration,
    MalformedAddressDirective,
    TITxtError,
    TITxtFormatError,
    UnparsableAddressValue,
)
from .models import AddressDirective, Block, DataLine, EndOfStream, ParseState
from .parser.line_classifier import LineClassifier
from .pipeline.parse_session import ParseSession
from .pipeline.titxt_analysis import TITxtAnalysis
from .segmenter.accumulator import ByteAccumulator
from .segmenter.packing import pack_words
from .segmenter.segmenter import BlockSegmenter

__version__ = "0.1.0"
__all__ = [
    "AddressDirective",
    "Block",
    "BlockSegmenter",
    "ByteAccumulator",
    "DataLine",
    "EndOfStream",
    "InvalidConfiguration",
    "LineClassifier",
    "MalformedAddressDirective",
    "ParseSession",
    "ParseState",
    "TITxtAnalysis",
    "TITxtError",
    "TITxtFormatError",
    "UnparsableAddressValue",
    "pack_words",
]
