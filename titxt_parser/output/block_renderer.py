"""
block_renderer.py
=================

Render parsed :class:`~titxt_parser.models.Block` lists for downstream
tools.

Outputs
-------
* **JSON** – one record per block with ``address``, ``length`` and
  ``data`` fields, plus a summary header.
* **Text** – a listing with one header per block and eight words per row.
* **C** – a ``static const`` array initialiser ready to paste into a
  flashing tool.
"""
from __future__ import annotations

import json
import re
from typing import List, Optional, Sequence

from ..models import Block

_WORDS_PER_ROW = 8
_C_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class BlockRenderer:
    """Serialises block lists as JSON, a text listing, or C source."""

    # ------------------------------------------------------------------
    # JSON renderer
    # ------------------------------------------------------------------

    def to_json(self, blocks: Sequence[Block], words_per_block: Optional[int] = None) -> dict:
        """
        Render *blocks* as a JSON-serialisable dictionary.

        *words_per_block* is the configured block size; when omitted it is
        taken from the first block (``None`` for an empty list).
        """
        if words_per_block is None and blocks:
            words_per_block = blocks[0].word_count
        return {
            "words_per_block": words_per_block,
            "block_count": len(blocks),
            "blocks": [b.to_dict() for b in blocks],
        }

    def to_json_str(
        self,
        blocks: Sequence[Block],
        words_per_block: Optional[int] = None,
        indent: int = 2,
    ) -> str:
        """Return *blocks* serialised to a JSON string."""
        return json.dumps(self.to_json(blocks, words_per_block), indent=indent)

    # ------------------------------------------------------------------
    # Text renderer
    # ------------------------------------------------------------------

    def to_text(self, blocks: Sequence[Block]) -> str:
        lines: List[str] = []
        for index, block in enumerate(blocks):
            lines.append(
                f"{'─' * 60}\n"
                f"  Block  : {index}\n"
                f"  Address: 0x{block.address:08X} - 0x{block.end_address:08X}\n"
                f"  Words  : {block.word_count}"
            )
            for row in range(0, block.word_count, _WORDS_PER_ROW):
                words = block.words[row : row + _WORDS_PER_ROW]
                offset = block.address + row * 4
                lines.append(
                    f"    {offset & 0xFFFFFFFF:08X}: "
                    + " ".join(f"0x{w:08X}" for w in words)
                )
        lines.append(f"{'═' * 60}\n  {len(blocks)} block(s)")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # C renderer
    # ------------------------------------------------------------------

    def to_c_array(
        self,
        blocks: Sequence[Block],
        name: str = "titxt_blocks",
        words_per_block: Optional[int] = None,
    ) -> str:
        """
        Render *blocks* as a C array of ``{address, {words...}}`` records.

        Raises
        ------
        ValueError
            If *name* is not a valid C identifier.
        """
        if not _C_IDENT_RE.match(name):
            raise ValueError(f"not a valid C identifier: {name!r}")
        word_count = words_per_block or (blocks[0].word_count if blocks else 1)
        type_name = f"{name}_t"
        lines: List[str] = [
            "#include <stdint.h>",
            "",
            f"#define {name.upper()}_COUNT {len(blocks)}u",
            f"#define {name.upper()}_WORDS {word_count}u",
            "",
            "typedef struct {",
            "    uint32_t address;",
            f"    uint32_t data[{word_count}];",
            f"}} {type_name};",
            "",
        ]
        if not blocks:
            lines.append(f"static const {type_name} {name}[1];")
            return "\n".join(lines) + "\n"

        lines.append(f"static const {type_name} {name}[{len(blocks)}] = {{")
        for block in blocks:
            lines.append(f"    {{ 0x{block.address:08X}u, {{")
            for row in range(0, block.word_count, _WORDS_PER_ROW):
                words = block.words[row : row + _WORDS_PER_ROW]
                lines.append("        " + ", ".join(f"0x{w:08X}u" for w in words) + ",")
            lines.append("    } },")
        lines.append("};")
        return "\n".join(lines) + "\n"
