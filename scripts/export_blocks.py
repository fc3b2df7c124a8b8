"""
export_blocks.py
================
Run the TI-TXT block parser on one or more source files and write every
block as a raw little-endian binary file under
``<output-dir>/<source-stem>/<ADDRESS>.bin``.

Usage
-----
    python scripts/export_blocks.py \\
        --sources tests/fixtures/two_sections.txt \\
        --words-per-block 4 \\
        --output-dir outputs/blocks
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running from the repo root without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from titxt_parser.pipeline.titxt_analysis import TITxtAnalysis


def export(source: str, words_per_block: int, output_dir: Path) -> int:
    """Write one ``.bin`` file per block of *source*; return the block count."""
    analysis = TITxtAnalysis(words_per_block=words_per_block)
    blocks = analysis.parse_file(source)

    dest = output_dir / Path(source).stem
    dest.mkdir(parents=True, exist_ok=True)
    seen: dict[str, int] = {}
    for block in blocks:
        base = f"{block.address:08X}"
        # Wrapped addresses can repeat
        if base in seen:
            seen[base] += 1
            name = f"{base}_{seen[base]}"
        else:
            seen[base] = 0
            name = base
        out_file = dest / f"{name}.bin"
        out_file.write_bytes(block.to_bytes())
        print(f"  wrote {out_file}", file=sys.stderr)
    return len(blocks)


def main() -> None:
    p = argparse.ArgumentParser(description="Export TI-TXT blocks as .bin files")
    p.add_argument("--sources", nargs="+", required=True, metavar="FILE")
    p.add_argument("--words-per-block", "-w", type=int, required=True, metavar="N")
    p.add_argument("--output-dir", default="outputs/blocks", metavar="DIR")
    args = p.parse_args()

    output_dir = Path(args.output_dir)
    total = 0
    for source in args.sources:
        print(f"Processing {source}", file=sys.stderr)
        total += export(source, args.words_per_block, output_dir)
    print(f"Done – {total} block(s) exported to {output_dir}", file=sys.stderr)


if __name__ == "__main__":
    main()
