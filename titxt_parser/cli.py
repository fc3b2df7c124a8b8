"""
TI-TXT Block Parser – command-line interface
============================================

Usage
-----
::

    python -m titxt_parser.cli SOURCE --words-per-block N [OPTIONS]

Options
-------
--words-per-block, -w   Number of 32-bit words per block (required, > 0).
--output, -o            Output file path (default: stdout).
--format, -f            Output format: ``json`` (default), ``text`` or ``c``.
--c-name                Array name used by ``--format c``.
--verbose, -v           Enable DEBUG logging.

Exit status: 0 on success, 1 on a format error or unreadable input,
2 on an invalid block size.

Examples
--------
::

    python -m titxt_parser.cli firmware.txt -w 50
    python -m titxt_parser.cli firmware.txt -w 16 -f text
    python -m titxt_parser.cli firmware.txt -w 64 -f c --c-name fw_image -o fw_image.h
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import InvalidConfiguration, TITxtFormatError
from .output.block_renderer import BlockRenderer
from .pipeline.titxt_analysis import TITxtAnalysis


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="titxt-blocks",
        description="TI-TXT Block Parser – split a TI-TXT hex dump into "
                    "fixed-size blocks of little-endian 32-bit words",
    )
    p.add_argument("source", help="TI-TXT file to parse")
    p.add_argument(
        "--words-per-block", "-w",
        type=int,
        required=True,
        metavar="N",
        help="Number of 32-bit words in each block",
    )
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--format", "-f",
        choices=["json", "text", "c"],
        default="json",
        help="Output format (default: json)",
    )
    p.add_argument(
        "--c-name",
        default="titxt_blocks",
        metavar="NAME",
        help="C array name for --format c (default: titxt_blocks)",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        analysis = TITxtAnalysis(words_per_block=args.words_per_block)
    except InvalidConfiguration as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        blocks = analysis.parse_file(args.source)
    except TITxtFormatError as exc:
        print(f"error: {args.source}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {args.source}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    renderer = BlockRenderer()
    if args.format == "text":
        output_text = renderer.to_text(blocks)
    elif args.format == "c":
        try:
            output_text = renderer.to_c_array(
                blocks, name=args.c_name, words_per_block=analysis.words_per_block
            )
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        output_text = renderer.to_json_str(blocks, words_per_block=analysis.words_per_block)

    if args.output == "-":
        print(output_text)
    else:
        Path(args.output).write_text(output_text, encoding="utf-8")
        print(f"{len(blocks)} block(s) written to {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
