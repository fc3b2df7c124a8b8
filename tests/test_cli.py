"""
Tests for the command-line interface.
"""
from __future__ import annotations

import json
from pathlib import Path

from titxt_parser.cli import main

FIXTURES = Path(__file__).parent / "fixtures"
TWO_SECTIONS = FIXTURES / "two_sections.txt"


class TestCli:
    def test_json_to_stdout(self, capsys):
        rc = main([str(TWO_SECTIONS), "-w", "2"])
        assert rc == 0
        payload = json.loads(capsys.readouterr().out)
        assert [b["address"] for b in payload["blocks"]] == [0xF800, 0xFFFE]

    def test_json_empty_result_keeps_block_size(self, tmp_path, capsys):
        source = tmp_path / "empty.txt"
        source.write_text("@1000\nq\n")
        rc = main([str(source), "-w", "8"])
        assert rc == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["words_per_block"] == 8
        assert payload["blocks"] == []

    def test_text_format(self, capsys):
        rc = main([str(TWO_SECTIONS), "-w", "1", "-f", "text"])
        assert rc == 0
        assert "4 block(s)" in capsys.readouterr().out

    def test_c_format_to_file(self, tmp_path):
        out = tmp_path / "image.h"
        rc = main([
            str(TWO_SECTIONS),
            "--words-per-block", "2",
            "--format", "c",
            "--c-name", "image",
            "-o", str(out),
        ])
        assert rc == 0
        assert "static const image_t image[2]" in out.read_text()

    def test_zero_words_per_block_exits_2(self, capsys):
        rc = main([str(TWO_SECTIONS), "-w", "0"])
        assert rc == 2
        assert "words_per_block" in capsys.readouterr().err

    def test_malformed_input_exits_1(self, capsys):
        rc = main([str(FIXTURES / "malformed.txt"), "-w", "1"])
        assert rc == 1
        err = capsys.readouterr().err
        assert "line 3" in err

    def test_missing_file_exits_1(self, tmp_path, capsys):
        rc = main([str(tmp_path / "nope.txt"), "-w", "1"])
        assert rc == 1
        assert "cannot read" in capsys.readouterr().err

    def test_bad_c_name_exits_2(self, capsys):
        rc = main([str(TWO_SECTIONS), "-w", "1", "-f", "c", "--c-name", "9x"])
        assert rc == 2
