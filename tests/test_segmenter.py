"""
Tests for the byte accumulator, word packing, and block segmenter.
"""
from __future__ import annotations

import pytest

from titxt_parser.models import Block, ParseState
from titxt_parser.segmenter.accumulator import ByteAccumulator
from titxt_parser.segmenter.packing import pack_words
from titxt_parser.segmenter.segmenter import BlockSegmenter


# ─────────────────────────────────────────────────────────────────────────────
# pack_words
# ─────────────────────────────────────────────────────────────────────────────


class TestPackWords:
    @pytest.mark.parametrize(
        "data",
        [
            [0x00, 0x00, 0x00, 0x00],
            [0x01, 0x02, 0x03, 0x04],
            [0xFF, 0x00, 0x80, 0x7F],
            [0xFF, 0xFF, 0xFF, 0xFF],
        ],
    )
    def test_little_endian_formula(self, data):
        b0, b1, b2, b3 = data
        assert pack_words(data) == [b0 + 256 * b1 + 65536 * b2 + 16777216 * b3]

    def test_multiple_words_in_order(self):
        data = [1, 2, 3, 4, 5, 6, 7, 8]
        assert pack_words(data) == [0x04030201, 0x08070605]

    def test_accepts_bytes(self):
        assert pack_words(b"\xaa\xbb\xcc\x00") == [0x00CCBBAA]

    def test_empty(self):
        assert pack_words([]) == []

    def test_length_not_multiple_of_four(self):
        with pytest.raises(ValueError):
            pack_words([1, 2, 3])


# ─────────────────────────────────────────────────────────────────────────────
# ByteAccumulator
# ─────────────────────────────────────────────────────────────────────────────


class TestByteAccumulator:
    def test_append_preserves_order_across_calls(self):
        acc = ByteAccumulator()
        acc.append([1, 2])
        acc.append([3])
        acc.append([4, 5])
        assert acc.pending == bytes([1, 2, 3, 4, 5])
        assert len(acc) == 5

    def test_take_removes_from_front(self):
        acc = ByteAccumulator()
        acc.append(range(6))
        assert acc.take(4) == bytes([0, 1, 2, 3])
        assert acc.pending == bytes([4, 5])

    def test_reset(self):
        acc = ByteAccumulator()
        acc.append([1, 2, 3])
        acc.reset()
        assert len(acc) == 0
        assert not acc

    def test_pad_to_next_multiple(self):
        acc = ByteAccumulator()
        acc.append([0xAA, 0xBB, 0xCC])
        assert acc.pad_to(8) == 5
        assert acc.pending == bytes([0xAA, 0xBB, 0xCC, 0, 0, 0, 0, 0])

    def test_pad_when_aligned_adds_nothing(self):
        acc = ByteAccumulator()
        acc.append(range(8))
        assert acc.pad_to(8) == 0
        assert len(acc) == 8

    def test_pad_empty_adds_nothing(self):
        acc = ByteAccumulator()
        assert acc.pad_to(4) == 0
        assert len(acc) == 0


# ─────────────────────────────────────────────────────────────────────────────
# BlockSegmenter
# ─────────────────────────────────────────────────────────────────────────────


def _state(address, data):
    state = ParseState(current_address=address)
    state.accumulator.append(data)
    return state


class TestBlockSegmenterDrain:
    def test_bytes_per_block(self):
        assert BlockSegmenter(3).bytes_per_block == 12

    def test_not_enough_bytes_emits_nothing(self):
        state = _state(0x100, [1, 2, 3])
        assert BlockSegmenter(1).drain(state) == []
        assert len(state.accumulator) == 3
        assert state.current_address == 0x100

    def test_multiple_blocks_from_one_drain(self):
        state = _state(0, [1, 2, 3, 4, 5, 6, 7, 8])
        blocks = BlockSegmenter(1).drain(state)
        assert blocks == [
            Block(address=0, word_count=1, words=(0x04030201,)),
            Block(address=4, word_count=1, words=(0x08070605,)),
        ]
        assert state.current_address == 8

    def test_remainder_kept_below_block_size(self):
        segmenter = BlockSegmenter(2)
        state = _state(0x2000, range(21))
        blocks = segmenter.drain(state)
        assert len(blocks) == 2
        assert len(state.accumulator) < segmenter.bytes_per_block
        assert state.accumulator.pending == bytes([16, 17, 18, 19, 20])

    def test_every_block_has_word_count_words(self):
        segmenter = BlockSegmenter(5)
        blocks = segmenter.drain(_state(0, range(100)))
        assert all(len(b.words) == 5 == b.word_count for b in blocks)

    def test_addresses_advance_by_block_size(self):
        segmenter = BlockSegmenter(2)
        blocks = segmenter.drain(_state(0x1000, [0] * 40))
        for prev, nxt in zip(blocks, blocks[1:]):
            assert nxt.address == prev.address + segmenter.bytes_per_block

    def test_address_wraps_past_32_bits(self):
        state = _state(0xFFFFFFFC, range(8))
        blocks = BlockSegmenter(1).drain(state)
        assert [b.address for b in blocks] == [0xFFFFFFFC, 0x00000000]
        assert state.current_address == 4


class TestBlockSegmenterFinish:
    def test_zero_padding(self):
        state = _state(0x100, [0xAA, 0xBB, 0xCC])
        blocks = BlockSegmenter(2).finish(state)
        assert blocks == [Block(address=0x100, word_count=2, words=(0x00CCBBAA, 0))]
        assert len(state.accumulator) == 0

    def test_nothing_pending_emits_nothing(self):
        state = ParseState(current_address=0x100)
        assert BlockSegmenter(2).finish(state) == []

    def test_no_address_discards_data(self):
        state = ParseState()
        state.accumulator.append([1, 2, 3, 4])
        assert BlockSegmenter(1).finish(state) == []
        assert len(state.accumulator) == 0
