"""Run-length codec tests."""

import pytest

from sc2kit.formats.sc2.errors import CompressionError, MalformedSegmentError
from sc2kit.formats.sc2.rle import decompress, read_compressed
from sc2kit.utils.binary import IoBuffer

from sc2_builders import rle_pack


def test_literal_block_copies_bytes():
    assert decompress(bytes([5, 1, 2, 3, 4, 5])) == bytes([1, 2, 3, 4, 5])


def test_repeat_block_repeats_fill_byte():
    assert decompress(bytes([130, 0xAA])) == bytes([0xAA, 0xAA, 0xAA])


def test_control_127_is_an_empty_repeat():
    assert decompress(bytes([127, 0x55])) == b""
    assert decompress(bytes([127, 0x55, 2, 9, 8])) == bytes([9, 8])


def test_largest_repeat_block():
    assert decompress(bytes([255, 7])) == bytes([7]) * 128


def test_zero_length_literal_block():
    assert decompress(bytes([0, 130, 1])) == bytes([1, 1, 1])


def test_mixed_blocks():
    data = bytes([2, 0x10, 0x20, 129, 0xFF, 1, 0x30])
    assert decompress(data) == bytes([0x10, 0x20, 0xFF, 0xFF, 0x30])


def test_empty_input():
    assert decompress(b"") == b""


def test_literal_overrun_is_rejected():
    with pytest.raises(CompressionError):
        decompress(bytes([5, 1, 2]))


def test_missing_fill_byte_is_rejected():
    with pytest.raises(CompressionError) as excinfo:
        decompress(bytes([1, 9, 200]))
    assert isinstance(excinfo.value, MalformedSegmentError)


def test_read_compressed_stops_at_budget():
    io = IoBuffer.from_bytes(bytes([130, 0xAA, 0x99, 0x98]))
    assert read_compressed(io, 2) == bytes([0xAA] * 3)
    assert io.position == 2
    assert io.read_byte() == 0x99


def test_packer_output_decodes_back():
    data = bytes(range(200)) + b"\0" * 300 + bytes([4, 4, 5, 5, 5])
    assert decompress(rle_pack(data)) == data
