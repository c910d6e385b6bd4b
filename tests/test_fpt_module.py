"""
Test file for reading FPT memo files.
The FPT header and memo block headers are big-endian.
"""

import io
import struct
import unittest
from dbf_errors import DBFIncompleteReadError
from fpt_module import (
    FPTHeader, read_fpt_header, fpt_read_block,
    FPT_SIGNATURE_TEXT, FPT_SIGNATURE_PICTURE
)
from vfp_fixture import build_fpt


class TestFPTModule(unittest.TestCase):
    """Test cases for the FPT header and memo blocks."""

    def test_read_header_is_big_endian(self):
        buf = struct.pack(">L2xH", 0x12, 0x40).ljust(512, b'\x00')
        header = read_fpt_header(io.BytesIO(buf))
        self.assertEqual(header.next_free, 0x12)
        self.assertEqual(header.block_size, 64)

    def test_read_header_short(self):
        with self.assertRaises(DBFIncompleteReadError):
            read_fpt_header(io.BytesIO(b'\x00\x00\x00'))

    def test_read_text_and_binary_blocks(self):
        fpt, blocks = build_fpt([
            (FPT_SIGNATURE_TEXT, b'Some memo text'),
            (FPT_SIGNATURE_PICTURE, b'\x00\x01\x02'),
        ])
        f = io.BytesIO(fpt)
        header = read_fpt_header(f)
        self.assertEqual(blocks, [8, 9])

        self.assertEqual(fpt_read_block(f, header, blocks[0]), (b'Some memo text', True))
        self.assertEqual(fpt_read_block(f, header, blocks[1]), (b'\x00\x01\x02', False))

    def test_memo_spanning_blocks(self):
        data = bytes(range(200))
        fpt, blocks = build_fpt([(FPT_SIGNATURE_PICTURE, data), (FPT_SIGNATURE_TEXT, b'next')], block_size=32)
        f = io.BytesIO(fpt)
        header = read_fpt_header(f)
        self.assertEqual(header.block_size, 32)
        # 8 byte block header + 200 bytes needs 7 blocks of 32
        self.assertEqual(blocks, [16, 23])
        self.assertEqual(fpt_read_block(f, header, blocks[0]), (data, False))
        self.assertEqual(fpt_read_block(f, header, blocks[1]), (b'next', True))

    def test_zero_length_memo(self):
        fpt, blocks = build_fpt([(FPT_SIGNATURE_TEXT, b'')])
        f = io.BytesIO(fpt)
        header = read_fpt_header(f)
        self.assertEqual(fpt_read_block(f, header, blocks[0]), (b'', True))

    def test_block_past_end_of_file(self):
        fpt, _ = build_fpt([(FPT_SIGNATURE_TEXT, b'x')])
        f = io.BytesIO(fpt)
        with self.assertRaises(DBFIncompleteReadError):
            fpt_read_block(f, read_fpt_header(f), 1000)

    def test_truncated_memo_data(self):
        # Block header claims 100 bytes but only 10 follow
        buf = struct.pack(">L2xH", 2, 64).ljust(64, b'\x00')
        buf += struct.pack(">LL", FPT_SIGNATURE_TEXT, 100) + b'x' * 10
        with self.assertRaises(DBFIncompleteReadError) as ctx:
            fpt_read_block(io.BytesIO(buf), FPTHeader(next_free=2, block_size=64), 1)
        self.assertEqual(ctx.exception.expected, 100)
        self.assertEqual(ctx.exception.actual, 10)


if __name__ == '__main__':
    unittest.main()
