"""
Visual FoxPro memo (.FPT) file support.

Memo fields in the DBF hold a block number into the companion FPT file.
Unlike the DBF, all integers in an FPT file are big-endian.

FPT layout:
- Header (block 0): next free block (4 bytes), unused (2 bytes),
  block size (2 bytes)
- Memo block: signature (4 bytes, 1 = text, 0 = picture/binary),
  data length (4 bytes), followed by the data
"""

import logging
import struct
from dataclasses import dataclass
from typing import BinaryIO, Tuple

from dbf_errors import DBFIncompleteReadError


logger = logging.getLogger(__name__)

# Constants
FPT_HEADER_SIZE = 8
FPT_BLOCK_HEADER_SIZE = 8
FPT_SIGNATURE_PICTURE = 0
FPT_SIGNATURE_TEXT = 1
FPT_DEFAULT_BLOCK_SIZE = 64


@dataclass
class FPTHeader:
    """Represents the header of an FPT memo file."""
    next_free: int = 0  # Next free block (not needed for reading)
    block_size: int = FPT_DEFAULT_BLOCK_SIZE  # Bytes per block


def read_fpt_header(file: BinaryIO) -> FPTHeader:
    """Read the FPT header from offset 0 of a memo file."""
    file.seek(0)
    buf = file.read(FPT_HEADER_SIZE)
    if len(buf) < FPT_HEADER_SIZE:
        raise DBFIncompleteReadError(FPT_HEADER_SIZE, len(buf), "FPT header")

    next_free, block_size = struct.unpack(">L2xH", buf)
    logger.debug("FPT header: next free block %d, block size %d", next_free, block_size)
    return FPTHeader(next_free=next_free, block_size=block_size)


def fpt_read_block(file: BinaryIO, header: FPTHeader, block: int) -> Tuple[bytes, bool]:
    """
    Read the memo stored at a block of the FPT file.

    Args:
        file: The open FPT file
        header: The parsed FPT header (for the block size)
        block: Block number taken from the memo field

    Returns:
        Tuple of (data, is_text); is_text is True when the block signature
        marks the memo as text
    """
    file.seek(block * header.block_size)

    block_header = file.read(FPT_BLOCK_HEADER_SIZE)
    if len(block_header) < FPT_BLOCK_HEADER_SIZE:
        raise DBFIncompleteReadError(FPT_BLOCK_HEADER_SIZE, len(block_header), f"memo block {block} header")

    signature, length = struct.unpack(">LL", block_header)
    is_text = signature == FPT_SIGNATURE_TEXT

    # An empty memo is legal
    if length == 0:
        return (b'', is_text)

    data = file.read(length)
    if len(data) < length:
        raise DBFIncompleteReadError(length, len(data), f"memo block {block}")

    return (data, is_text)


__all__ = [
    'FPTHeader',
    'FPT_HEADER_SIZE', 'FPT_BLOCK_HEADER_SIZE',
    'FPT_SIGNATURE_PICTURE', 'FPT_SIGNATURE_TEXT', 'FPT_DEFAULT_BLOCK_SIZE',
    'read_fpt_header', 'fpt_read_block',
]
