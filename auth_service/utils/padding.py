"""
PKCS-style padding: every pad byte holds the pad length, so the pad can
always be stripped without knowing the original size.
"""
from typing import Optional

from ..errors import MalformedPadding

BLOCK_SIZE = 16
MAX_BLOCK_SIZE = 255


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Pad data up to the next multiple of block_size.

    Data that is already aligned gets a full extra block, so the padded
    result is never left without a pad.

    Raises:
        ValueError: If block_size is not in 1..255
    """
    if not 0 < block_size <= MAX_BLOCK_SIZE:
        raise ValueError(f"block_size must be between 1 and 255, got {block_size}")

    n = block_size - len(data) % block_size
    return bytes(data) + bytes([n]) * n


def unpad(data: bytes, block_size: Optional[int] = None) -> bytes:
    """
    Strip the pad added by pad().

    Without block_size the pad length is only bounded by the data length
    and the largest block pad() accepts.

    Raises:
        MalformedPadding: If data is empty or the last byte is 0, larger than
                          the data or larger than block_size
    """
    if block_size is None:
        block_size = MAX_BLOCK_SIZE

    if not data:
        raise MalformedPadding("can not unpad empty data")

    n = data[-1]
    if n == 0:
        raise MalformedPadding("pad length is zero")
    if n > len(data):
        raise MalformedPadding(f"pad length {n} exceeds data length {len(data)}")
    if n > block_size:
        raise MalformedPadding(f"pad length {n} exceeds block size {block_size}")

    return bytes(data[:-n])
