# Filename: src/byteops/ops/shape.py
"""
Size-preserving and boundary transforms: slicing, cutting, rotating,
ASCII case mapping and reversal.
"""

import logging

from byteops.result import (
    INVALID_INPUT,
    OUT_OF_BOUNDS,
    Borrowed,
    Owned,
    Result,
)
from byteops.util.string import as_bytes

log = logging.getLogger(__name__)

# bytes.translate tables; ASCII letters only, every other byte maps to itself
_UPPER = bytes.maketrans(
    b"abcdefghijklmnopqrstuvwxyz", b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER = bytes.maketrans(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ", b"abcdefghijklmnopqrstuvwxyz"
)


def slice(data, start: int, end: int) -> Result:
    """
    Bytes from start to end, both inclusive.

    >>> slice(b"Hello World", 0, 4)
    Owned(b'Hello')
    """
    data = as_bytes(data, "data")
    if not data:
        return INVALID_INPUT
    if start < 0 or start > end or end >= len(data):
        log.debug(f"slice [{start}, {end}] outside {len(data)} bytes")
        return OUT_OF_BOUNDS
    return Owned(data[start : end + 1])


def cut_left(data, amount: int) -> Result:
    """Drop amount bytes from the start."""
    data = as_bytes(data, "data")
    if data is None:
        return INVALID_INPUT
    if amount < 0 or amount > len(data):
        return OUT_OF_BOUNDS
    return Owned(data[amount:])


def cut_right(data, amount: int) -> Result:
    """Drop amount bytes from the end."""
    data = as_bytes(data, "data")
    if data is None:
        return INVALID_INPUT
    if amount < 0 or amount > len(data):
        return OUT_OF_BOUNDS
    return Owned(data[: len(data) - amount])


def _rotation(data, amount: int) -> tuple[bytes | bytearray | None, int]:
    data = as_bytes(data, "data")
    if data is None or amount < 0:
        return data, -1
    if not data:
        # nothing to rotate, and len() would be a zero modulus
        return data, 0
    return data, amount % len(data)


def shift_left(data, amount: int) -> Result:
    """
    Rotate left by amount bytes, wrapping around.

    A rotation by a multiple of the length is a no-op and borrows the input.

    >>> shift_left(b"abcdefg", 3)
    Owned(b'defgabc')
    """
    data, amount = _rotation(data, amount)
    if data is None:
        return INVALID_INPUT
    if amount < 0:
        return OUT_OF_BOUNDS
    if amount == 0:
        return Borrowed(data)
    return Owned(data[amount:] + data[:amount])


def shift_right(data, amount: int) -> Result:
    """
    Rotate right by amount bytes, wrapping around.

    >>> shift_right(b"abcdefg", 3)
    Owned(b'efgabcd')
    """
    data, amount = _rotation(data, amount)
    if data is None:
        return INVALID_INPUT
    if amount < 0:
        return OUT_OF_BOUNDS
    if amount == 0:
        return Borrowed(data)
    split_at = len(data) - amount
    return Owned(data[split_at:] + data[:split_at])


def upper(data) -> Result:
    data = as_bytes(data, "data")
    if data is None:
        return INVALID_INPUT
    return Owned(data.translate(_UPPER))


def lower(data) -> Result:
    data = as_bytes(data, "data")
    if data is None:
        return INVALID_INPUT
    return Owned(data.translate(_LOWER))


def reverse(data) -> Result:
    data = as_bytes(data, "data")
    if data is None:
        return INVALID_INPUT
    return Owned(data[::-1])
