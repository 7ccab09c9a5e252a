# Filename: src/byteops/ops/remove.py
"""Trimming and removal of a pattern."""

import logging

from byteops.ops.count import count
from byteops.ops.locate import NOT_FOUND_POS, find, iter_positions
from byteops.ops.predicate import ends_with, starts_with
from byteops.result import INVALID_INPUT, Borrowed, Owned, Result
from byteops.util.string import as_bytes

log = logging.getLogger(__name__)


def trim_left(data, pattern) -> Result:
    """
    Drop pattern from the start of data if it is there.

    Never copies: the result is a view past the prefix, or the whole input
    when there is nothing to trim.

    >>> trim_left(b"Hello World", b"Hello ").data
    b'World'
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None:
        return INVALID_INPUT
    if starts_with(data, pattern):
        return Borrowed(data, start=len(pattern))
    return Borrowed(data)


def trim_right(data, pattern) -> Result:
    """Drop pattern from the end of data if it is there, as a new buffer."""
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None:
        return INVALID_INPUT
    if ends_with(data, pattern):
        return Owned(data[: len(data) - len(pattern)])
    return Borrowed(data)


def remove(data, pattern) -> Result:
    """
    Remove the first occurrence of pattern.

    >>> remove(b"Hello There World", b"There")
    Owned(b'Hello  World')
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None:
        return INVALID_INPUT

    pos = find(data, pattern)
    if pos == NOT_FOUND_POS:
        return Borrowed(data)
    return Owned(data[:pos] + data[pos + len(pattern) :])


def remove_all(data, pattern) -> Result:
    """Remove every non-overlapping occurrence of pattern in one pass."""
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None:
        return INVALID_INPUT

    occurrences = count(data, pattern)
    if occurrences == 0:
        return Borrowed(data)

    size = len(pattern)
    out = bytearray(len(data) - occurrences * size)
    pos_in = pos_out = 0
    for pos in iter_positions(data, pattern):
        chunk = pos - pos_in
        out[pos_out : pos_out + chunk] = data[pos_in:pos]
        pos_out += chunk
        pos_in = pos + size
    out[pos_out:] = data[pos_in:]
    log.trace(f"remove_all dropped {occurrences} x {size} bytes")
    return Owned(out)
