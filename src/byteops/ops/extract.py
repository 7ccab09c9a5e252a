# Filename: src/byteops/ops/extract.py
"""Splitting, and extraction relative to a marker."""

import logging

from byteops.ops.count import count
from byteops.ops.locate import NOT_FOUND_POS, find, iter_positions
from byteops.result import INVALID_INPUT, NOT_FOUND, OUT_OF_BOUNDS, Invalid, Owned, Result
from byteops.util.string import as_bytes

log = logging.getLogger(__name__)


def split(data, delimiter) -> list[bytes] | Invalid:
    """
    Split data on every occurrence of delimiter.

    Empty pieces are dropped, so leading, trailing and repeated delimiters do
    not produce empty entries. If the delimiter does not occur the result is a
    single copy of the input.

    >>> split(b"Hello World", b" ")
    [b'Hello', b'World']
    """
    data = as_bytes(data, "data")
    delimiter = as_bytes(delimiter, "delimiter")
    if not data or not delimiter or len(delimiter) > len(data):
        return INVALID_INPUT

    if count(data, delimiter) == 0:
        return [bytes(data)]

    parts: list[bytes] = []
    start = 0
    for pos in iter_positions(data, delimiter):
        if pos > start:
            parts.append(bytes(data[start:pos]))
        start = pos + len(delimiter)
    if start < len(data):
        parts.append(bytes(data[start:]))
    return parts


def _marker(data, pattern) -> tuple[int, Invalid | None]:
    """Locate pattern for the before/after family."""
    if not data or not pattern:
        return NOT_FOUND_POS, INVALID_INPUT
    pos = find(data, pattern)
    if pos == NOT_FOUND_POS:
        return pos, NOT_FOUND
    return pos, None


def before(data, pattern) -> Result:
    """
    Bytes preceding the first occurrence of pattern.

    >>> before(b"Hello There World", b"There")
    Owned(b'Hello ')
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    pos, failure = _marker(data, pattern)
    if failure is not None:
        return failure
    return Owned(data[:pos])


def after(data, pattern) -> Result:
    """
    Bytes following the first occurrence of pattern.

    >>> after(b"Hello There World", b"There")
    Owned(b' World')
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    pos, failure = _marker(data, pattern)
    if failure is not None:
        return failure
    return Owned(data[pos + len(pattern) :])


def between(data, a, b) -> Result:
    """
    Bytes strictly between the first a and the first b.

    If the first b starts before the first a has ended, there is no span
    between them and the result is OUT_OF_BOUNDS.

    >>> between(b"Hello There World", b"Hello", b"World")
    Owned(b' There ')
    """
    data = as_bytes(data, "data")
    a = as_bytes(a, "a")
    b = as_bytes(b, "b")
    pos_a, failure = _marker(data, a)
    if failure is not None:
        return failure
    pos_b, failure = _marker(data, b)
    if failure is not None:
        return failure

    start = pos_a + len(a)
    if pos_b < start:
        log.debug(f"between: end marker at {pos_b} precedes span start {start}")
        return OUT_OF_BOUNDS
    return Owned(data[start:pos_b])
