# Filename: src/byteops/ops/count.py
"""Counter: occurrence counts."""

import logging

from byteops.ops.locate import NOT_FOUND_POS, find, iter_positions
from byteops.util.string import as_bytes

log = logging.getLogger(__name__)


def _countable(data, pattern) -> bool:
    return bool(data) and bool(pattern) and len(pattern) <= len(data)


def count(data, pattern) -> int:
    """Number of non-overlapping occurrences of pattern in data."""
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if not _countable(data, pattern):
        return 0
    return sum(1 for _ in iter_positions(data, pattern))


def count_overlap(data, pattern) -> int:
    """
    Number of occurrences of pattern, allowing them to overlap.

    >>> count_overlap(b"Fooo Foo", b"oo")
    3
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if not _countable(data, pattern):
        return 0
    return sum(1 for _ in iter_positions(data, pattern, overlap=True))


def streak(data, pattern) -> int:
    """
    How many times pattern repeats back to back from its first occurrence.

    >>> streak(b"Bar Foo Foo Bar Foo", b"Foo ")
    2
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if not _countable(data, pattern):
        return 0

    pos = find(data, pattern)
    if pos == NOT_FOUND_POS:
        return 0

    size = len(pattern)
    repeats = 0
    while data.startswith(pattern, pos):
        repeats += 1
        pos += size
    return repeats
