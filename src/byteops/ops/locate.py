# Filename: src/byteops/ops/locate.py
"""Locator: finding occurrence positions of a pattern."""

import logging
from collections.abc import Iterator

from byteops.util.string import as_bytes

log = logging.getLogger(__name__)

NOT_FOUND_POS = -1


def _valid(data, pattern) -> bool:
    return bool(data) and bool(pattern)


def iter_positions(data, pattern, overlap: bool = False) -> Iterator[int]:
    """
    Yield the start of every occurrence of pattern in data, left to right.

    Without overlap the scan resumes at the end of each match; with overlap it
    resumes one byte past the match start. Nothing is yielded if either
    argument is missing or empty.
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if not _valid(data, pattern):
        return

    step = 1 if overlap else len(pattern)
    pos = data.find(pattern)
    while pos != NOT_FOUND_POS:
        yield pos
        pos = data.find(pattern, pos + step)


def find(data, pattern) -> int:
    """
    Position of the first occurrence of pattern in data.

    Returns -1 if pattern does not occur or either argument is missing/empty.

    >>> find(b"Bar Foo Bar Foo", b"Foo")
    4
    """
    return next(iter_positions(data, pattern), NOT_FOUND_POS)


def find_nth(data, pattern, n: int) -> int:
    """
    Position of the n-th (1-based) occurrence of pattern.

    The scan advances one byte past each match, so overlapping occurrences
    count: find_nth(b"aaa", b"aa", 2) == 1.
    """
    if n < 1:
        log.debug(f"find_nth called with n={n}")
        return NOT_FOUND_POS

    for i, pos in enumerate(iter_positions(data, pattern, overlap=True), start=1):
        if i == n:
            return pos
    return NOT_FOUND_POS
