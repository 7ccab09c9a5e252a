# Filename: src/byteops/ops/replace.py
"""Replacing and inserting."""

import logging

from byteops.ops.count import count
from byteops.ops.locate import NOT_FOUND_POS, find, iter_positions
from byteops.result import INVALID_INPUT, OUT_OF_BOUNDS, Borrowed, Owned, Result
from byteops.util.string import as_bytes

log = logging.getLogger(__name__)


def _check(data, pattern, replacement) -> Result | None:
    """Shared argument checks; returns the early result, or None to carry on."""
    if data is None or pattern is None:
        return INVALID_INPUT
    if replacement is None:
        return Borrowed(data)
    if not data or not pattern or len(pattern) > len(data):
        log.debug(
            f"replace rejected: {len(data)} byte input, {len(pattern)} byte pattern"
        )
        return INVALID_INPUT
    return None


def replace(data, pattern, replacement) -> Result:
    """
    Replace the first occurrence of pattern with replacement.

    >>> replace(b"Hello Hello World", b"Hello", b"Bye")
    Owned(b'Bye Hello World')
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    replacement = as_bytes(replacement, "replacement")
    early = _check(data, pattern, replacement)
    if early is not None:
        return early

    pos = find(data, pattern)
    if pos == NOT_FOUND_POS:
        return Borrowed(data)
    return Owned(data[:pos] + replacement + data[pos + len(pattern) :])


def replace_all(data, pattern, replacement) -> Result:
    """
    Replace every non-overlapping occurrence of pattern with replacement.

    The output is allocated once at its exact final size,
    len(data) + k * (len(replacement) - len(pattern)).

    >>> replace_all(b"Hello Hello World", b"Hello", b"Bye")
    Owned(b'Bye Bye World')
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    replacement = as_bytes(replacement, "replacement")
    early = _check(data, pattern, replacement)
    if early is not None:
        return early

    occurrences = count(data, pattern)
    if occurrences == 0:
        return Borrowed(data)

    size_pat = len(pattern)
    size_rep = len(replacement)
    out = bytearray(len(data) + occurrences * (size_rep - size_pat))
    pos_in = pos_out = 0
    for pos in iter_positions(data, pattern):
        chunk = pos - pos_in
        out[pos_out : pos_out + chunk] = data[pos_in:pos]
        pos_out += chunk
        out[pos_out : pos_out + size_rep] = replacement
        pos_out += size_rep
        pos_in = pos + size_pat
    out[pos_out:] = data[pos_in:]
    log.trace(f"replace_all: {occurrences} replacements, {len(out)} bytes out")
    return Owned(out)


def insert(data, pattern, index: int) -> Result:
    """
    Insert pattern at byte offset index (0 <= index <= len(data)).

    >>> insert(b"Hello World", b"There ", 6)
    Owned(b'Hello There World')
    """
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None:
        return INVALID_INPUT
    if not pattern:
        return Borrowed(data)
    if index < 0 or index > len(data):
        log.debug(f"insert index {index} outside {len(data)} bytes")
        return OUT_OF_BOUNDS
    return Owned(data[:index] + pattern + data[index:])
