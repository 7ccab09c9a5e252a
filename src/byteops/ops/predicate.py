# Filename: src/byteops/ops/predicate.py
"""Predicates: containment, prefix and suffix tests."""

from byteops.ops.locate import NOT_FOUND_POS, find
from byteops.util.string import as_bytes


def contains(data, pattern) -> bool:
    return find(data, pattern) != NOT_FOUND_POS


def starts_with(data, pattern) -> bool:
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None or not pattern:
        return False
    return data[: len(pattern)] == pattern


def ends_with(data, pattern) -> bool:
    """Compare pattern against the trailing len(pattern) bytes of data."""
    data = as_bytes(data, "data")
    pattern = as_bytes(pattern, "pattern")
    if data is None or not pattern or len(pattern) > len(data):
        return False
    return data[len(data) - len(pattern) :] == pattern
