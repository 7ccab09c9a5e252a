"""Tests for slicing, cutting, shifting, case mapping and reversal."""

import pytest

from byteops.ops.shape import (
    cut_left,
    cut_right,
    lower,
    reverse,
    shift_left,
    shift_right,
    slice,
    upper,
)
from byteops.result import INVALID_INPUT, OUT_OF_BOUNDS, Borrowed, Owned


def test_slice_inclusive():
    """Both bounds are included."""
    assert slice(b"Hello World", 0, 4) == b"Hello"
    assert slice(b"Hello World", 6, 10) == b"World"
    assert slice(b"Hello World", 3, 3) == b"l"


def test_slice_returns_owned():
    result = slice(b"Hello World", 0, 4)
    assert isinstance(result, Owned)
    assert result.data == b"Hello"


@pytest.mark.parametrize(
    "start, end",
    [
        (4, 0),  # start > end
        (0, 11),  # end == length would read past the last byte
        (0, 50),
        (20, 30),
        (-1, 3),
    ],
)
def test_slice_out_of_bounds(start, end):
    """Bad bounds fail before anything is read."""
    assert slice(b"Hello World", start, end) is OUT_OF_BOUNDS


def test_slice_empty_or_missing():
    assert slice(b"", 0, 0) is INVALID_INPUT
    assert slice(None, 0, 0) is INVALID_INPUT


def test_cut_left():
    assert cut_left(b"Hello World", 5) == b" World"
    assert cut_left(b"Hello World", 0) == b"Hello World"
    assert cut_left(b"Hello World", 11) == b""


def test_cut_right():
    assert cut_right(b"Hello World", 5) == b"Hello "
    assert cut_right(b"Hello World", 11) == b""


def test_cut_too_far():
    """Cutting more than the length is out of bounds."""
    assert cut_left(b"Hello", 6) is OUT_OF_BOUNDS
    assert cut_right(b"Hello", 6) is OUT_OF_BOUNDS
    assert cut_left(b"Hello", -1) is OUT_OF_BOUNDS
    assert cut_right(None, 1) is INVALID_INPUT


def test_shift_left():
    assert shift_left(b"abcdefg", 3) == b"defgabc"
    assert shift_left(b"abcdefg", 10) == b"defgabc"  # 10 mod 7 == 3


def test_shift_right():
    assert shift_right(b"abcdefg", 3) == b"efgabcd"
    assert shift_right(b"abcdefg", 1) == b"gabcdef"


def test_shift_full_rotation_borrows_input():
    """A zero effective rotation is a no-op and copies nothing."""
    data = b"abcdefg"
    for func in (shift_left, shift_right):
        for amount in (0, 7, 14):
            result = func(data, amount)
            assert isinstance(result, Borrowed)
            assert result.source is data
            assert result == data


def test_shift_empty_input():
    """Empty input is guarded before the modulus."""
    assert shift_left(b"", 3) == b""
    assert shift_right(b"", 3).borrowed


def test_shift_invalid():
    assert shift_left(None, 1) is INVALID_INPUT
    assert shift_right(b"abc", -1) is OUT_OF_BOUNDS


def test_upper_lower():
    assert upper(b"Hello World") == b"HELLO WORLD"
    assert lower(b"HELLO WORLD") == b"hello world"


def test_case_mapping_is_ascii_only():
    """Non-ASCII bytes pass through unchanged."""
    data = "café".encode("utf-8") + b"\xe9\x00"
    assert upper(data) == b"CAF\xc3\xa9\xe9\x00"
    assert lower(b"\xc9A") == b"\xc9a"
    assert len(upper(data)) == len(data)


def test_reverse():
    assert reverse(b"Hello World") == b"dlroW olleH"
    assert reverse(b"") == b""
    assert reverse(None) is INVALID_INPUT
