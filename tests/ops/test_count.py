"""Tests for count, count_overlap and streak."""

import pytest

from byteops.ops.count import count, count_overlap, streak


def test_count_non_overlapping():
    """The cursor jumps a whole pattern length after each match."""
    assert count(b"Fooo Foo", b"oo") == 2
    assert count(b"aaaa", b"aa") == 2


def test_count_overlap():
    """The cursor moves one byte after each match."""
    assert count_overlap(b"Fooo Foo", b"oo") == 3
    assert count_overlap(b"aaaa", b"aa") == 3


@pytest.mark.parametrize("func", [count, count_overlap, streak])
@pytest.mark.parametrize(
    "data, pattern",
    [
        (None, b"a"),
        (b"a", None),
        (b"", b"a"),
        (b"a", b""),
        (b"ab", b"abc"),  # pattern longer than data
    ],
)
def test_counters_invalid_inputs(func, data, pattern):
    """Invalid or impossible inputs count zero."""
    assert func(data, pattern) == 0


def test_count_absent():
    assert count(b"Hello", b"xyz") == 0
    assert count_overlap(b"Hello", b"xyz") == 0


def test_streak():
    """Repeats counted from the first occurrence only."""
    assert streak(b"Bar Foo Foo Bar Foo", b"Foo ") == 2
    assert streak(b"abababxab", b"ab") == 3
    assert streak(b"xyz", b"y") == 1


def test_streak_not_found():
    assert streak(b"Bar Bar", b"Foo") == 0


def test_streak_stops_at_end_of_data():
    """A partial trailing repeat does not count."""
    assert streak(b"FooFooFo", b"Foo") == 2
