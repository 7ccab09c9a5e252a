"""The string operations, grouped by what they do."""

from byteops.ops.count import count, count_overlap, streak
from byteops.ops.extract import after, before, between, split
from byteops.ops.locate import NOT_FOUND_POS, find, find_nth, iter_positions
from byteops.ops.predicate import contains, ends_with, starts_with
from byteops.ops.printf import format
from byteops.ops.remove import remove, remove_all, trim_left, trim_right
from byteops.ops.replace import insert, replace, replace_all
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

__all__ = [
    "NOT_FOUND_POS",
    "after",
    "before",
    "between",
    "contains",
    "count",
    "count_overlap",
    "cut_left",
    "cut_right",
    "ends_with",
    "find",
    "find_nth",
    "format",
    "insert",
    "iter_positions",
    "lower",
    "remove",
    "remove_all",
    "replace",
    "replace_all",
    "reverse",
    "shift_left",
    "shift_right",
    "slice",
    "split",
    "starts_with",
    "streak",
    "trim_left",
    "trim_right",
    "upper",
]
