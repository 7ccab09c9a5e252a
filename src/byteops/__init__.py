"""
byteops: stateless operations on byte strings.

Transforming operations return a tagged Result (Owned, Borrowed or Invalid);
locators return -1 and counters return 0 when there is nothing to report.
"""

# registers the TRACE level used throughout the package
from byteops import log as _log  # noqa: F401
from byteops.ops import *  # noqa: F401,F403
from byteops.ops import __all__ as _ops_all
from byteops.result import (
    INVALID_INPUT,
    NOT_FOUND,
    OUT_OF_BOUNDS,
    Borrowed,
    Failure,
    Invalid,
    InvalidResultError,
    Owned,
    Result,
    is_invalid,
)

__version__ = "0.1.0"

__all__ = [
    *_ops_all,
    "INVALID_INPUT",
    "NOT_FOUND",
    "OUT_OF_BOUNDS",
    "Borrowed",
    "Failure",
    "Invalid",
    "InvalidResultError",
    "Owned",
    "Result",
    "is_invalid",
]
