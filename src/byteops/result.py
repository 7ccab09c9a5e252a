# Filename: src/byteops/result.py
"""
Tagged results returned by the transforming operations.

Every transformer returns one of:
- Owned: a freshly built bytes object that belongs to the caller.
- Borrowed: a zero-copy view of (part of) the caller's own input.
- Invalid: the sentinel for invalid input, absence or out-of-bounds access.

Callers check ``result.ok`` (or plain truthiness) before using the data.
"""

import enum
from typing import Optional


class Failure(enum.Enum):
    """Why an operation produced no value."""

    INVALID_INPUT = "invalid input"
    NOT_FOUND = "not found"
    OUT_OF_BOUNDS = "out of bounds"


class InvalidResultError(ValueError):
    """Raised by Result.unwrap() when the result is Invalid."""

    def __init__(self, failure: Failure):
        super().__init__(f"operation produced no result: {failure.value}")
        self.failure = failure


class Result:
    """Common interface for Owned, Borrowed and Invalid."""

    __slots__ = ()

    ok: bool = True
    owned: bool = False
    borrowed: bool = False

    @property
    def data(self) -> bytes:
        raise NotImplementedError

    def unwrap(self) -> bytes:
        """Return the bytes, or raise InvalidResultError for an Invalid result."""
        return self.data

    def __bytes__(self) -> bytes:
        return self.unwrap()

    def __bool__(self) -> bool:
        # Validity, not emptiness: an empty Owned result is still a result.
        return self.ok

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other) -> bool:
        if isinstance(other, Result):
            if not (self.ok and other.ok):
                return not (self.ok or other.ok) and self.failure == other.failure
            return self.data == other.data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.ok and self.data == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        # equal to bytes, so it must hash like them
        return hash(self.data)


class Owned(Result):
    """A newly built buffer owned by the caller."""

    __slots__ = ("_data",)

    owned = True

    def __init__(self, data: bytes):
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"Owned({self._data!r})"


class Borrowed(Result):
    """
    A view of the caller's input, possibly offset past a prefix.

    No bytes are copied until ``data`` is read. The view pins the source
    buffer; call release() when done if the source is a bytearray that
    needs resizing.
    """

    __slots__ = ("source", "start", "end", "_view")

    borrowed = True

    def __init__(self, source, start: int = 0, end: Optional[int] = None):
        self.source = source
        self.start = start
        self.end = len(source) if end is None else end
        self._view: Optional[memoryview] = memoryview(source)[self.start : self.end]

    @property
    def view(self) -> memoryview:
        if self._view is None:
            raise ValueError("Borrowed result has been released")
        return self._view

    @property
    def data(self) -> bytes:
        return self.view.tobytes()

    def is_whole(self) -> bool:
        """True if this borrow covers the entire input, i.e. the operation was a no-op."""
        return self.start == 0 and self.end == len(self.source)

    def release(self) -> None:
        if self._view is not None:
            self._view.release()
            self._view = None

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"Borrowed({self.source!r}, start={self.start}, end={self.end})"


class Invalid(Result):
    """The no-value sentinel. Use the module-level singletons."""

    __slots__ = ("failure",)

    ok = False

    def __init__(self, failure: Failure):
        self.failure = failure

    @property
    def data(self) -> bytes:
        raise InvalidResultError(self.failure)

    def __len__(self) -> int:
        return 0

    def __hash__(self) -> int:
        return hash(self.failure)

    def __repr__(self) -> str:
        return f"Invalid({self.failure.name})"


INVALID_INPUT = Invalid(Failure.INVALID_INPUT)
NOT_FOUND = Invalid(Failure.NOT_FOUND)
OUT_OF_BOUNDS = Invalid(Failure.OUT_OF_BOUNDS)


def is_invalid(value) -> bool:
    """True for any Invalid sentinel; works for split()'s list results too."""
    return isinstance(value, Invalid)
