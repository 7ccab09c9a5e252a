"""
Conversions between user-facing text and the raw bytes the operations work on.
"""

import codecs

BytesLike = bytes | bytearray | memoryview


def as_bytes(value, name: str = "value") -> bytes | bytearray | None:
    """
    Normalise an operation argument.

    None stays None (the "missing argument" case). bytes and bytearray are
    returned as-is so borrowed results can point at the caller's buffer.
    memoryviews are copied out, so a Borrowed result built from one views
    that private copy rather than the memoryview's buffer. Result objects
    are unwrapped so that operations chain; an Invalid result becomes None.

    Raises:
        TypeError: for str or any other non bytes-like value.
    """
    if value is None or isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        return value.tobytes()

    # local import, result.py has no dependency on this module
    from byteops.result import Result

    if isinstance(value, Result):
        return value.data if value.ok else None

    if isinstance(value, str):
        raise TypeError(
            f"{name} must be bytes-like, got str {value!r}; encode it first"
        )
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")


def c_str_to_bytes(s: str) -> bytes:
    """
    Convert text containing C-style escapes (\\n, \\t, \\xHH, \\NNN) to bytes.

    Characters that are not part of an escape are kept as their UTF-8 bytes,
    so "caf\\xc3\\xa9" and "café" decode to the same thing.

    Examples:
        >>> c_str_to_bytes('\\x41\\x42\\x43')
        b'ABC'
        >>> c_str_to_bytes('tab\\there')
        b'tab\\there'

    Raises:
        UnicodeDecodeError: on a malformed or trailing escape.
        UnicodeEncodeError: on a \\u escape above \\xff.
    """
    # unicode_escape maps every non-escape byte to the code point of the same
    # value, so latin-1 gives back exactly the original UTF-8 bytes.
    return codecs.decode(s.encode("utf-8"), "unicode_escape").encode("latin-1")


def bytes_to_c_str(data: BytesLike) -> str:
    """Render bytes as printable ASCII, escaping control and high bytes."""
    text = bytes(data).decode("latin-1").encode("unicode_escape").decode("ascii")
    return text.replace('"', '\\"')
