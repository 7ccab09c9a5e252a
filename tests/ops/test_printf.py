"""Tests for printf-style formatting and its template grammar."""

import pyparsing as pp
import pytest

from byteops.ops.printf import argument_conversions, format, parse_template
from byteops.result import INVALID_INPUT, Borrowed, Owned


def test_format_string():
    result = format(b"Hello %s", b"World")
    assert isinstance(result, Owned)
    assert result == b"Hello World"


def test_format_str_argument_is_utf8():
    assert format(b"%s!", "café") == "café!".encode("utf-8")


@pytest.mark.parametrize(
    "template, args, expected",
    [
        (b"%d items", (3,), b"3 items"),
        (b"%i|%u", (-4, 7), b"-4|7"),
        (b"%5d|", (42,), b"   42|"),
        (b"%-5d|", (42,), b"42   |"),
        (b"%05d", (42,), b"00042"),
        (b"%+d", (5,), b"+5"),
        (b"%x %X %o", (255, 255, 8), b"ff FF 10"),
        (b"%#x", (255,), b"0xff"),
        (b"%.2f", (3.14159,), b"3.14"),
        (b"%8.3f|", (2.5,), b"   2.500|"),
        (b"%e", (1234.5,), b"1.234500e+03"),
        (b"%g", (0.0001,), b"0.0001"),
        (b"%c%c", (72, b"i"), b"Hi"),
        (b"100%%", (), b"100%"),
        (b"%ld %lld %hd %zu", (1, 2, 3, 4), b"1 2 3 4"),
        (b"%*d|", (4, 7), b"   7|"),
        (b"%.*f", (1, 2.25), b"2.2"),
        (b"%s=%d", (b"x", 1), b"x=1"),
        (b"%s", (12,), b"12"),
    ],
)
def test_format_directives(template, args, expected):
    assert format(template, *args) == expected


def test_format_keeps_literal_whitespace_and_tabs():
    """Whitespace between directives is copied verbatim."""
    assert format(b"  a\t%s  b ", b"X") == b"  a\tX  b "


def test_format_keeps_high_bytes():
    """Template bytes outside ASCII survive unchanged."""
    assert format(b"\xff\x00%s\x80", b"\x01") == b"\xff\x00\x01\x80"


def test_format_no_directives():
    assert format(b"plain text") == b"plain text"


def test_format_empty_template_borrows():
    template = b""
    result = format(template)
    assert isinstance(result, Borrowed)
    assert result.source is template


@pytest.mark.parametrize(
    "template, args",
    [
        (b"%s", (b"",)),
        (b"%.0s", (b"abc",)),
        (b"%s%s", (b"", b"")),
    ],
)
def test_format_empty_expansion_is_owned(template, args):
    """A directive that expands to nothing is still substituted."""
    result = format(template, *args)
    assert isinstance(result, Owned)
    assert result == b""


@pytest.mark.parametrize(
    "template",
    [
        b"50%",  # dangling percent
        b"%n",  # unsupported conversion
        b"%p",
        b"%q",
        b"%5",
    ],
)
def test_format_bad_template(template):
    assert format(template, 1) is INVALID_INPUT


def test_format_missing_template():
    assert format(None, 1) is INVALID_INPUT


def test_format_too_few_arguments():
    assert format(b"%s and %s", b"one") is INVALID_INPUT
    assert format(b"%*d", 5) is INVALID_INPUT


def test_format_surplus_arguments_ignored():
    assert format(b"%s", b"a", b"b") == b"a"


def test_format_wrong_argument_type():
    assert format(b"%d", b"not a number") is INVALID_INPUT


def test_parse_template_structure():
    """Literals come back as strings, directives as named groups."""
    tokens = parse_template("x=%-08.3lf;")
    assert tokens[0] == "x="
    directive = tokens[1]
    assert directive["flags"] == "-0"
    assert directive["width"] == "8"
    assert directive["precision"] == ".3"
    assert directive["length"] == "l"
    assert directive["conversion"] == "f"
    assert tokens[2] == ";"


def test_parse_template_rejects_dangling_percent():
    with pytest.raises(pp.ParseException):
        parse_template("100%")


def test_argument_conversions():
    """Each '*' takes its own argument ahead of the value it sizes."""
    assert argument_conversions("%-*d and %s%%") == ["*", "d", "s"]
    assert argument_conversions("%*.*f|%c") == ["*", "*", "f", "c"]
    assert argument_conversions("no directives") == []
