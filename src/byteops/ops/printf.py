# Filename: src/byteops/ops/printf.py
"""
printf-style formatting of byte templates.

Templates are parsed with a pyparsing grammar into literal runs and
conversion directives:
- %[flags][width|*][.precision|.*][length]conversion
- flags: any of "-+ #0"
- length modifiers (hh, h, l, ll, L, q, j, z, t) are accepted and ignored
- conversions: d i u o x X e E f F g G c s %

Each directive is then rendered with Python's own bytes %-formatting, which
shares printf's semantics for all of the above.
"""

import logging
from typing import Any

import pyparsing as pp

from byteops.result import INVALID_INPUT, Borrowed, Owned, Result
from byteops.util.string import as_bytes

log = logging.getLogger(__name__)

CONVERSIONS = "diuoxXeEfFgGcs%"
LENGTH_MODIFIERS = "hh h ll l L q j z t"

# Directive pieces
PERCENT = pp.Suppress("%")
STAR = pp.Literal("*")
flags = pp.Word("-+ #0").set_results_name("flags")
width = (pp.Word(pp.nums) | STAR).set_results_name("width")
precision = pp.Combine(pp.Literal(".") + pp.Opt(pp.Word(pp.nums) | STAR)).set_results_name(
    "precision"
)
length = pp.one_of(LENGTH_MODIFIERS).set_results_name("length")
conversion = pp.Char(CONVERSIONS).set_results_name("conversion")

directive = pp.Group(
    PERCENT
    + pp.Opt(flags)
    + pp.Opt(width)
    + pp.Opt(precision)
    + pp.Opt(length)
    + conversion
)

# Everything up to the next '%' is copied verbatim
literal = pp.CharsNotIn("%")

template_parser = pp.ZeroOrMore(directive | literal) + pp.StringEnd()
template_parser.leave_whitespace()
template_parser.parse_with_tabs()


def parse_template(template: str) -> pp.ParseResults:
    """
    Split a template into literal strings and directive groups.

    Each directive group carries the results names flags, width, precision,
    length and conversion (all but conversion may be absent).

    Raises:
        ParseException: on a dangling '%' or an unsupported conversion.
    """
    return template_parser.parse_string(template, parse_all=True)


def argument_conversions(template: str) -> list[str]:
    """
    The conversion each positional argument feeds, in order.

    A '*' width or precision consumes an argument of its own and is
    reported as "*".

    >>> argument_conversions("%-*d and %s%%")
    ['*', 'd', 's']

    Raises:
        ParseException: as parse_template.
    """
    kinds = []
    for token in parse_template(template):
        if not isinstance(token, pp.ParseResults) or token["conversion"] == "%":
            continue
        kinds.extend("*" * (token.get("width", "") + token.get("precision", "")).count("*"))
        kinds.append(token["conversion"])
    return kinds


def _coerce_arg(value: Any, conv: str) -> Any:
    """Make a Python value acceptable to bytes %-formatting."""
    if conv == "c" and isinstance(value, str):
        return value.encode("utf-8")
    if conv == "s" and not isinstance(value, (bytes, bytearray, memoryview)):
        # %s takes anything printable, the way print() would show it
        return str(value).encode("utf-8")
    return value


def _render(tokens: pp.ParseResults, args: list) -> bytes:
    out = bytearray()
    for token in tokens:
        if not isinstance(token, pp.ParseResults):
            # latin-1 round trip restores the original template bytes
            out += token.encode("latin-1")
            continue

        conv = token["conversion"]
        if conv == "%":
            out += b"%"
            continue

        spec = token.get("flags", "") + token.get("width", "") + token.get("precision", "")
        values = []
        for _ in range(spec.count("*")):
            values.append(int(args.pop(0)))
        values.append(_coerce_arg(args.pop(0), conv))
        out += (b"%" + spec.encode("ascii") + conv.encode("ascii")) % tuple(values)
    return bytes(out)


def format(template, *args: Any) -> Result:
    """
    Substitute args into a printf-style template.

    Returns INVALID_INPUT if the template is missing or malformed, or there are
    fewer arguments than the directives consume. Surplus arguments are ignored,
    as printf does.

    >>> format(b"Hello %s", b"World")
    Owned(b'Hello World')
    """
    template = as_bytes(template, "template")
    if template is None:
        return INVALID_INPUT

    try:
        tokens = parse_template(bytes(template).decode("latin-1"))
    except pp.ParseException as e:
        log.debug(f"Bad format template {bytes(template)!r}: {e}")
        return INVALID_INPUT

    remaining = list(args)
    try:
        output = _render(tokens, remaining)
    except IndexError:
        log.debug(f"Too few arguments ({len(args)}) for template {bytes(template)!r}")
        return INVALID_INPUT
    except (TypeError, ValueError, OverflowError) as e:
        log.debug(f"Cannot format {args!r} into {bytes(template)!r}: {e}")
        return INVALID_INPUT

    if remaining:
        log.debug(f"format ignored {len(remaining)} surplus argument(s)")
    if not template:
        return Borrowed(template)
    return Owned(output)
