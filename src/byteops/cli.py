#!/usr/bin/env python3
# Filename: src/byteops/cli.py
import argparse
import logging
import sys
from collections.abc import Callable
from typing import Any

from pyparsing import ParseException
from rich.console import Console
from rich.text import Text

from byteops import ops, sniff
from byteops.log import LEVELS, setup_logging
from byteops.ops.printf import argument_conversions
from byteops.result import Result
from byteops.util.string import bytes_to_c_str, c_str_to_bytes

BYTES = "bytes"
INT = "int"

# printf conversion -> how a numeric command-line argument is read
NUMERIC_CONVERSIONS: dict[str, Callable[[str], Any]] = {
    **dict.fromkeys("*diuoxX", int),
    **dict.fromkeys("eEfFgG", float),
}

# name -> (operation, [(argument, kind)], help)
COMMANDS: dict[str, tuple[Callable, list[tuple[str, str]], str]] = {
    "find": (ops.find, [("data", BYTES), ("pattern", BYTES)],
             "Position of the first occurrence of PATTERN."),
    "find-nth": (ops.find_nth, [("data", BYTES), ("pattern", BYTES), ("n", INT)],
                 "Position of the N-th (overlapping) occurrence of PATTERN."),
    "count": (ops.count, [("data", BYTES), ("pattern", BYTES)],
              "Count non-overlapping occurrences."),
    "count-overlap": (ops.count_overlap, [("data", BYTES), ("pattern", BYTES)],
                      "Count occurrences, allowing overlap."),
    "streak": (ops.streak, [("data", BYTES), ("pattern", BYTES)],
               "Back-to-back repeats of PATTERN from its first occurrence."),
    "contains": (ops.contains, [("data", BYTES), ("pattern", BYTES)],
                 "Exit 0 if DATA contains PATTERN."),
    "starts-with": (ops.starts_with, [("data", BYTES), ("pattern", BYTES)],
                    "Exit 0 if DATA starts with PATTERN."),
    "ends-with": (ops.ends_with, [("data", BYTES), ("pattern", BYTES)],
                  "Exit 0 if DATA ends with PATTERN."),
    "slice": (ops.slice, [("data", BYTES), ("start", INT), ("end", INT)],
              "Bytes START..END inclusive."),
    "cut-left": (ops.cut_left, [("data", BYTES), ("amount", INT)],
                 "Drop AMOUNT bytes from the start."),
    "cut-right": (ops.cut_right, [("data", BYTES), ("amount", INT)],
                  "Drop AMOUNT bytes from the end."),
    "shift-left": (ops.shift_left, [("data", BYTES), ("amount", INT)],
                   "Rotate left by AMOUNT bytes."),
    "shift-right": (ops.shift_right, [("data", BYTES), ("amount", INT)],
                    "Rotate right by AMOUNT bytes."),
    "upper": (ops.upper, [("data", BYTES)], "ASCII upper case."),
    "lower": (ops.lower, [("data", BYTES)], "ASCII lower case."),
    "reverse": (ops.reverse, [("data", BYTES)], "Reverse byte order."),
    "trim-left": (ops.trim_left, [("data", BYTES), ("pattern", BYTES)],
                  "Drop PATTERN from the start if present."),
    "trim-right": (ops.trim_right, [("data", BYTES), ("pattern", BYTES)],
                   "Drop PATTERN from the end if present."),
    "remove": (ops.remove, [("data", BYTES), ("pattern", BYTES)],
               "Remove the first occurrence of PATTERN."),
    "remove-all": (ops.remove_all, [("data", BYTES), ("pattern", BYTES)],
                   "Remove every occurrence of PATTERN."),
    "replace": (ops.replace,
                [("data", BYTES), ("pattern", BYTES), ("replacement", BYTES)],
                "Replace the first occurrence of PATTERN."),
    "replace-all": (ops.replace_all,
                    [("data", BYTES), ("pattern", BYTES), ("replacement", BYTES)],
                    "Replace every occurrence of PATTERN."),
    "insert": (ops.insert, [("data", BYTES), ("pattern", BYTES), ("index", INT)],
               "Insert PATTERN at byte offset INDEX."),
    "split": (ops.split, [("data", BYTES), ("delimiter", BYTES)],
              "Split on DELIMITER, one piece per line."),
    "before": (ops.before, [("data", BYTES), ("pattern", BYTES)],
               "Bytes before the first PATTERN."),
    "after": (ops.after, [("data", BYTES), ("pattern", BYTES)],
              "Bytes after the first PATTERN."),
    "between": (ops.between, [("data", BYTES), ("a", BYTES), ("b", BYTES)],
                "Bytes between the first A and the first B."),
}


def _format_args(
    template: bytes, texts: list[str], decode: Callable[[str], bytes]
) -> list[Any]:
    """
    Convert command-line format arguments to suit the directive each one feeds.

    Numeric conversions (and '*') get an int or float; everything else, and
    any text that does not parse as a number, stays as bytes so it is printed
    exactly as typed.
    """
    try:
        kinds = argument_conversions(template.decode("latin-1"))
    except ParseException:
        # format() reports the bad template itself
        kinds = []

    values = []
    for i, text in enumerate(texts):
        kind = kinds[i] if i < len(kinds) else "s"
        convert = NUMERIC_CONVERSIONS.get(kind)
        if convert is not None:
            try:
                values.append(convert(text))
                continue
            except ValueError:
                pass
        values.append(decode(text))
    return values


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parses command-line arguments and decodes byte operands."""
    parser = argparse.ArgumentParser(
        prog="byteops",
        description="Run a byte-string operation and print the result.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Byte operands accept C escapes (\\n, \\t, \\xHH, \\NNN).\n\n"
        "Examples:\n"
        "  byteops find 'Foo Bar Foo' Foo              # -> 0\n"
        "  byteops replace-all 'a-b-c' - '\\x00' --raw\n"
        "  byteops format 'Hello %s, %05.1f' World 3.14159\n"
        "  byteops sniff *.png",
    )
    parser.add_argument(
        "--log",
        default="WARNING",
        choices=LEVELS,
        help="Set the logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        type=str,
        default=None,
        help="Write logs to the specified file as well as stderr.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write byte results unescaped to stdout.",
    )
    parser.add_argument(
        "--no-escapes",
        action="store_true",
        help="Take byte operands literally (UTF-8) instead of decoding C escapes.",
    )

    sub = parser.add_subparsers(dest="op", required=True, metavar="OP")
    for name, (_, params, help_text) in COMMANDS.items():
        cmd = sub.add_parser(name, help=help_text, description=help_text)
        for param, kind in params:
            cmd.add_argument(param, type=int if kind == INT else str)

    fmt = sub.add_parser(
        "format",
        help="printf-style formatting of TEMPLATE.",
        description="printf-style formatting. Numeric ARGs are passed as numbers.",
    )
    fmt.add_argument("template", type=str)
    fmt.add_argument("args", nargs="*", metavar="ARG")

    snf = sub.add_parser("sniff", help="Identify image files by magic bytes.")
    snf.add_argument("paths", nargs="+", metavar="PATH")

    args = parser.parse_args(argv)

    decode = (lambda s: s.encode("utf-8")) if args.no_escapes else c_str_to_bytes
    try:
        if args.op == "format":
            args.template = decode(args.template)
            args.args = _format_args(args.template, args.args, decode)
        elif args.op in COMMANDS:
            for param, kind in COMMANDS[args.op][1]:
                if kind == BYTES:
                    setattr(args, param, decode(getattr(args, param)))
    except UnicodeError as e:
        parser.error(f"invalid escape in operand: {e}")

    return args


def _write_bytes(console: Console, data: bytes, raw: bool, style: str = "green"):
    if raw:
        sys.stdout.flush()
        sys.stdout.buffer.write(data + b"\n")
        sys.stdout.buffer.flush()
    else:
        console.print(Text(f'"{bytes_to_c_str(data)}"', style=style), soft_wrap=True)


def emit(value: Any, raw: bool = False) -> int:
    """Print an operation's return value; returns the exit code it implies."""
    console = Console()
    log = logging.getLogger("byteops.cli")

    if isinstance(value, Result):
        if not value.ok:
            Console(stderr=True).print(
                Text(f"error: {value.failure.value}", style="bold red"), soft_wrap=True
            )
            return 1
        log.debug(f"Result is {'borrowed' if value.borrowed else 'owned'}")
        _write_bytes(console, value.data, raw, "cyan" if value.borrowed else "green")
        return 0

    if isinstance(value, list):
        for part in value:
            _write_bytes(console, part, raw)
        return 0

    if isinstance(value, bool):
        console.print(Text("true" if value else "false"), soft_wrap=True)
        return 0 if value else 1

    console.print(Text(str(value)), soft_wrap=True)
    return 1 if value == ops.NOT_FOUND_POS else 0


def run_sniff(paths: list[str]) -> int:
    console = Console()
    status = 0
    for path in paths:
        kind = sniff.detect(path)
        if kind is None:
            status = 1
        console.print(Text(f"{path}: {kind or 'unknown'}"), soft_wrap=True)
    return status


# --- Main Application Logic ---


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point: parses args, sets up logging, runs one operation and
    prints its result.
    """
    args = parse_arguments(argv)
    setup_logging(args.log, args.log_file)
    log = logging.getLogger("byteops.cli")

    try:
        log.debug(f"Parsed arguments: {args}")

        if args.op == "sniff":
            return run_sniff(args.paths)

        if args.op == "format":
            return emit(ops.format(args.template, *args.args), args.raw)

        func, params, _ = COMMANDS[args.op]
        value = func(*(getattr(args, param) for param, _ in params))
        if args.op in ("find", "find-nth") and value == ops.NOT_FOUND_POS:
            log.info("Pattern not found")
        return emit(value, args.raw)

    except Exception as e:
        log.critical(f"FATAL ERROR: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())
