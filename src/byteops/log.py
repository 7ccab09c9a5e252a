# Filename: src/byteops/log.py
"""Logging setup for byteops."""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# --- Define TRACE level ---
TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


def trace(self, message, *args, **kws):
    # Yes, logger takes its '*args' as 'args'.
    if self.isEnabledFor(TRACE_LEVEL_NUM):
        self._log(TRACE_LEVEL_NUM, message, args, **kws)


logging.Logger.trace = trace
# --- End TRACE level definition ---

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "TRACE"]


def level_from_name(level_name: str) -> int:
    """Map a level name (including TRACE) to its number; unknown names give INFO."""
    level_name_upper = level_name.upper()
    if level_name_upper == "TRACE":
        return TRACE_LEVEL_NUM
    return getattr(logging, level_name_upper, logging.INFO)


def setup_logging(level_name: str = "WARNING", log_file: Optional[str] = None):
    """
    Configures the root logger to write to stderr through rich, and optionally
    to a plain-text log file.
    """
    log_level = level_from_name(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers (e.g., from basicConfig in imports)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries results, so diagnostics go to stderr
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="%H:%M:%S",
    )
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s %(levelname)-8s %(name)-25s %(message)s",
                    datefmt="%H:%M:%S",
                )
            )
            root_logger.addHandler(file_handler)
            logging.getLogger("byteops").info(f"Logging to file: {log_file}")
        except OSError as e:
            print(f"Error: Could not open log file '{log_file}': {e}", file=sys.stderr)
            logging.getLogger("byteops").error(
                f"Failed to open log file '{log_file}': {e}"
            )

    logging.getLogger("byteops").debug(
        f"Logging configured at level {logging.getLevelName(log_level)}."
    )
