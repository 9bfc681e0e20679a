"""
Log setup for hosts and the keyrecipe CLI.

Every line logged while a command is recorded carries the command's name
in a "command" field, so a host can grep one keystroke's history out of a
busy log. Lines without a command get "N/A".

Environment Variables:
    KEYRECIPE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL - default: INFO
    KEYRECIPE_LOG_FORMAT: json or text - default: json

Usage:
    setup_logging()
    get_logger(__name__, command="evil-delete").info("Recorded command")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_NO_COMMAND = "N/A"


def setup_logging() -> None:
    """
    Replace the root logger's handlers with one stderr handler.

    Unknown KEYRECIPE_LOG_LEVEL values fall back to INFO; any format other
    than "text" logs JSON objects with timestamp, logger, level, message
    and command keys.
    """
    level_name = os.getenv("KEYRECIPE_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name) if level_name in _LEVELS else logging.INFO
    as_text = os.getenv("KEYRECIPE_LOG_FORMAT", "json").lower() == "text"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout is reserved for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(CommandFilter())

    if as_text:
        formatter: logging.Formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s [%(command)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(command)s",
            rename_fields={"asctime": "timestamp", "name": "logger", "levelname": "level"},
        )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, command: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger for name whose records carry the given command name."""
    return logging.LoggerAdapter(logging.getLogger(name), {"command": command or _NO_COMMAND})


class CommandFilter(logging.Filter):
    """Give records logged outside get_logger() a placeholder command."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "command"):
            record.command = _NO_COMMAND  # type: ignore
        return True
