"""
Logging configuration — set up once by the CLI entrypoint.

Modules only ever do ``logger = logging.getLogger(__name__)``; this is
the one place that attaches handlers.

Console level precedence:
    --debug / --verbose / --quiet  >  SCHEMABUILD_LOG_LEVEL  >  WARNING

A log file can be added with SCHEMABUILD_LOG_FILE (its level with
SCHEMABUILD_LOG_FILE_LEVEL, default: same as the console).
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "SCHEMABUILD_LOG_LEVEL"
ENV_FILE = "SCHEMABUILD_LOG_FILE"
ENV_FILE_LEVEL = "SCHEMABUILD_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

_FORMATS: dict[int, tuple[str, str | None]] = {
    # DEBUG: file:line for every record
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    # INFO: timestamp and logger name
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_MINIMAL = "%(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the log file (default: ``level``).
    """
    console_level = _parse_level(level)

    fmt, datefmt = _FMT_MINIMAL, None
    for threshold in (logging.DEBUG, logging.INFO):
        if console_level <= threshold:
            fmt, datefmt = _FORMATS[threshold]
            break

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        root.addHandler(_file_handler(log_file, file_level))
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def setup_logging_from_env(level: str) -> None:
    """``setup_logging`` with the file settings taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
    return handler


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
