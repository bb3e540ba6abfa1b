"""Environment and logging helpers."""

import logging
import os
import sys

from ..config import LOG_LEVEL_ENV, LOG_FORMAT, LOG_DATE_FORMAT

DEFAULT_LOG_LEVEL = logging.WARNING


def log_level_from_env() -> int:
    """Read the log level from the environment.

    Accepts either a level name (``DEBUG``) or a number (``10``).
    Unknown values fall back to the default level.
    """
    raw = os.getenv(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return DEFAULT_LOG_LEVEL

    if raw.isdigit():
        return int(raw)

    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level

    logging.getLogger(__name__).debug(f"Ignoring unknown {LOG_LEVEL_ENV}={raw!r}")
    return DEFAULT_LOG_LEVEL


def setup_logging(level: int | None = None, log_file: str | None = None) -> None:
    """Set up logging configuration.

    Logs go to stderr, and additionally to a file when one is given.

    Args:
        level: Logging level (None to read it from the environment)
        log_file: Path to log file (None to disable file logging)
    """
    if level is None:
        level = log_level_from_env()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            handlers.append(file_handler)
        except OSError as e:
            # Fall back to console-only if file logging fails
            print(f"Warning: Could not open log file '{log_file}': {e}", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True  # Replace any existing handlers
    )
