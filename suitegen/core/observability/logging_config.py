"""
Logging configuration — set up once by the CLI group in main.py.

Only the ``suitegen`` logger tree is configured.  Modules log through
``logging.getLogger(__name__)``, which always lands under it, so a host
application embedding the generator keeps its own root logger untouched.

Level precedence:
    --debug / --verbose / --quiet  >  SUITEGEN_LOG_LEVEL  >  WARNING

A file sink is added when SUITEGEN_LOG_FILE is set; it may run at its
own level (SUITEGEN_LOG_FILE_LEVEL), e.g. DEBUG to a file while the
console stays quiet.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LOGGER_NAME = "suitegen"

ENV_LEVEL = "SUITEGEN_LOG_LEVEL"
ENV_FILE = "SUITEGEN_LOG_FILE"
ENV_FILE_LEVEL = "SUITEGEN_LOG_FILE_LEVEL"

# Console: user-facing warnings stay one line; -v adds time and module,
# --debug adds file:line
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_CONSOLE = "suitegen: %(levelname)s %(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level from CLI flags, falling back to the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    if environ is None:
        environ = os.environ
    return environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Configure the ``suitegen`` logger and return it.

    Safe to call repeatedly: existing handlers are replaced, not stacked.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt, datefmt = _console_format(console_level)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(console)

    effective_level = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)

    logger.setLevel(effective_level)
    return logger


def _console_format(level: int) -> tuple[str, str | None]:
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return _FMT_CONSOLE, None


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
