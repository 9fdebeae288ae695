"""Logging utilities for fluttertidy commands.

Reports go to stdout; log records go to stderr so that `--json` output stays
machine readable. Skipped manifest entries and unreadable files surface at
WARNING, which is the default console level.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "fluttertidy"
_PREFIX = f"{_LOGGER_NAME}."


class ComponentFormatter(logging.Formatter):
    """Formats records as `[fluttertidy] LEVEL component: message`."""

    def __init__(self) -> None:
        super().__init__("[fluttertidy] %(levelname)s %(component)s%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(_PREFIX):
            record.component = f"{name[len(_PREFIX):]}: "
        else:
            record.component = ""
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger under the fluttertidy hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def console_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the fluttertidy logger with console output and optional file sink.

    The file sink always records DEBUG detail, whatever the console shows.
    """
    level = console_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(ComponentFormatter())
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["ComponentFormatter", "configure_logging", "console_level", "get_logger"]
