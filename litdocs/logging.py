"""Logging utilities for litdocs commands.

litdocs logs under the ``litdocs`` hierarchy. MkDocs reports strict-mode
warnings and build progress on its own ``mkdocs`` logger, so
:func:`configure_logging` sets up both: each gets a prefixed console handler
and, when requested, a shared log file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

_LOGGER_NAME = "litdocs"
GENERATOR_LOGGER_NAME = "mkdocs"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the litdocs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _reset(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    logger.propagate = False
    # Repeated CLI invocations in one process would otherwise stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _console_handler(prefix: str, level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(f"[{prefix}] %(levelname)s %(message)s"))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route litdocs and MkDocs records to the console and an optional log file.

    ``verbose`` lowers both loggers to DEBUG. Without it litdocs logs at INFO
    and MkDocs at WARNING, which keeps its per-page chatter off the console
    while strict-mode warnings still show. ``log_file`` is truncated and then
    receives every record from both loggers, DEBUG included; the console
    handlers keep the levels above.
    """
    level = logging.DEBUG if verbose else logging.INFO
    generator_level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(_LOGGER_NAME)
    generator_logger = logging.getLogger(GENERATOR_LOGGER_NAME)
    floor = logging.DEBUG if log_file is not None else None
    _reset(logger, floor or level)
    _reset(generator_logger, floor or generator_level)

    logger.addHandler(_console_handler(_LOGGER_NAME, level))
    generator_logger.addHandler(_console_handler(GENERATOR_LOGGER_NAME, generator_level))

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        for target in (logger, generator_logger):
            target.addHandler(file_handler)

    return logger


def log_files(logger: logging.Logger | None = None) -> List[Path]:
    """Return the files the given logger (default: litdocs) is writing to."""
    logger = logger or logging.getLogger(_LOGGER_NAME)
    return [
        Path(handler.baseFilename)
        for handler in logger.handlers
        if isinstance(handler, logging.FileHandler)
    ]


__all__ = ["GENERATOR_LOGGER_NAME", "configure_logging", "get_logger", "log_files"]
