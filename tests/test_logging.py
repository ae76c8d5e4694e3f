"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from litdocs.logging import GENERATOR_LOGGER_NAME, configure_logging, get_logger, log_files


@pytest.fixture(autouse=True)
def _restore_loggers() -> Iterator[None]:
    loggers = [logging.getLogger("litdocs"), logging.getLogger(GENERATOR_LOGGER_NAME)]
    saved = [(logger.level, logger.propagate, list(logger.handlers)) for logger in loggers]
    yield
    for logger, (level, propagate, handlers) in zip(loggers, saved):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(level)
        logger.propagate = propagate
        for handler in handlers:
            logger.addHandler(handler)


def test_get_logger_nests_under_litdocs() -> None:
    assert get_logger().name == "litdocs"
    assert get_logger("tutorials").name == "litdocs.tutorials"


def test_levels_follow_verbosity() -> None:
    configure_logging()
    assert logging.getLogger("litdocs").level == logging.INFO
    assert logging.getLogger(GENERATOR_LOGGER_NAME).level == logging.WARNING

    configure_logging(verbose=True)
    assert logging.getLogger("litdocs").level == logging.DEBUG
    assert logging.getLogger(GENERATOR_LOGGER_NAME).level == logging.DEBUG


def test_reconfiguring_does_not_stack_handlers() -> None:
    configure_logging()
    configure_logging()

    assert len(logging.getLogger("litdocs").handlers) == 1
    assert len(logging.getLogger(GENERATOR_LOGGER_NAME).handlers) == 1


def test_log_file_collects_litdocs_and_mkdocs_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "build.log"
    configure_logging(log_file=log_file)

    get_logger("tutorials").info("Testing intro.py")
    logging.getLogger("mkdocs.commands.build").warning("Doc file 'missing.md' not found")
    logging.getLogger(GENERATOR_LOGGER_NAME).info("Building documentation")

    assert log_files() == [log_file]
    assert log_files(logging.getLogger(GENERATOR_LOGGER_NAME)) == [log_file]
    for handler in logging.getLogger("litdocs").handlers:
        handler.flush()
    content = log_file.read_text(encoding="utf-8")
    assert "INFO litdocs.tutorials: Testing intro.py" in content
    assert "WARNING mkdocs.commands.build: Doc file 'missing.md' not found" in content
    assert "INFO mkdocs: Building documentation" in content


def test_log_file_keeps_console_quiet(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "build.log")

    consoles = [
        handler
        for name in ("litdocs", GENERATOR_LOGGER_NAME)
        for handler in logging.getLogger(name).handlers
        if not isinstance(handler, logging.FileHandler)
    ]
    assert [handler.level for handler in consoles] == [logging.INFO, logging.WARNING]
    assert logging.getLogger("litdocs").level == logging.DEBUG


def test_log_file_is_truncated_per_run(tmp_path: Path) -> None:
    log_file = tmp_path / "build.log"
    log_file.write_text("previous run\n", encoding="utf-8")

    configure_logging(log_file=log_file)

    assert "previous run" not in log_file.read_text(encoding="utf-8")
