"""Tests for checkwise logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from checkwise.config import CheckwiseConfig
from checkwise.host import run_isolated
from checkwise.tester import Tester
from checkwise.verbose import configure_logging, setup_logger


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def test_setup_logger_writes_checker_failures_to_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "checkwise.log"
    logger = setup_logger(log_file)

    run_isolated(lambda h: Tester(h).check_equal(1, 2))
    _flush(logger)

    content = log_file.read_text()
    assert "Check failed: Expected equal: int 1, got int 2" in content
    assert content.startswith("[")


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    log1 = tmp_path / "one.log"
    log2 = tmp_path / "two.log"

    logger1 = setup_logger(log1, logger_name="checkwise_suite_one")
    logger2 = setup_logger(log2, logger_name="checkwise_suite_two")
    assert logger1 is not logger2

    logger1.debug("Message from one")
    logger2.debug("Message from two")
    _flush(logger1)
    _flush(logger2)

    assert "Message from one" in log1.read_text()
    assert "Message from two" not in log1.read_text()
    assert "Message from two" in log2.read_text()


def test_setup_logger_replaces_handlers(tmp_path: Path):
    setup_logger(tmp_path / "a.log", logger_name="checkwise_replace")
    logger = setup_logger(tmp_path / "b.log", verbose=True, logger_name="checkwise_replace")
    assert len(logger.handlers) == 2
    assert logger.handlers[0].baseFilename.endswith("b.log")


def test_configure_logging_applies_level():
    logger = configure_logging(CheckwiseConfig(log_level="error"))
    assert logger.name == "checkwise"
    assert logger.level == logging.ERROR


def test_configure_logging_with_file_keeps_configured_level(tmp_path: Path):
    log_file = tmp_path / "checkwise.log"
    logger = configure_logging(CheckwiseConfig(log_level="error"), log_file=log_file)
    assert logger.level == logging.ERROR

    run_isolated(lambda h: Tester(h).check_true(False))
    logging.getLogger("checkwise.tester").error("disk full")
    _flush(logger)

    content = log_file.read_text()
    assert "Check failed" not in content
    assert "ERROR checkwise.tester: disk full" in content


def test_setup_logger_level_filters_records(tmp_path: Path):
    log_file = tmp_path / "warn.log"
    logger = setup_logger(log_file, logger_name="checkwise_levels", level="WARNING")
    logger.info("quiet")
    logger.warning("loud")
    _flush(logger)
    assert "quiet" not in log_file.read_text()
    assert "loud" in log_file.read_text()
