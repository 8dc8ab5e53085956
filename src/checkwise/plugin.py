"""pytest integration: a ``checker`` fixture and config/log options."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import pytest

from checkwise.config import ConfigError, get_config, load_config, set_config
from checkwise.tester import Tester
from checkwise.verbose import configure_logging


class PytestHost:
    """Host that fails the running pytest test without a traceback."""

    def __init__(self) -> None:
        self.failures: list[str] = []

    def report_failure(self, message: str) -> None:
        self.failures.append(message)

    def terminate(self) -> NoReturn:
        pytest.fail(self.failures[-1] if self.failures else "check failed", pytrace=False)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("checkwise")
    group.addoption(
        "--checkwise-log",
        default=None,
        help="Write checkwise log records at the configured log_level to this file",
    )
    group.addoption(
        "--checkwise-verbose",
        action="store_true",
        default=False,
        help="Also write checkwise log records to stderr",
    )
    parser.addini(
        "checkwise_config",
        help="Path to a checkwise YAML config, relative to rootdir",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    config_path = config.getini("checkwise_config")
    if config_path:
        path = Path(config_path)
        if not path.is_absolute():
            path = config.rootpath / path
        try:
            set_config(load_config(path))
        except ConfigError as exc:
            raise pytest.UsageError(f"checkwise: {exc}") from exc

    log_file = config.getoption("checkwise_log")
    configure_logging(
        get_config(),
        log_file=Path(log_file) if log_file else None,
        verbose=config.getoption("checkwise_verbose"),
    )


@pytest.fixture
def checker() -> Tester:
    """A :class:`Tester` whose failures fail the current test."""
    return Tester(PytestHost())
