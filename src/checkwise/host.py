"""Host test contexts that checkers report failures to."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NoReturn, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class CheckFailure(AssertionError):
    """Raised when a check fails under the default host."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CheckAborted(BaseException):
    """Stops an isolated check run after a failure has been recorded.

    Derives from BaseException so that ``except Exception`` in the code under
    test cannot swallow it.
    """


@runtime_checkable
class CheckHost(Protocol):
    """The failure-reporting side of a test framework.

    ``terminate`` must not return; it ends the current test unit.
    """

    def report_failure(self, message: str) -> None: ...

    def terminate(self) -> NoReturn: ...


def fail(host: CheckHost, message: str) -> NoReturn:
    """Report *message* to *host* and end the current test unit."""
    host.report_failure(message)
    host.terminate()
    raise RuntimeError(f"{type(host).__name__}.terminate() returned")


class RaisingHost:
    """Default host: raises :class:`CheckFailure` with the reported message."""

    def __init__(self) -> None:
        self.failures: list[str] = []

    def report_failure(self, message: str) -> None:
        self.failures.append(message)

    def terminate(self) -> NoReturn:
        message = self.failures[-1] if self.failures else "check failed"
        raise CheckFailure(message)


class RecordingHost:
    """Host that records failures instead of failing the surrounding test.

    Used to run a check in isolation and observe whether it failed.
    """

    def __init__(self) -> None:
        self.failures: list[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def report_failure(self, message: str) -> None:
        self.failures.append(message)

    def terminate(self) -> NoReturn:
        raise CheckAborted()


def run_isolated(fn: Callable[[CheckHost], object]) -> RecordingHost:
    """Run ``fn(host)`` against a fresh :class:`RecordingHost` and return the host."""
    host = RecordingHost()
    try:
        fn(host)
    except CheckAborted:
        logger.debug(f"Isolated run stopped after {len(host.failures)} failure(s)")
    return host


def ensure_failed(fn: Callable[[CheckHost], object], *, host: CheckHost | None = None) -> None:
    """Fail *host* unless running *fn* in isolation reported a failure."""
    if not run_isolated(fn).failed:
        fail(host or RaisingHost(), "Expected check to fail, but it passed")


def ensure_not_failed(fn: Callable[[CheckHost], object], *, host: CheckHost | None = None) -> None:
    """Fail *host* if running *fn* in isolation reported a failure."""
    recorded = run_isolated(fn)
    if recorded.failed:
        fail(host or RaisingHost(), f"Expected check to pass, but it failed: {recorded.failures[-1]}")
