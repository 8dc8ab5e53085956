"""Checker functions that compare a produced value against an expected one.

Each function reports a failure to ``host`` and does nothing on success. With
no host, a failure raises :class:`checkwise.host.CheckFailure`, which pytest
and unittest treat as an ordinary assertion failure::

    check_equal(3, len(items))
    check_equal_elements(["a", "b"], names)

To tag failures with a loop index, use :class:`checkwise.tester.Tester`.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from checkwise.config import CheckwiseConfig
from checkwise.host import CheckHost
from checkwise.tester import Tester


def _tester(host: CheckHost | None, config: CheckwiseConfig | None) -> Tester:
    return Tester(host, config=config)


def check_equal(
    expected: Any, got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check two values are equal.

    Numbers compare by value across widths and signedness, so ``np.int8(1)``
    equals ``1``. Other values compare structurally.
    """
    _tester(host, config).check_equal(expected, got)


def check_not_equal(
    expected: Any, got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    _tester(host, config).check_not_equal(expected, got)


def check_numeric_greater(
    expected: Any, got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check *got* is greater than *expected*. Non-numeric values always fail."""
    _tester(host, config).check_numeric_greater(expected, got)


def check_numeric_less(
    expected: Any, got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check *got* is less than *expected*. Non-numeric values always fail."""
    _tester(host, config).check_numeric_less(expected, got)


def check_equal_and_no_error(
    expected: Any,
    got: Any,
    got_error: BaseException | None,
    *,
    host: CheckHost | None = None,
    config: CheckwiseConfig | None = None,
) -> None:
    _tester(host, config).check_equal_and_no_error(expected, got, got_error)


def check_contains_elements(
    expected: Any, got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check *got* contains every element of *expected* irrespective of order."""
    _tester(host, config).check_contains_elements(expected, got)


def check_equal_elements(
    expected: Any, got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check two sequences hold exactly the same elements irrespective of order."""
    _tester(host, config).check_equal_elements(expected, got)


def check_nil(got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None) -> None:
    _tester(host, config).check_nil(got)


def check_not_nil(got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None) -> None:
    _tester(host, config).check_not_nil(got)


def check_error(got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None) -> None:
    _tester(host, config).check_error(got)


def check_not_error(got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None) -> None:
    _tester(host, config).check_not_error(got)


def check_true(got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None) -> None:
    _tester(host, config).check_true(got)


def check_false(got: Any, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None) -> None:
    _tester(host, config).check_false(got)


def check_matches(
    expected: re.Pattern | str, got: str, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check *got* contains a match for *expected*, a pattern or pattern string."""
    _tester(host, config).check_matches(expected, got)


def check_string_slices_equal(
    expected: list[str], got: list[str], *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    _tester(host, config).check_string_slices_equal(expected, got)


def check_text_equal(
    expected: str, got: str, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    _tester(host, config).check_text_equal(expected, got)


def check_after(
    expected: datetime,
    got: datetime,
    *add: timedelta,
    host: CheckHost | None = None,
    config: CheckwiseConfig | None = None,
) -> None:
    """Check *got* is after *expected* once every offset in *add* is applied.

    ``check_after(start, end, timedelta(seconds=5))`` requires ``end`` to be
    more than five seconds after ``start``.
    """
    _tester(host, config).check_after(expected, got, *add)


def check_after_or_equal(
    expected: datetime,
    got: datetime,
    *add: timedelta,
    host: CheckHost | None = None,
    config: CheckwiseConfig | None = None,
) -> None:
    _tester(host, config).check_after_or_equal(expected, got, *add)


def check_before(
    expected: datetime,
    got: datetime,
    *add: timedelta,
    host: CheckHost | None = None,
    config: CheckwiseConfig | None = None,
) -> None:
    _tester(host, config).check_before(expected, got, *add)


def check_before_or_equal(
    expected: datetime,
    got: datetime,
    *add: timedelta,
    host: CheckHost | None = None,
    config: CheckwiseConfig | None = None,
) -> None:
    _tester(host, config).check_before_or_equal(expected, got, *add)


def check_files_equal(
    file1: str | Path, file2: str | Path, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check two files have byte-for-byte identical contents."""
    _tester(host, config).check_files_equal(file1, file2)


def check_file_exists(
    filename: str | Path, *, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    _tester(host, config).check_file_exists(filename)


def check_truef(
    predicate: Any, fmt: str, *args: Any, host: CheckHost | None = None, config: CheckwiseConfig | None = None
) -> None:
    """Check *predicate* holds, failing with ``fmt % args`` otherwise."""
    _tester(host, config).check_truef(predicate, fmt, *args)
