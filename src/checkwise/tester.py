"""Stateful checker bound to a host test context."""

from __future__ import annotations

import logging
import re
import stat
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, NoReturn

from checkwise.config import CheckwiseConfig, get_config
from checkwise.diff import pretty_text_diff, produce_diff
from checkwise.equality import slice_contains, values_equal
from checkwise.host import CheckHost, RaisingHost, fail
from checkwise.numeric import Comparison, numeric_compare

_module_logger = logging.getLogger(__name__)

_ZERO = timedelta(0)


class Tester:
    """Runs checks against a host and tags failures with an optional index.

    A failing check reports a single message to the host, which ends the
    current test. A passing check has no effect.

    Use :meth:`at` inside loops so that a failure names the iteration::

        tt = Tester(host)
        for i, case in enumerate(cases):
            tt.at(i).check_equal(case.expected, run(case))
    """

    __test__ = False

    def __init__(
        self,
        host: CheckHost | None = None,
        *,
        config: CheckwiseConfig | None = None,
        logger: logging.Logger | None = None,
        index: int | None = None,
    ) -> None:
        self.host = host if host is not None else RaisingHost()
        self.config = config
        self.logger = logger or _module_logger
        self.index = index

    @property
    def settings(self) -> CheckwiseConfig:
        return self.config if self.config is not None else get_config()

    def at(self, index: int) -> Tester:
        """Return a tester sharing this host that prefixes failures with ``[index]``."""
        return Tester(self.host, config=self.config, logger=self.logger, index=index)

    def fatalf(self, fmt: str, *args: Any) -> NoReturn:
        """Fail with ``fmt % args``, prefixed by the index when one is set."""
        message = fmt % args if args else fmt
        if self.index is not None:
            message = f"[{self.index}] {message}"
        self.logger.info(f"Check failed: {message}")
        fail(self.host, message)

    def _describe(self, v: Any) -> str:
        text = repr(v)
        limit = self.settings.output.max_repr_length
        if limit and len(text) > limit:
            text = text[:limit] + "..."
        return f"{type(v).__name__} {text}"

    def _unequal_values(self, expected: Any, got: Any) -> NoReturn:
        self.fatalf("Expected equal: %s, got %s", self._describe(expected), self._describe(got))

    # --- value checks ---

    def check_equal(self, expected: Any, got: Any) -> None:
        """Check that *got* equals *expected*, comparing numbers by value."""
        if not values_equal(expected, got):
            self._unequal_values(expected, got)

    def check_not_equal(self, expected: Any, got: Any) -> None:
        if values_equal(expected, got):
            self.fatalf("Expected not equal: %s, got %s", self._describe(expected), self._describe(got))

    def check_numeric_greater(self, expected: Any, got: Any) -> None:
        """Check that *got* is numerically greater than *expected*."""
        if numeric_compare(expected, got) is not Comparison.GREATER:
            self.fatalf(
                "Expected: %s greater than %s", self._describe(got), self._describe(expected)
            )

    def check_numeric_less(self, expected: Any, got: Any) -> None:
        """Check that *got* is numerically less than *expected*."""
        if numeric_compare(expected, got) is not Comparison.LESS:
            self.fatalf("Expected: %s less than %s", self._describe(got), self._describe(expected))

    def check_equal_and_no_error(self, expected: Any, got: Any, got_error: BaseException | None) -> None:
        self.check_not_error(got_error)
        if not values_equal(expected, got):
            self._unequal_values(expected, got)

    def check_contains_elements(self, expected: Any, got: Any) -> None:
        """Check that *got* holds every element of *expected*, in any order.

        Each element of *expected* must match its own element of *got*.
        """
        if not slice_contains(got, expected, exact_size=False):
            self.fatalf(
                "Sequence %s does not contain all elements in %s", self._describe(got), self._describe(expected)
            )

    def check_equal_elements(self, expected: Any, got: Any) -> None:
        """Check that *expected* and *got* hold the same elements, in any order."""
        if not slice_contains(got, expected, exact_size=True):
            self.fatalf(
                "Elements of sequence %s and %s differ", self._describe(expected), self._describe(got)
            )

    def check_nil(self, got: Any) -> None:
        if got is not None:
            self.fatalf("Expected: None, got %s", self._describe(got))

    def check_not_nil(self, got: Any) -> None:
        if got is None:
            self.fatalf("Expected: not None, got None")

    def check_error(self, got: Any) -> None:
        """Check that *got* is an exception instance."""
        if not isinstance(got, BaseException):
            self.fatalf("Expected: error, got %s", self._describe(got))

    def check_not_error(self, got: Any) -> None:
        if isinstance(got, BaseException):
            self.fatalf("Expected: no error, got %r", str(got))

    def check_true(self, got: Any) -> None:
        if not got:
            self.fatalf("Expected: true, got %r", got)

    def check_false(self, got: Any) -> None:
        if got:
            self.fatalf("Expected: false, got %r", got)

    def check_truef(self, predicate: Any, fmt: str, *args: Any) -> None:
        """Fail with ``fmt % args`` unless *predicate* holds."""
        if not predicate:
            self.fatalf(fmt, *args)

    def check_matches(self, expected: re.Pattern | str, got: str) -> None:
        """Check that *got* contains a match for the regular expression *expected*.

        *expected* may be a compiled pattern or a pattern string.
        """
        if isinstance(expected, re.Pattern):
            rx = expected
        elif isinstance(expected, str):
            try:
                rx = re.compile(expected)
            except re.error:
                self.fatalf("check_matches: illegal regexp %r", expected)
        else:
            self.fatalf(
                "check_matches: first argument must be a regexp or a string, got %s", self._describe(expected)
            )

        try:
            matched = rx.search(got) is not None
        except TypeError:
            self.fatalf("check_matches: cannot match %r against %s", rx.pattern, self._describe(got))
        if not matched:
            self.fatalf("Expected match for %r, got %s", rx.pattern, got)

    def check_string_slices_equal(self, expected: list[str], got: list[str]) -> None:
        """Check two lists of strings are equal, failing with an index-aligned diff."""
        report, ok = produce_diff(expected, got, max_mismatches=self.settings.diff.max_mismatches)
        if not ok:
            self.fatalf("slices not equal - see diff:\n%s", report)

    def check_text_equal(self, expected: str, got: str) -> None:
        """Like :meth:`check_equal` for strings, but fails with a character diff."""
        if expected != got:
            pretty = pretty_text_diff(expected, got, color=self.settings.diff.color)
            self.fatalf("strings not equal - see diff:\n%s", pretty)

    # --- time checks ---

    def _offset(
        self, name: str, expected: datetime, got: datetime, add: tuple[timedelta, ...]
    ) -> tuple[datetime, timedelta]:
        """Apply *add* to *expected* and return it with ``got - expected``."""
        try:
            for delta in add:
                expected = expected + delta
            return expected, got - expected
        except TypeError as exc:
            self.fatalf("%s: cannot compare %s with %s: %s", name, self._describe(expected), self._describe(got), exc)

    def _time_failed(self, relation: str, expected: datetime, got: datetime, diff: timedelta) -> NoReturn:
        self.fatalf("Expected: time %s %s, got %s (diff %s)", relation, expected, got, diff)

    def check_after(self, expected: datetime, got: datetime, *add: timedelta) -> None:
        """Check *got* is after *expected* plus the sum of *add*."""
        expected, diff = self._offset("check_after", expected, got, add)
        if diff <= _ZERO:
            self._time_failed("after", expected, got, diff)

    def check_after_or_equal(self, expected: datetime, got: datetime, *add: timedelta) -> None:
        expected, diff = self._offset("check_after_or_equal", expected, got, add)
        if diff < _ZERO:
            self._time_failed("after", expected, got, diff)

    def check_before(self, expected: datetime, got: datetime, *add: timedelta) -> None:
        """Check *got* is before *expected* plus the sum of *add*."""
        expected, diff = self._offset("check_before", expected, got, add)
        if diff >= _ZERO:
            self._time_failed("before", expected, got, diff)

    def check_before_or_equal(self, expected: datetime, got: datetime, *add: timedelta) -> None:
        expected, diff = self._offset("check_before_or_equal", expected, got, add)
        if diff > _ZERO:
            self._time_failed("before", expected, got, diff)

    # --- file checks ---

    def check_files_equal(self, file1: str | Path, file2: str | Path) -> None:
        """Check two regular files have exactly the same bytes."""
        path1, path2 = Path(file1), Path(file2)
        try:
            stat1 = path1.stat()
            stat2 = path2.stat()
        except OSError as exc:
            self.fatalf("%s", exc)

        for path, st in ((path1, stat1), (path2, stat2)):
            if stat.S_ISDIR(st.st_mode):
                self.fatalf("'%s' is a directory", path)

        if stat1.st_size != stat2.st_size:
            self.fatalf(
                "size of file '%s' (%d), does not match size of '%s' (%d)",
                path1, stat1.st_size, path2, stat2.st_size,
            )

        chunk_size = self.settings.files.chunk_size
        try:
            with open(path1, "rb") as f1, open(path2, "rb") as f2:
                offset = 0
                while True:
                    b1 = f1.read(chunk_size)
                    b2 = f2.read(chunk_size)
                    if b1 != b2:
                        self.logger.debug(f"Files differ in chunk at offset {offset}")
                        self.fatalf("content of file '%s' and '%s' differ", path1, path2)
                    if not b1:
                        return
                    offset += len(b1)
        except OSError as exc:
            self.fatalf("%s", exc)

    def check_file_exists(self, filename: str | Path) -> None:
        """Check *filename* names an existing regular file."""
        try:
            st = Path(filename).stat()
        except FileNotFoundError:
            self.fatalf("file %s does not exist", filename)
        except OSError as exc:
            self.fatalf("%s", exc)
        if stat.S_ISDIR(st.st_mode):
            self.fatalf("file %s is a directory, not a file", filename)


def new_tester(host: CheckHost | None = None, *, config: CheckwiseConfig | None = None) -> Tester:
    """Return a :class:`Tester` bound to *host* (a raising host by default)."""
    return Tester(host, config=config)
