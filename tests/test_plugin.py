"""Tests for the pytest plugin."""

import pytest

from checkwise.config import get_config
from checkwise.plugin import PytestHost
from checkwise.tester import Tester


def test_pytest_host_fails_current_test():
    host = PytestHost()
    with pytest.raises(pytest.fail.Exception, match="nope"):
        Tester(host).fatalf("nope")
    assert host.failures == ["nope"]


def test_checker_fixture_is_a_tester(checker):
    assert isinstance(checker, Tester)
    assert isinstance(checker.host, PytestHost)
    checker.check_equal(1, 1.0)


def test_checker_fixture_failure_in_subsession(pytester):
    pytester.makepyfile(
        """
        def test_passes(checker):
            checker.check_equal_elements(["a", "b"], ["b", "a"])

        def test_fails(checker):
            for i, (e, g) in enumerate([(1, 1), (2, 3)]):
                checker.at(i).check_equal(e, g)
        """
    )
    result = pytester.runpytest()
    result.assert_outcomes(passed=1, failed=1)
    result.stdout.fnmatch_lines(["*[[]1[]] Expected equal: int 2, got int 3*"])


def test_ini_config_is_loaded(pytester):
    pytester.makefile(".yaml", checkwise="diff:\n  color: false\n")
    pytester.makeini("[pytest]\ncheckwise_config = checkwise.yaml\n")
    pytester.makepyfile(
        """
        from checkwise.config import get_config

        def test_color_disabled():
            assert get_config().diff.color is False
        """
    )
    result = pytester.runpytest()
    result.assert_outcomes(passed=1)


def test_bad_ini_config_is_usage_error(pytester):
    pytester.makefile(".yaml", checkwise="diff: 3\n")
    pytester.makeini("[pytest]\ncheckwise_config = checkwise.yaml\n")
    pytester.makepyfile("def test_nothing():\n    pass\n")
    result = pytester.runpytest()
    assert result.ret == pytest.ExitCode.USAGE_ERROR


def test_log_option_writes_file(pytester):
    pytester.makefile(".yaml", checkwise="log_level: info\n")
    pytester.makeini("[pytest]\ncheckwise_config = checkwise.yaml\n")
    pytester.makepyfile(
        """
        def test_fails(checker):
            checker.check_true(False)
        """
    )
    result = pytester.runpytest("--checkwise-log", "checkwise.log")
    result.assert_outcomes(failed=1)
    assert "Check failed: Expected: true, got False" in (pytester.path / "checkwise.log").read_text()


def test_log_option_respects_configured_level(pytester):
    pytester.makefile(".yaml", checkwise="log_level: error\n")
    pytester.makeini("[pytest]\ncheckwise_config = checkwise.yaml\n")
    pytester.makepyfile(
        """
        def test_fails(checker):
            checker.check_true(False)
        """
    )
    result = pytester.runpytest("--checkwise-log", "checkwise.log")
    result.assert_outcomes(failed=1)
    assert "Check failed" not in (pytester.path / "checkwise.log").read_text()


def test_outer_session_config_untouched():
    assert get_config().diff.color is True
