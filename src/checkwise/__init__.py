"""checkwise - concise checkers for unit tests."""

from checkwise.checks import (
    check_after,
    check_after_or_equal,
    check_before,
    check_before_or_equal,
    check_contains_elements,
    check_equal,
    check_equal_and_no_error,
    check_equal_elements,
    check_error,
    check_false,
    check_file_exists,
    check_files_equal,
    check_matches,
    check_nil,
    check_not_equal,
    check_not_error,
    check_not_nil,
    check_numeric_greater,
    check_numeric_less,
    check_string_slices_equal,
    check_text_equal,
    check_true,
    check_truef,
)
from checkwise.config import CheckwiseConfig, ConfigError, get_config, load_config, set_config
from checkwise.host import (
    CheckFailure,
    CheckHost,
    RaisingHost,
    RecordingHost,
    ensure_failed,
    ensure_not_failed,
    run_isolated,
)
from checkwise.tester import Tester, new_tester

__version__ = "0.1.0"

__all__ = [
    # Checkers
    "check_after",
    "check_after_or_equal",
    "check_before",
    "check_before_or_equal",
    "check_contains_elements",
    "check_equal",
    "check_equal_and_no_error",
    "check_equal_elements",
    "check_error",
    "check_false",
    "check_file_exists",
    "check_files_equal",
    "check_matches",
    "check_nil",
    "check_not_equal",
    "check_not_error",
    "check_not_nil",
    "check_numeric_greater",
    "check_numeric_less",
    "check_string_slices_equal",
    "check_text_equal",
    "check_true",
    "check_truef",
    # Stateful checker
    "Tester",
    "new_tester",
    # Hosts
    "CheckFailure",
    "CheckHost",
    "RaisingHost",
    "RecordingHost",
    "ensure_failed",
    "ensure_not_failed",
    "run_isolated",
    # Config
    "CheckwiseConfig",
    "ConfigError",
    "get_config",
    "load_config",
    "set_config",
]
