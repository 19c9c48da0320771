"""die - a minimal in-process test harness."""

from .assertions import AssertionFailedError, AssertionResult, assert_eq, assert_ne
from .config import ConfigError, DieConfig, load_config
from .reports import ConsoleReporter, Reporter
from .testing import Framework, Summary, TestCase, TestResult, classify, kind_name_of, run_body
from .types import TestStatus, Verdict
from .version import __version__


__all__ = [
    # Harness
    "Framework",
    "TestCase",
    "TestResult",
    "TestStatus",
    "Summary",
    "Verdict",
    "classify",
    "kind_name_of",
    "run_body",
    # Assertions
    "AssertionFailedError",
    "AssertionResult",
    "assert_eq",
    "assert_ne",
    # Reporting
    "ConsoleReporter",
    "Reporter",
    # Config
    "ConfigError",
    "DieConfig",
    "load_config",
    "__version__",
]
