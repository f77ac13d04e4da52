"""Suite Harness.

Ordered-lifecycle test suites, a process-wide suite registry, and assertions
that record failures without stopping the test body.
"""

__version__ = "0.1.0"

from .assertions import FailureSignal, check, fail, failure_signal
from .config import load_modules, load_suites_file
from .errors import HarnessError, RegistryError, SuiteConfigError, SuiteNotFoundError
from .logs import init_logging
from .registry import SuiteRegistry, default_registry
from .runner import SuiteRunner, run_all_suites
from .suites import FunctionSuite, Suite, define_suite
from .types import AssertionFailure, TestResult, TestSuiteResult, TestSummary

__all__ = [
    "__version__",
    "FailureSignal",
    "check",
    "fail",
    "failure_signal",
    "load_modules",
    "load_suites_file",
    "HarnessError",
    "RegistryError",
    "SuiteConfigError",
    "SuiteNotFoundError",
    "init_logging",
    "SuiteRegistry",
    "default_registry",
    "SuiteRunner",
    "run_all_suites",
    "FunctionSuite",
    "Suite",
    "define_suite",
    "AssertionFailure",
    "TestResult",
    "TestSuiteResult",
    "TestSummary",
]
