"""Shared types for the test harness."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AssertionFailure:
    """A single failed assertion, as recorded by ``fail()``."""

    suite: str
    site: str
    message: Optional[str] = None

    def describe(self) -> str:
        if self.message:
            return f"{self.site}: {self.message}"
        return self.site


@dataclass
class TestResult:
    """Result of a single logical test inside a suite."""

    __test__ = False

    name: str
    passed: bool
    duration_ms: int
    message: Optional[str] = None


@dataclass
class TestSuiteResult:
    """Result of one suite run."""

    __test__ = False

    name: str
    automatic: bool = True
    results: List[TestResult] = field(default_factory=list)
    failures: List[AssertionFailure] = field(default_factory=list)
    setup_failed: bool = False
    duration_ms: int = 0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    @property
    def ok(self) -> bool:
        return not self.failures and not self.setup_failed


@dataclass
class TestSummary:
    """Summary of all suites in a run."""

    __test__ = False

    suites: List[TestSuiteResult] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def total(self) -> int:
        return sum(suite.total for suite in self.suites)

    @property
    def passed(self) -> int:
        return sum(suite.passed for suite in self.suites)

    @property
    def failed(self) -> int:
        return sum(suite.failed for suite in self.suites)

    @property
    def assertion_failures(self) -> int:
        return sum(len(suite.failures) for suite in self.suites)

    @property
    def failed_suites(self) -> List[str]:
        return [suite.name for suite in self.suites if not suite.ok]

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 when every selected suite passed."""
        return 0 if all(suite.ok for suite in self.suites) else 1

    def add_suite(self, suite: TestSuiteResult) -> None:
        self.suites.append(suite)
