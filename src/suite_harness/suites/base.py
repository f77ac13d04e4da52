"""Base test suite interface."""

import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from loguru import logger

from ..assertions import fail, failure_signal
from ..registry import SuiteRegistry, default_registry
from ..types import TestResult


def call_guarded(suite_name: str, phase: str, fn: Callable[[], None]) -> bool:
    """
    Call a hook, turning an escaping exception into a recorded failure.

    Args:
        suite_name: Suite the hook belongs to
        phase: Phase label used in the diagnostic (e.g. 'before-all')
        fn: Hook to call

    Returns:
        True if the hook returned normally
    """
    try:
        fn()
        return True
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        # SystemExit and pytest outcomes (fail/skip) are BaseException subclasses
        logger.opt(exception=e).critical(f"{phase} of {suite_name} raised {type(e).__name__}: {e}")
        fail(f"{phase} raised {type(e).__name__}: {e}", site=f"{suite_name}:{phase}")
        return False


class Suite(ABC):
    """Base class for test suites.

    Constructing a suite registers it; nothing else happens until a runner
    picks it up. The runner drives the lifecycle::

        before_all()
        for each test: before(); <body>; after()
        after_all()

    ``run()`` is where a suite runs its test bodies, normally one
    :meth:`run_test` call per logical test.
    """

    def __init__(self, automatic: bool, name: str, registry: Optional[SuiteRegistry] = None):
        """
        Initialize and register the suite.

        Args:
            automatic: True if the suite runs unattended, False if it only
                runs when selected by name
            name: Suite name, shown in the log trail
            registry: Registry to join (the process-wide one by default)
        """
        self._automatic = bool(automatic)
        self._name = name
        self.results: List[TestResult] = []
        (registry if registry is not None else default_registry()).register(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def automatic(self) -> bool:
        return self._automatic

    def before_all(self) -> None:
        """Runs once before any test body."""

    def before(self) -> None:
        """Runs before each test body."""

    @abstractmethod
    def run(self) -> None:
        """Run the suite's test bodies."""
        pass

    def after(self) -> None:
        """Runs after each test body, including ones that failed."""

    def after_all(self) -> None:
        """Runs once after every test body."""

    def run_test(self, name: str, body: Callable[[], None]) -> TestResult:
        """
        Run a single test wrapped in ``before()`` and ``after()``.

        ``after()`` runs no matter what the body did. An exception escaping
        the body is recorded as a failure of this test only.

        Args:
            name: Test name
            body: Test function

        Returns:
            TestResult
        """
        active = failure_signal.active
        mark = active.count if active is not None else 0
        start_ms = int(time.time() * 1000)

        logger.info(f"Running test {name}")

        logger.debug(f"Starting pre-test for {name}")
        if call_guarded(self.name, "pre-test", self.before):
            logger.debug(f"Pre-test for {name} complete")
            call_guarded(self.name, f"test {name}", body)

        logger.debug(f"Starting post-test for {name}")
        call_guarded(self.name, "post-test", self.after)
        logger.debug(f"Post-test for {name} complete")

        logger.info(f"Test {name} complete")

        duration_ms = int(time.time() * 1000) - start_ms
        failures = active.since(mark) if active is not None else []
        result = TestResult(
            name=name,
            passed=not failures,
            duration_ms=duration_ms,
            message="; ".join(f.describe() for f in failures) or None,
        )
        self.results.append(result)
        return result

    def __repr__(self) -> str:
        kind = "automatic" if self.automatic else "manual"
        return f"<{type(self).__name__} {self.name!r} ({kind})>"
