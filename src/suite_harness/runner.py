"""Suite runner."""

import time
from typing import Optional

from loguru import logger

from .assertions import failure_signal
from .registry import SuiteRegistry, default_registry
from .suites.base import Suite, call_guarded
from .types import TestSuiteResult, TestSummary


class SuiteRunner:
    """Runs registered suites one at a time, in registry order.

    Each suite goes through ``before_all -> run -> after_all`` inside its own
    failure scope, so a failing suite never stops the next one from running.
    A suite whose ``before_all`` fails skips straight to the end: neither its
    test bodies nor its ``after_all`` run.
    """

    def __init__(self, registry: Optional[SuiteRegistry] = None):
        self.registry = registry if registry is not None else default_registry()

    def run(self, suite_name: Optional[str] = None) -> TestSummary:
        """
        Run every automatic suite, or only the suite named ``suite_name``.

        Args:
            suite_name: Suite to run regardless of its automatic flag

        Returns:
            TestSummary with results from all selected suites

        Raises:
            SuiteNotFoundError: If ``suite_name`` is not registered
        """
        start_ms = int(time.time() * 1000)
        summary = TestSummary()

        suites = self.registry.select(suite_name)
        if not suites:
            logger.warning("No suites selected")

        for suite in suites:
            summary.add_suite(self.run_suite(suite))

        summary.duration_ms = int(time.time() * 1000) - start_ms

        if summary.exit_code == 0:
            logger.info(f"All {len(summary.suites)} suite(s) passed")
        else:
            logger.error(
                f"{summary.assertion_failures} assertion(s) failed in: {', '.join(summary.failed_suites)}"
            )
        return summary

    def run_suite(self, suite: Suite) -> TestSuiteResult:
        """
        Run one suite's full lifecycle.

        Args:
            suite: Suite to run

        Returns:
            TestSuiteResult
        """
        start_ms = int(time.time() * 1000)
        result = TestSuiteResult(name=suite.name, automatic=suite.automatic)
        suite.results = []

        logger.info(f"Beginning {suite.name}")

        with failure_signal.scope(suite.name) as record:
            logger.debug(f"Starting before-all for {suite.name}")
            if not call_guarded(suite.name, "before-all", suite.before_all) or record.count:
                result.setup_failed = True
                logger.critical(f"Before-all for {suite.name} failed, skipping its tests")
            else:
                logger.debug(f"Before-all for {suite.name} complete")

                logger.info(f"Running {suite.name}")
                call_guarded(suite.name, "run", suite.run)

                logger.debug(f"Starting after-all for {suite.name}")
                call_guarded(suite.name, "after-all", suite.after_all)
                logger.debug(f"After-all for {suite.name} complete")

        result.results = list(suite.results)
        result.failures = list(record.failures)
        result.duration_ms = int(time.time() * 1000) - start_ms

        if result.ok:
            logger.info(f"Suite {suite.name} complete: passed")
        else:
            logger.error(f"Suite {suite.name} complete: {len(result.failures)} failure(s)")
        return result


def run_all_suites(
    registry: Optional[SuiteRegistry] = None, suite_name: Optional[str] = None
) -> TestSummary:
    """
    Run all automatic suites (or the named one) from ``registry``.

    Args:
        registry: Registry to run from (the process-wide one by default)
        suite_name: Optional suite to run regardless of its automatic flag

    Returns:
        TestSummary with results from all suites
    """
    return SuiteRunner(registry).run(suite_name)
