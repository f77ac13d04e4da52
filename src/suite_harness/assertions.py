"""Assertions and the process-wide failure signal.

A failed :func:`check` never raises. It logs a critical diagnostic naming the
assertion site and calls :func:`fail`, which records the failure against the
suite that is currently running. The runner reads the record once the suite
has finished, so a single test body can report several failures in one pass.

Example:

    from suite_harness import check

    def addition() -> None:
        check(1 + 1 == 2)
        check(2 + 2 == 5, "arithmetic is broken")  # recorded, execution continues
"""

import os
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional

from loguru import logger

from .types import AssertionFailure


class SuiteFailures:
    """Failures recorded while one suite was active."""

    def __init__(self, suite: str):
        self.suite = suite
        self.failures: List[AssertionFailure] = []

    @property
    def count(self) -> int:
        return len(self.failures)

    def since(self, mark: int) -> List[AssertionFailure]:
        """Failures recorded after ``mark`` (a previous ``count``)."""
        return self.failures[mark:]


class FailureSignal:
    """Counts assertion failures for the current run."""

    def __init__(self) -> None:
        self.total = 0
        self._active: Optional[SuiteFailures] = None

    @property
    def active(self) -> Optional[SuiteFailures]:
        return self._active

    def begin(self, suite: str) -> Optional[SuiteFailures]:
        """
        Mark ``suite`` as the active suite.

        Returns:
            The previously active record, to be handed back to :meth:`end`.
        """
        previous = self._active
        self._active = SuiteFailures(suite)
        return previous

    def end(self, previous: Optional[SuiteFailures] = None) -> SuiteFailures:
        """Deactivate the current suite and return what it recorded."""
        if self._active is None:
            raise RuntimeError("No suite run is active")
        finished = self._active
        self._active = previous
        return finished

    @contextmanager
    def scope(self, suite: str) -> Iterator[SuiteFailures]:
        previous = self.begin(suite)
        record = self._active
        try:
            yield record
        finally:
            self.end(previous)

    def record(self, site: str, message: Optional[str] = None) -> Optional[AssertionFailure]:
        if self._active is None:
            logger.warning(f"fail() called outside of a suite run ({site}); ignoring")
            return None
        failure = AssertionFailure(suite=self._active.suite, site=site, message=message)
        self._active.failures.append(failure)
        self.total += 1
        return failure

    def reset(self) -> None:
        self.total = 0
        self._active = None


failure_signal = FailureSignal()


def _caller_site(depth: int) -> str:
    frame = sys._getframe(depth + 1)
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


def fail(message: Optional[str] = None, site: Optional[str] = None) -> None:
    """
    Record a failure against the running suite without unwinding the caller.

    Args:
        message: Optional description of what went wrong
        site: Assertion site; defaults to the caller's ``file:line``
    """
    failure_signal.record(site or _caller_site(1), message)


def check(condition: object, message: Optional[str] = None) -> bool:
    """
    Assert ``condition``; on failure log it at critical level and call :func:`fail`.

    Args:
        condition: Value that must be truthy
        message: Optional text included in the diagnostic

    Returns:
        The truth value of ``condition``
    """
    if condition:
        return True

    site = _caller_site(1)
    if message:
        logger.opt(depth=1).critical(f"Assertion {site} failed: {message}")
    else:
        logger.opt(depth=1).critical(f"Assertion {site} failed")
    fail(message, site=site)
    return False
