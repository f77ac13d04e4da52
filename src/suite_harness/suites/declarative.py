"""Suites declared from plain functions.

Example:

    from suite_harness import check, define_suite

    arithmetic = define_suite("arithmetic", before=reset_calculator)

    @arithmetic.test
    def addition() -> None:
        check(1 + 1 == 2)

    # Manual suites only run when selected by name
    soak = define_suite("soak", tests=[long_running_check], automatic=False)
"""

from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..registry import SuiteRegistry
from .base import Suite

Hook = Callable[[], None]
TestSpec = Union[Hook, Tuple[str, Hook]]


def _as_named(test: TestSpec) -> Tuple[str, Hook]:
    if isinstance(test, tuple):
        name, fn = test
        return name, fn
    return getattr(test, "__name__", repr(test)), test


class FunctionSuite(Suite):
    """Suite whose hooks and test bodies are plain callables."""

    def __init__(
        self,
        name: str,
        tests: Iterable[TestSpec] = (),
        automatic: bool = True,
        before_all: Optional[Hook] = None,
        before: Optional[Hook] = None,
        after: Optional[Hook] = None,
        after_all: Optional[Hook] = None,
        registry: Optional[SuiteRegistry] = None,
    ):
        self.tests: List[Tuple[str, Hook]] = [_as_named(t) for t in tests]
        self._before_all = before_all
        self._before = before
        self._after = after
        self._after_all = after_all
        super().__init__(automatic, name, registry=registry)

    def test(self, fn: Hook) -> Hook:
        """Decorator adding ``fn`` as the next test of this suite."""
        self.tests.append(_as_named(fn))
        return fn

    def before_all(self) -> None:
        if self._before_all:
            self._before_all()

    def before(self) -> None:
        if self._before:
            self._before()

    def run(self) -> None:
        for name, fn in self.tests:
            self.run_test(name, fn)

    def after(self) -> None:
        if self._after:
            self._after()

    def after_all(self) -> None:
        if self._after_all:
            self._after_all()


def define_suite(
    name: str,
    tests: Iterable[TestSpec] = (),
    *,
    automatic: bool = True,
    before_all: Optional[Hook] = None,
    before: Optional[Hook] = None,
    after: Optional[Hook] = None,
    after_all: Optional[Hook] = None,
    registry: Optional[SuiteRegistry] = None,
) -> FunctionSuite:
    """
    Declare and register a suite in one call.

    Args:
        name: Suite name
        tests: Test functions, or (name, function) pairs, in run order
        automatic: False for a suite that only runs when selected by name
        before_all: Suite setup
        before: Per-test setup
        after: Per-test teardown
        after_all: Suite teardown
        registry: Registry to join (the process-wide one by default)

    Returns:
        The registered FunctionSuite
    """
    return FunctionSuite(
        name,
        tests=tests,
        automatic=automatic,
        before_all=before_all,
        before=before,
        after=after,
        after_all=after_all,
        registry=registry,
    )
