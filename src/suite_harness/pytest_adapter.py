"""Expose registered suites to pytest.

Each suite becomes an xunit-style test class: ``setup_class`` runs
``before_all``, every declared test becomes a ``test_*`` method running
``before/body/after``, and ``teardown_class`` runs ``after_all``. Suites that
implement their own ``run()`` get a single ``test_run`` method.

Example (in a pytest test module):

    import myproject.suites  # registers suites
    from suite_harness.pytest_adapter import pytest_classes

    globals().update(pytest_classes())
"""

import re
from typing import Any, Callable, Dict, Optional

import pytest
from loguru import logger

from .assertions import failure_signal
from .registry import SuiteRegistry, default_registry
from .suites.base import Suite, call_guarded
from .suites.declarative import FunctionSuite


def _identifier(name: str) -> str:
    return re.sub(r"\W", "_", name)


def _class_name(suite: Suite) -> str:
    return "Test" + "".join(part.capitalize() for part in _identifier(suite.name).split("_"))


def _unique(name: str, taken) -> str:
    """Append 2, 3, ... to ``name`` until it is not in ``taken``."""
    candidate, n = name, 1
    while candidate in taken:
        n += 1
        candidate = f"{name}{n}"
    return candidate


def _report_failures(failures: list) -> None:
    if failures:
        pytest.fail("; ".join(f.describe() for f in failures), pytrace=False)


def _make_test(suite: FunctionSuite, name: str, fn: Callable[[], None]) -> Callable[[Any], None]:
    def test(self) -> None:
        result = suite.run_test(name, fn)
        if not result.passed:
            pytest.fail(result.message or f"Test {name} failed", pytrace=False)

    test.__name__ = f"test_{_identifier(name)}"
    test.__doc__ = fn.__doc__
    return test


def _make_run(suite: Suite) -> Callable[[Any], None]:
    def test_run(self) -> None:
        active = failure_signal.active
        mark = active.count if active is not None else 0
        logger.info(f"Running {suite.name}")
        call_guarded(suite.name, "run", suite.run)
        _report_failures(active.since(mark) if active is not None else [])

    return test_run


def as_pytest_class(suite: Suite) -> type:
    """
    Build a pytest-collectable class for ``suite``.

    Args:
        suite: Registered suite

    Returns:
        A class named ``Test<SuiteName>``
    """
    state: Dict[str, Any] = {}

    def setup_class(cls) -> None:
        suite.results = []
        state["previous"] = failure_signal.begin(suite.name)
        logger.info(f"Beginning {suite.name}")
        logger.debug(f"Starting before-all for {suite.name}")
        if not call_guarded(suite.name, "before-all", suite.before_all) or failure_signal.active.count:
            record = failure_signal.end(state.pop("previous"))
            logger.critical(f"Before-all for {suite.name} failed, skipping its tests")
            _report_failures(record.failures)
        logger.debug(f"Before-all for {suite.name} complete")

    def teardown_class(cls) -> None:
        active = failure_signal.active
        mark = active.count if active is not None else 0
        logger.debug(f"Starting after-all for {suite.name}")
        call_guarded(suite.name, "after-all", suite.after_all)
        logger.debug(f"After-all for {suite.name} complete")
        record = failure_signal.end(state.pop("previous", None))
        logger.info(f"Suite {suite.name} complete: {'passed' if not record.failures else 'failed'}")
        _report_failures(record.since(mark))

    namespace: Dict[str, Any] = {
        "__doc__": f"pytest view of the {suite.name} suite.",
        "__module__": __name__,
        "suite": suite,
        "setup_class": classmethod(setup_class),
        "teardown_class": classmethod(teardown_class),
    }

    if isinstance(suite, FunctionSuite):
        for name, fn in suite.tests:
            test = _make_test(suite, name, fn)
            test.__name__ = _unique(test.__name__, namespace)
            namespace[test.__name__] = test
    else:
        namespace["test_run"] = _make_run(suite)

    return type(_class_name(suite), (), namespace)


def pytest_classes(
    registry: Optional[SuiteRegistry] = None, include_manual: bool = False
) -> Dict[str, type]:
    """
    Build pytest classes for the suites in ``registry``, in registry order.

    Args:
        registry: Registry to expose (the process-wide one by default)
        include_manual: Also expose manual suites

    Returns:
        Mapping of class name to class, ready for ``globals().update``
    """
    registry = registry if registry is not None else default_registry()
    classes: Dict[str, type] = {}
    for suite in registry:
        if suite.automatic or include_manual:
            cls = as_pytest_class(suite)
            # distinct suite names can map to one class name, e.g. "a-b" and "a_b"
            cls.__name__ = cls.__qualname__ = _unique(cls.__name__, classes)
            classes[cls.__name__] = cls
    return classes
