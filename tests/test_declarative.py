"""Tests for suite_harness.suites.declarative."""

from suite_harness import FunctionSuite, SuiteRunner, check, define_suite


def test_define_suite_registers_function_suite(registry):
    suite = define_suite("plain", registry=registry)

    assert isinstance(suite, FunctionSuite)
    assert suite.automatic is True
    assert registry.names == ["plain"]


def test_manual_suite(registry):
    suite = define_suite("soak", automatic=False, registry=registry)

    assert suite.automatic is False
    assert registry.select() == []


def test_test_decorator_appends_in_declaration_order(registry):
    calls = []
    suite = define_suite("decorated", registry=registry)

    @suite.test
    def first():
        calls.append("first")

    @suite.test
    def second():
        calls.append("second")

    SuiteRunner(registry).run()

    assert calls == ["first", "second"]
    assert [name for name, _ in suite.tests] == ["first", "second"]


def test_named_tests_from_tuples(registry):
    suite = define_suite(
        "named",
        tests=[("custom name", lambda: check(True)), ("other", lambda: None)],
        registry=registry,
    )

    result = SuiteRunner(registry).run_suite(suite)

    assert [r.name for r in result.results] == ["custom name", "other"]


def test_hooks_wrap_each_test(registry):
    calls = []
    suite = define_suite(
        "hooks",
        tests=[lambda: calls.append("t1"), lambda: calls.append("t2")],
        before_all=lambda: calls.append("before_all"),
        before=lambda: calls.append("before"),
        after=lambda: calls.append("after"),
        after_all=lambda: calls.append("after_all"),
        registry=registry,
    )

    SuiteRunner(registry).run_suite(suite)

    assert calls == [
        "before_all",
        "before", "t1", "after",
        "before", "t2", "after",
        "after_all",
    ]


def test_missing_hooks_default_to_no_ops(registry):
    suite = define_suite("bare", tests=[lambda: check(True)], registry=registry)

    result = SuiteRunner(registry).run_suite(suite)

    assert result.ok
    assert result.passed == 1
