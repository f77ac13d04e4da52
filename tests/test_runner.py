"""Tests for suite_harness.runner."""

import pytest

from suite_harness import (
    Suite,
    SuiteNotFoundError,
    SuiteRunner,
    check,
    define_suite,
    failure_signal,
    run_all_suites,
)


def _recording_suite(name, log, registry, automatic=True, passing=True):
    def body():
        log.append(f"{name}:body")
        check(passing, f"{name} expectation")

    return define_suite(
        name,
        tests=[body],
        automatic=automatic,
        before_all=lambda: log.append(f"{name}:BeforeAll"),
        before=lambda: log.append(f"{name}:Before"),
        after=lambda: log.append(f"{name}:After"),
        after_all=lambda: log.append(f"{name}:AfterAll"),
        registry=registry,
    )


def test_automatic_run_executes_only_automatic_suites_in_order(registry):
    log = []
    _recording_suite("a", log, registry)
    _recording_suite("m", log, registry, automatic=False)
    _recording_suite("b", log, registry)

    summary = SuiteRunner(registry).run()

    assert [s.name for s in summary.suites] == ["a", "b"]
    assert not any(entry.startswith("m:") for entry in log)
    assert summary.exit_code == 0


def test_named_run_executes_manual_suite(registry):
    log = []
    _recording_suite("a", log, registry)
    _recording_suite("m", log, registry, automatic=False)

    summary = SuiteRunner(registry).run("m")

    assert [s.name for s in summary.suites] == ["m"]
    assert log == ["m:BeforeAll", "m:Before", "m:body", "m:After", "m:AfterAll"]
    assert summary.suites[0].automatic is False


def test_named_run_of_unknown_suite_raises(registry):
    _recording_suite("a", [], registry)

    with pytest.raises(SuiteNotFoundError):
        SuiteRunner(registry).run("missing")


def test_suites_begin_in_construction_order(registry, logs):
    for name in ["X", "Y", "Z"]:
        define_suite(name, tests=[lambda: None], registry=registry)

    SuiteRunner(registry).run()

    begun = [msg[len("Beginning "):] for msg in logs.starting_with("Beginning ")]
    assert begun == ["X", "Y", "Z"]


def test_failing_suite_does_not_affect_the_next(registry):
    log = []
    _recording_suite("A", log, registry, passing=False)
    _recording_suite("B", log, registry)

    summary = SuiteRunner(registry).run()

    assert summary.exit_code == 1
    assert summary.failed_suites == ["A"]
    assert [entry for entry in log if entry.startswith("B:")] == [
        "B:BeforeAll",
        "B:Before",
        "B:body",
        "B:After",
        "B:AfterAll",
    ]
    assert summary.suites[1].ok
    assert summary.suites[1].failures == []


def test_before_all_failure_lets_runner_continue(registry):
    log = []

    def broken_setup():
        log.append("A:BeforeAll")
        raise RuntimeError("no database")

    define_suite(
        "A",
        tests=[lambda: log.append("A:body")],
        before_all=broken_setup,
        registry=registry,
    )
    _recording_suite("B", log, registry)

    summary = SuiteRunner(registry).run()

    assert "A:body" not in log
    assert "B:body" in log
    assert summary.suites[0].setup_failed
    assert summary.suites[1].ok
    assert summary.exit_code == 1


def test_suite_raising_from_run_is_isolated(registry):
    class Exploding(Suite):
        def run(self):
            raise KeyError("missing fixture")

    Exploding(True, "exploding", registry=registry)
    log = []
    _recording_suite("after", log, registry)

    summary = SuiteRunner(registry).run()

    assert summary.suites[0].failures[0].site == "exploding:run"
    assert "after:body" in log
    assert summary.exit_code == 1


def test_all_passing_run_exits_zero(registry, logs):
    _recording_suite("one", [], registry)
    _recording_suite("two", [], registry)

    summary = run_all_suites(registry)

    assert summary.exit_code == 0
    assert summary.total == 2
    assert summary.passed == 2
    assert "All 2 suite(s) passed" in logs.messages("INFO")


def test_failure_signal_counts_every_failed_assertion(registry):
    def twice():
        check(False)
        check(False)

    define_suite("twice", tests=[twice], registry=registry)
    define_suite("once", tests=[lambda: check(False)], registry=registry)

    summary = SuiteRunner(registry).run()

    assert summary.assertion_failures == 3
    assert failure_signal.total == 3
    assert failure_signal.active is None


def test_empty_selection_passes(registry, logs):
    define_suite("manual-only", automatic=False, registry=registry)

    summary = SuiteRunner(registry).run()

    assert summary.suites == []
    assert summary.exit_code == 0
    assert "No suites selected" in logs.messages("WARNING")


def test_results_do_not_leak_between_runs(registry):
    suite = _recording_suite("repeat", [], registry)

    runner = SuiteRunner(registry)
    runner.run()
    second = runner.run()

    assert second.suites[0].total == 1
    assert len(suite.results) == 1


def test_system_exit_in_after_all_does_not_stop_the_run(registry):
    def shut_down():
        raise SystemExit("shutting down")

    define_suite("exiting", tests=[lambda: None], after_all=shut_down, registry=registry)
    log = []
    _recording_suite("later", log, registry)

    summary = SuiteRunner(registry).run()

    assert summary.suites[0].failures[0].site == "exiting:after-all"
    assert log == ["later:BeforeAll", "later:Before", "later:body", "later:After", "later:AfterAll"]
    assert summary.exit_code == 1
