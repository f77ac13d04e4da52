"""Tests for suite_harness.assertions."""

import pytest

from suite_harness import FailureSignal, check, fail, failure_signal


def test_check_returns_condition_truth():
    with failure_signal.scope("s"):
        assert check(1) is True
        assert check([]) is False


def test_passing_check_records_nothing():
    with failure_signal.scope("s") as record:
        check(True)

    assert record.count == 0
    assert failure_signal.total == 0


def test_failed_check_logs_critical_with_site(logs):
    with failure_signal.scope("s") as record:
        check(False, "values differ")

    critical = logs.messages("CRITICAL")
    assert len(critical) == 1
    assert critical[0].startswith("Assertion test_assertions.py:")
    assert critical[0].endswith("failed: values differ")
    assert record.failures[0].site.startswith("test_assertions.py:")
    assert record.failures[0].suite == "s"


def test_failed_check_without_message(logs):
    with failure_signal.scope("s"):
        check(0)

    assert logs.messages("CRITICAL")[0].endswith(" failed")


def test_fail_does_not_raise_and_records():
    with failure_signal.scope("s") as record:
        fail("first")
        fail("second", site="custom-site")
        reached = True

    assert reached
    assert [f.describe() for f in record.failures][1] == "custom-site: second"
    assert record.count == 2
    assert failure_signal.total == 2


def test_fail_outside_a_suite_warns_and_is_ignored(logs):
    fail("stray")
    check(False)

    assert failure_signal.total == 0
    warnings = logs.messages("WARNING")
    assert len(warnings) == 2
    assert "outside of a suite run" in warnings[0]


def test_scopes_restore_the_previous_suite():
    with failure_signal.scope("outer") as outer:
        with failure_signal.scope("inner") as inner:
            fail("in inner")
        fail("in outer")

    assert [f.suite for f in inner.failures] == ["inner"]
    assert [f.suite for f in outer.failures] == ["outer"]
    assert failure_signal.active is None


def test_end_without_begin_raises():
    signal = FailureSignal()

    with pytest.raises(RuntimeError):
        signal.end()


def test_since_returns_failures_after_mark():
    with failure_signal.scope("s") as record:
        fail("before mark")
        mark = record.count
        fail("after mark")

    assert [f.message for f in record.since(mark)] == ["after mark"]


def test_reset_clears_total_and_active():
    signal = FailureSignal()
    signal.begin("s")
    signal.record("site")

    signal.reset()

    assert signal.total == 0
    assert signal.active is None
