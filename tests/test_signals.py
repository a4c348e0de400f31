"""Tests for delivering expectations to recovery points."""

import inspect

import pytest

from expectly import (
    ExpectationFailed,
    Kind,
    Location,
    SkipNotice,
    UnsupportedConversion,
    continue_test,
    expect,
    make_expectation,
    raise_expectation,
)
from expectly.signals import active_handlers


def test_success_without_recovery_point_returns():
    exp = make_expectation(Kind.SUCCESS, "ok")
    assert raise_expectation(exp) is exp


def test_failure_without_recovery_point_is_uncaught():
    exp = make_expectation(Kind.FAILURE, "x was not y")
    with pytest.raises(ExpectationFailed) as excinfo:
        raise_expectation(exp)
    assert excinfo.value.expectation is exp


def test_error_without_recovery_point_is_uncaught():
    with pytest.raises(ExpectationFailed):
        raise_expectation(make_expectation(Kind.ERROR, "boom"))


def test_skip_without_recovery_point_raises_skip_notice():
    with pytest.raises(SkipNotice, match="later"):
        raise_expectation(make_expectation(Kind.SKIP, "later"))


def test_recovered_failure_resumes_after_assertion():
    seen = []
    with continue_test(lambda exp: seen.append(exp) or True):
        first = raise_expectation(make_expectation(Kind.FAILURE, "first"))
        second = raise_expectation(make_expectation(Kind.SUCCESS, "second"))

    assert [e.message for e in seen] == ["first", "second"]
    assert first.kind is Kind.FAILURE
    assert second.kind is Kind.SUCCESS


def test_declining_handler_passes_to_outer_recovery_point():
    inner_seen, outer_seen = [], []

    def inner(exp):
        inner_seen.append(exp)
        return False

    def outer(exp):
        outer_seen.append(exp)
        return True

    with continue_test(outer):
        with continue_test(inner):
            raise_expectation(make_expectation(Kind.FAILURE, "bad"))

    assert len(inner_seen) == 1
    assert len(outer_seen) == 1


def test_innermost_recovery_point_wins():
    outer_seen = []
    with continue_test(lambda exp: outer_seen.append(exp) or True):
        with continue_test(lambda exp: True):
            raise_expectation(make_expectation(Kind.FAILURE, "bad"))
    assert outer_seen == []


def test_all_handlers_declining_falls_back_to_uncaught():
    with continue_test(lambda exp: None):
        with pytest.raises(ExpectationFailed):
            raise_expectation(make_expectation(Kind.FAILURE, "bad"))


def test_recovery_point_is_removed_after_block():
    assert active_handlers() == ()
    with continue_test(lambda exp: True):
        assert len(active_handlers()) == 1
    assert active_handlers() == ()


def test_recovery_point_is_removed_after_exception():
    with pytest.raises(RuntimeError):
        with continue_test(lambda exp: True):
            raise RuntimeError("fatal")
    assert active_handlers() == ()


def test_expect_attaches_caller_location():
    line = inspect.currentframe().f_lineno + 1
    exp = expect(True, "ok")
    assert exp.location.file == __file__
    assert exp.location.line == line


def test_expect_keeps_given_location():
    loc = Location(token="block-2")
    assert expect(True, "ok", location=loc).location == loc


def test_expect_decorates_with_label_and_info():
    with continue_test(lambda exp: True):
        exp = expect(False, "failed", info="extra", label="CTX:")
    assert exp.message == "CTX: failed\nextra"
    assert exp.location is not None


def test_usage_errors_bypass_recovery_points():
    seen = []
    with continue_test(lambda exp: seen.append(exp) or True):
        with pytest.raises(UnsupportedConversion):
            expect(42)
    assert seen == []
