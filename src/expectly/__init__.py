"""Assertion outcomes and their delivery to the running test."""

from expectly.classify import (
    expectation_type,
    is_broken,
    is_error,
    is_failure,
    is_skip,
    is_success,
)
from expectly.conversion import as_expectation
from expectly.errors import (
    ExpectationFailed,
    ExpectlyError,
    InvalidExpectation,
    InvalidKind,
    InvalidMessage,
    UnsupportedConversion,
)
from expectly.expectation import (
    Expectation,
    Kind,
    Location,
    is_expectation,
    make_expectation,
    succeed_if,
    update,
)
from expectly.formatting import format_expectation, single_letter_summary
from expectly.signals import continue_test, expect, raise_expectation
from expectly.skip import SkipNotice, skip, skip_if, skip_if_not
from expectly.transforms import negate

__all__ = [
    "Expectation",
    "ExpectationFailed",
    "ExpectlyError",
    "InvalidExpectation",
    "InvalidKind",
    "InvalidMessage",
    "Kind",
    "Location",
    "SkipNotice",
    "UnsupportedConversion",
    "as_expectation",
    "continue_test",
    "expect",
    "expectation_type",
    "format_expectation",
    "is_broken",
    "is_error",
    "is_expectation",
    "is_failure",
    "is_skip",
    "is_success",
    "make_expectation",
    "negate",
    "raise_expectation",
    "single_letter_summary",
    "skip",
    "skip_if",
    "skip_if_not",
    "succeed_if",
    "update",
]
