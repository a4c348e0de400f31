"""Logical transforms over expectations."""

from __future__ import annotations

from expectly.classify import is_failure, is_success
from expectly.errors import InvalidExpectation
from expectly.expectation import Expectation, is_expectation, succeed_if


def negate(exp: Expectation) -> Expectation:
    """Swap success and failure, wrapping the message in ``NOT(...)``.

    Errors and skips have no logical opposite and are returned as-is.
    """
    if not is_expectation(exp):
        raise InvalidExpectation(
            f"negate() expects an Expectation, got {type(exp).__name__}"
        )

    if not is_success(exp) and not is_failure(exp):
        return exp

    return succeed_if(
        is_failure(exp), f"NOT({exp.message})", location=exp.location
    )
