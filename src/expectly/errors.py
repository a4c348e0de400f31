"""Exception taxonomy for expectly.

Usage errors (``ExpectlyError`` subclasses) signal a defect in test code or in
the library itself. They are never offered to a recovery point and always
surface to the caller. ``ExpectationFailed`` and ``SkipNotice`` are outcome
signals that carry test-subject results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from expectly.expectation import Expectation


class ExpectlyError(Exception):
    """Base class for misuse of the expectly API."""


class InvalidKind(ExpectlyError, ValueError):
    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(
            f"'{kind}' is not a valid expectation kind; "
            "expected one of 'success', 'failure', 'error', 'skip'"
        )


class InvalidMessage(ExpectlyError, ValueError):
    """A failure or error was constructed without describing its cause."""


class InvalidExpectation(ExpectlyError, TypeError):
    """An operation that needs an Expectation was given something else."""


class UnsupportedConversion(ExpectlyError, TypeError):
    def __init__(self, type_names: list[str]):
        self.type_names = type_names
        joined = "', '".join(type_names)
        super().__init__(f"Don't know how to convert '{joined}' to expectation.")


class ExpectationFailed(AssertionError):
    """A broken expectation that no recovery point took over."""

    def __init__(self, expectation: Expectation):
        self.expectation = expectation
        super().__init__(expectation.message)
