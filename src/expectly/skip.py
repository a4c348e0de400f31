"""Skip signal and helpers for bailing out of a test."""

from __future__ import annotations


class SkipNotice(Exception):
    """Raised to mark the running test as skipped."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


def skip(message: str) -> None:
    raise SkipNotice(message)


def skip_if(condition: object, message: str | None = None) -> None:
    if condition:
        skip(message or "skip_if condition was true")


def skip_if_not(condition: object, message: str | None = None) -> None:
    if not condition:
        skip(message or "skip_if_not condition was false")
