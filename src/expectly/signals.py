"""Deliver expectations to the enclosing test frame.

A test frame installs a recovery point with :func:`continue_test`. When an
assertion raises an expectation, the innermost handler is offered it first;
a handler that returns ``True`` takes the expectation over and execution
resumes right after the assertion, so the remaining assertions of the test
body still run. A handler that returns anything else passes the expectation
on to the next handler out.

Without any recovering handler, successes are returned silently, skips raise
:class:`~expectly.skip.SkipNotice` and broken expectations raise
:class:`~expectly.errors.ExpectationFailed`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from expectly.conversion import as_expectation
from expectly.errors import ExpectationFailed
from expectly.expectation import Expectation, Kind, Location, update
from expectly.skip import SkipNotice

Handler = Callable[[Expectation], object]

_handlers: ContextVar[tuple[Handler, ...]] = ContextVar(
    "expectly_handlers", default=()
)


@contextmanager
def continue_test(handler: Handler) -> Iterator[None]:
    """Install ``handler`` as the innermost recovery point for the block."""
    token = _handlers.set(_handlers.get() + (handler,))
    try:
        yield
    finally:
        _handlers.reset(token)


def active_handlers() -> tuple[Handler, ...]:
    return _handlers.get()


def raise_expectation(exp: Expectation) -> Expectation:
    """Signal ``exp`` to the installed recovery points.

    Returns ``exp`` once a handler has recovered it.
    """
    for handler in reversed(_handlers.get()):
        if handler(exp) is True:
            return exp

    if exp.kind is Kind.SKIP:
        raise SkipNotice(exp.message)
    if exp.broken:
        raise ExpectationFailed(exp)
    return exp


def expect(
    value: object,
    message: str | None = None,
    location: Location | None = None,
    info: str | None = None,
    label: str | None = None,
) -> Expectation:
    """Convert ``value`` to an expectation and signal it.

    The caller's source position is attached unless the result already
    carries one or ``location`` is given.
    """
    exp = as_expectation(value, message, location)
    if exp.location is None:
        exp = exp.with_location(Location.from_frame(depth=1))
    if info is not None or label is not None:
        exp = update(exp, exp.location, info=info, label=label)
    return raise_expectation(exp)
